"""
Module containing configuration models for the upstream LinkedIn connection.
"""

from typing import Dict
from pydantic import BaseModel, Field

class EndpointConfig(BaseModel):
    """
    Configuration for a single upstream endpoint.

    Attributes:
        path_template: Path and query string, formatted with request values.
        referer: Referer header sent with the request.
    """
    path_template: str = Field(
        ...,
        description="Path and query string, formatted with request values"
    )
    referer: str = Field(
        "https://www.linkedin.com/",
        description="Referer header sent with the request"
    )

class UpstreamConfig(BaseModel):
    """
    Configuration for outbound requests to the LinkedIn Voyager API.

    Attributes:
        base_url: Scheme and host of the upstream API.
        cookie_string: Session cookie forwarded with every request.
        csrf_token: CSRF token matching the JSESSIONID in the cookie.
        timeout: Request timeout in seconds.
        endpoints: Endpoint templates keyed by name (company, posts, jobs, people).
    """
    base_url: str = Field(
        "https://www.linkedin.com",
        description="Scheme and host of the upstream API"
    )
    cookie_string: str = Field(
        "",
        description="Session cookie forwarded with every request"
    )
    csrf_token: str = Field(
        "ajax:0000000000000000000",
        description="CSRF token matching the JSESSIONID in the cookie"
    )
    timeout: float = Field(
        30,
        description="Request timeout in seconds"
    )
    endpoints: Dict[str, EndpointConfig] = Field(
        default_factory=dict,
        description="Endpoint templates keyed by name"
    )

    def headers(self, referer: str) -> Dict[str, str]:
        """
        Builds the header set the Voyager API expects from a browser session.
        """
        return {
            "accept": "application/vnd.linkedin.normalized+json+2.1",
            "accept-language": "en-US,en;q=0.9",
            "csrf-token": self.csrf_token,
            "x-li-lang": "en_US",
            "x-restli-protocol-version": "2.0.0",
            "cookie": self.cookie_string,
            "Referer": referer,
        }

    def url_for(self, endpoint: str, **values) -> str:
        """
        Formats the URL for a named endpoint.

        Raises:
            KeyError: If the endpoint is not configured.
        """
        endpoint_conf = self.endpoints[endpoint]
        return self.base_url + endpoint_conf.path_template.format(**values)
