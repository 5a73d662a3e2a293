"""
This module implements the main API,
handling API-key authentication, requests to the LinkedIn Voyager API,
and reshaping of its responses into flat company records.
"""

# =====================
# Imports and Global Setup
# =====================
import os
import json
import logging
import secrets
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
import uvicorn
from fastapi import FastAPI, HTTPException, Depends, Query, status
from fastapi.security import APIKeyHeader
from dotenv import load_dotenv

from extractors.company_info import extract_company_data
from extractors.company_jobs import extract_company_jobs
from extractors.company_people import extract_company_employees
from extractors.company_posts import extract_company_posts
from models.config_models import EndpointConfig, UpstreamConfig

# Load environment variables and configure logging
load_dotenv()
logging.basicConfig(level=logging.INFO)

# Security configuration
API_KEY = os.getenv("API_KEY")

# Upstream settings
LINKEDIN_BASE_URL = os.getenv("LINKEDIN_BASE_URL")
COOKIE_STRING = os.getenv("COOKIE_STRING")
CSRF_TOKEN = os.getenv("CSRF_TOKEN")
REQUEST_TIMEOUT = os.getenv("REQUEST_TIMEOUT")
POSTS_QUERY_ID = os.getenv("POSTS_QUERY_ID", "voyagerFeedDashOrganizationalPageUpdates")
PEOPLE_QUERY_ID = os.getenv("PEOPLE_QUERY_ID", "voyagerSearchDashClusters")
UPSTREAM_CONFIG_FILE = os.getenv("UPSTREAM_CONFIG_FILE")

PORT = int(os.getenv("PORT", "3000"))

DEFAULT_ENDPOINTS: Dict[str, Dict[str, str]] = {
    "company": {
        "path_template": (
            "/voyager/api/organization/companies"
            "?decorationId=com.linkedin.voyager.deco.organization.web.WebFullCompanyMain-28"
            "&q=universalName&universalName={universal_name}"
        ),
        "referer": "https://www.linkedin.com/company/",
    },
    "posts": {
        "path_template": (
            "/voyager/api/graphql?variables=(count:{count},start:{start}{pagination},"
            "organizationalPageUrn:urn%3Ali%3Afsd_organizationalPage%3A{company_id},"
            "moduleKey:ORGANIZATION_MEMBER_FEED_DESKTOP)&queryId={query_id}"
        ),
        "referer": "https://www.linkedin.com/company/",
    },
    "jobs": {
        "path_template": (
            "/voyager/api/voyagerJobsDashJobCards"
            "?decorationId=com.linkedin.voyager.dash.deco.jobs.search.JobSearchCardsCollection-220"
            "&count={count}&q=jobSearch"
            "&query=(origin:COMPANY_PAGE_JOBS_CLUSTER_EXPANSION,locationUnion:(geoId:92000000),"
            "selectedFilters:(company:List({company_id})),spellCorrectionEnabled:true)"
            "&start={start}"
        ),
        "referer": "https://www.linkedin.com/jobs/search/",
    },
    "people": {
        "path_template": (
            "/voyager/api/graphql?variables=(start:{start},count:{count},origin:FACETED_SEARCH,"
            "query:(flagshipSearchIntent:ORGANIZATIONS_PEOPLE_ALUMNI,"
            "queryParameters:List((key:currentCompany,value:List({company_id})),"
            "(key:resultType,value:List(PEOPLE))),includeFiltersInResponse:true))"
            "&queryId={query_id}"
        ),
        "referer": "https://www.linkedin.com/company/",
    },
}

api_key_header = APIKeyHeader(name="x-api-key", auto_error=False)

# Shared session to reuse HTTP connections to the upstream API
session = requests.Session()

app = FastAPI()

# =====================
# Utility Functions
# =====================

def load_upstream_config(config_path: Optional[str] = UPSTREAM_CONFIG_FILE) -> UpstreamConfig:
    """
    Build and validate the upstream configuration.

    Endpoint templates default to DEFAULT_ENDPOINTS; an optional JSON file
    may override any field or endpoint. Environment variables take
    precedence for the base URL, credentials and timeout.

    Args:
        config_path (str): Optional path to a JSON configuration file.

    Returns:
        UpstreamConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If a configuration file is given but does not exist.
    """
    raw_config: Dict[str, Any] = {}
    if config_path:
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file {config_path} not found")
        with open(config_path, "r", encoding="utf-8") as f:
            raw_config = json.load(f)

    raw_config["endpoints"] = {**DEFAULT_ENDPOINTS, **raw_config.get("endpoints", {})}
    env_overrides = {
        "base_url": LINKEDIN_BASE_URL,
        "cookie_string": COOKIE_STRING,
        "csrf_token": CSRF_TOKEN,
        "timeout": REQUEST_TIMEOUT,
    }
    raw_config.update({key: value for key, value in env_overrides.items() if value is not None})
    # Validation happens here
    return UpstreamConfig.model_validate(raw_config)

def company_id_from_urn(company_urn: str) -> str:
    """
    Returns the numeric company id, e.g. "urn:li:fsd_company:1035" -> "1035".
    A bare id is returned unchanged.
    """
    return company_urn.split(":")[-1]

def fetch_voyager(endpoint: str, **values: Any) -> Dict[str, Any]:
    """
    Performs one GET request against a configured Voyager endpoint and
    returns the decoded JSON body.

    Raises:
        HTTPException: 409 if the request fails or the body is not JSON.
    """
    endpoint_conf: EndpointConfig = upstream_config.endpoints[endpoint]
    url = upstream_config.url_for(endpoint, **values)
    try:
        response = session.get(
            url,
            headers=upstream_config.headers(endpoint_conf.referer),
            timeout=upstream_config.timeout,
        )
    except requests.RequestException as exc:
        logging.error("Request to the %s endpoint failed: %s", endpoint, exc)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="request failed."
        ) from exc

    if not response.ok:
        logging.error("Request to the %s endpoint failed: %s %s", endpoint, response.status_code, response.reason)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"request failed: {response.reason}"
        )

    try:
        return response.json()
    except ValueError as exc:
        logging.error("The %s endpoint returned a non-JSON body", endpoint)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="request failed: invalid JSON response."
        ) from exc

def build_response(payload: Dict[str, Any], raw_data: Dict[str, Any], include_raw_data: bool) -> Dict[str, Any]:
    """
    Wraps extracted records in the standard response envelope.
    """
    response = {"status": "ok", **payload}
    if include_raw_data:
        response["rawData"] = raw_data
    return response

def require_param(value: Optional[str], name: str) -> str:
    if not value:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{name} is required."
        )
    return value

def extraction_failed() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="request failed: unexpected response structure."
    )

try:
    upstream_config = load_upstream_config()
    logging.info("Loaded upstream config for endpoints: %s", ", ".join(upstream_config.endpoints))
except Exception as e:
    logging.error("Error loading upstream config: %s", e)
    raise e

# =====================
# Authentication
# =====================

async def verify_api_key(api_key: Optional[str] = Depends(api_key_header)) -> str:
    """
    Checks the x-api-key header against the configured secret.
    """
    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="x-api-key header is required."
        )
    if not API_KEY or not secrets.compare_digest(api_key.encode(), API_KEY.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key."
        )
    return api_key

# =====================
# API Endpoints
# =====================

@app.get("/health")
def health():
    """
    Liveness check.
    """
    return {"status": "ok"}

@app.get("/company")
def get_company(
    company_uni_name: Optional[str] = Query(None, alias="companyUniName"),
    include_raw_data: bool = Query(False, alias="includeRawData"),
    api_key: str = Depends(verify_api_key)
):
    """
    Endpoint for fetching a company profile by its universal name
    (the slug in linkedin.com/company/<name>).
    """
    universal_name = require_param(company_uni_name, "companyUniName")
    logging.info("Fetching company profile for %s", universal_name)

    data = fetch_voyager("company", universal_name=quote(universal_name, safe=""))
    company_info = extract_company_data(data)
    if company_info is None:
        raise extraction_failed()

    return build_response({"companyInfo": company_info.to_response()}, data, include_raw_data)

@app.get("/company/posts")
def get_company_posts(
    company_urn: Optional[str] = Query(None, alias="companyUrn"),
    start: int = Query(0, ge=0),
    count: int = Query(10, ge=1),
    pagination_token: Optional[str] = Query(None, alias="paginationToken"),
    include_raw_data: bool = Query(False, alias="includeRawData"),
    api_key: str = Depends(verify_api_key)
):
    """
    Endpoint for fetching one page of the company's posts feed.
    """
    company_id = company_id_from_urn(require_param(company_urn, "companyUrn"))
    logging.info("Fetching posts for company %s (start=%s, count=%s)", company_id, start, count)

    pagination = f",paginationToken:{quote(pagination_token, safe='')}" if pagination_token else ""
    data = fetch_voyager(
        "posts",
        company_id=quote(company_id, safe=""),
        start=start,
        count=count,
        pagination=pagination,
        query_id=POSTS_QUERY_ID,
    )
    result = extract_company_posts(data)
    if result is None:
        raise extraction_failed()

    return build_response(result.to_response(), data, include_raw_data)

@app.get("/company/jobs")
def get_company_jobs(
    company_urn: Optional[str] = Query(None, alias="companyUrn"),
    start: int = Query(0, ge=0),
    count: int = Query(25, ge=1),
    include_raw_data: bool = Query(False, alias="includeRawData"),
    api_key: str = Depends(verify_api_key)
):
    """
    Endpoint for fetching one page of the company's open job listings.
    """
    company_id = company_id_from_urn(require_param(company_urn, "companyUrn"))
    logging.info("Fetching jobs for company %s (start=%s, count=%s)", company_id, start, count)

    data = fetch_voyager("jobs", company_id=quote(company_id, safe=""), start=start, count=count)
    result = extract_company_jobs(data)
    if result is None:
        raise extraction_failed()

    return build_response(result.to_response(), data, include_raw_data)

@app.get("/company/people")
def get_company_people(
    company_urn: Optional[str] = Query(None, alias="companyUrn"),
    start: int = Query(0, ge=0),
    count: int = Query(10, ge=1),
    include_raw_data: bool = Query(False, alias="includeRawData"),
    api_key: str = Depends(verify_api_key)
):
    """
    Endpoint for fetching one page of the company's employees.
    """
    company_id = company_id_from_urn(require_param(company_urn, "companyUrn"))
    logging.info("Fetching people for company %s (start=%s, count=%s)", company_id, start, count)

    data = fetch_voyager(
        "people",
        company_id=quote(company_id, safe=""),
        start=start,
        count=count,
        query_id=PEOPLE_QUERY_ID,
    )
    result = extract_company_employees(data)
    if result is None:
        raise extraction_failed()

    return build_response(result.to_response(), data, include_raw_data)

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT)
