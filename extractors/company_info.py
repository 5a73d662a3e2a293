"""
Extraction of the company profile from the organization/companies endpoint.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from extractors.lookup import build_lookup_index, extract_field, resolve, resolve_chain, resolve_field
from models.entity_models import CompanyEntity, GenericEntity
from models.main_models import CompanyProfile, Location

def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None

def _as_int(value: Any) -> Optional[int]:
    return value if isinstance(value, int) and value else None

def get_industries(company: CompanyEntity, index) -> List[str]:
    """
    Resolves industry references to their display names, in source order.
    """
    industries = []
    for urn in company.company_industries:
        name = resolve_field(index, urn, "localizedName")
        if name and isinstance(name, str):
            industries.append(name)
    return industries

def get_follower_count(company: CompanyEntity, index) -> Optional[int]:
    if not company.following_info:
        return None
    following_info = resolve(index, company.following_info, GenericEntity)
    if following_info is None:
        return None
    follower_count = following_info.get("followerCount")
    return follower_count if isinstance(follower_count, int) else None

def get_associated_hashtags(company: CompanyEntity, index) -> List[str]:
    """
    Resolves hashtags through their content topic to the feed topic name.
    """
    hashtags = []
    for urn in company.associated_hashtags:
        feed_topic = resolve_chain(index, urn, "*feedTopic")
        if not isinstance(feed_topic, GenericEntity):
            continue
        name = extract_field(feed_topic.data, "topic.name")
        if name and isinstance(name, str):
            hashtags.append(name)
    return hashtags

def build_location(address: Dict[str, Any], is_headquarters: bool) -> Optional[Location]:
    try:
        return Location.model_validate({
            **address,
            "isHeadquarters": is_headquarters,
            "description": address.get("description") or None,
        })
    except ValidationError as e:
        logging.warning("Skipping malformed address: %s", e)
        return None

def get_locations(company: CompanyEntity):
    """
    Returns the headquarters location and the full location list,
    headquarters first followed by the other confirmed locations.
    """
    headquarters = None
    if company.headquarter:
        headquarters = build_location(company.headquarter, True)

    locations = [headquarters] if headquarters else []
    for address in company.confirmed_locations:
        if address.get("headquarter"):
            continue
        location = build_location(address, False)
        if location:
            locations.append(location)
    return headquarters, locations

def get_logo_url(company: CompanyEntity) -> Optional[str]:
    """
    Builds the logo URL from the widest artifact.
    """
    artifacts = extract_field(company.logo, "image.artifacts")
    if not artifacts or not isinstance(artifacts, list):
        return None

    largest = None
    for artifact in artifacts:
        if not isinstance(artifact, dict):
            continue
        # Ties go to the later artifact
        if largest is None or (artifact.get("width") or 0) >= (largest.get("width") or 0):
            largest = artifact
    if largest is None or not largest.get("fileIdentifyingUrlPathSegment"):
        return None

    root_url = extract_field(company.logo, "image.rootUrl") or ""
    return root_url + largest["fileIdentifyingUrlPathSegment"]

def format_employee_count_range(staff_count_range: Optional[Dict[str, Any]]) -> Optional[str]:
    """
    Formats a staff count range, e.g. {start: 501, end: 1000} -> "501-1000"
    and {start: 10001} -> "10001+".
    """
    if not staff_count_range:
        return None
    start = staff_count_range.get("start")
    if start is None:
        return None
    end = staff_count_range.get("end")
    if end:
        return f"{start}-{end}"
    return f"{start}+"

def extract_company_data(api_response: Any) -> Optional[CompanyProfile]:
    """
    Analyzes the Voyager company response and extracts company information
    for CRM enrichment.

    The target company is identified by the URN in 'data.*elements' and
    looked up by URN, so the order of the 'included' array does not matter.

    Args:
        api_response (dict): The full JSON response from the Voyager API.

    Returns:
        Optional[CompanyProfile]: The extracted profile, or None if the
        envelope or the company entity is missing.
    """
    if not isinstance(api_response, dict) or not isinstance(api_response.get("included"), list):
        logging.error("Invalid API response structure: 'included' array is missing.")
        return None

    elements = extract_field(api_response, "data.*elements")
    target_urn = elements[0] if isinstance(elements, list) and elements else None
    if not target_urn:
        logging.error("Invalid API response structure: company URN is missing in 'data.*elements'.")
        return None

    index = build_lookup_index(api_response["included"])
    company = resolve(index, target_urn, CompanyEntity)
    if company is None:
        logging.error("Could not find the company object with URN '%s' in the response.", target_urn)
        return None

    industries = get_industries(company, index)
    headquarters, locations = get_locations(company)

    try:
        return CompanyProfile(
            linkedin_urn=company.entity_urn,
            linkedin_url=company.url,
            name=company.name or None,
            tagline=company.tagline or None,
            description=company.description or None,
            website=company.company_page_url or None,
            phone=_as_str(extract_field(company.phone, "number")),
            industry=industries[0] if industries else None,
            all_industries=industries,
            company_type=_as_str(extract_field(company.company_type, "localizedName")),
            founded_year=_as_int(extract_field(company.founded_on, "year")),
            specialties=company.specialities,
            follower_count=get_follower_count(company, index),
            employee_count=company.staff_count or None,
            employee_count_range=format_employee_count_range(company.staff_count_range),
            headquarters=headquarters,
            locations=locations,
            logo_url=get_logo_url(company),
            associated_hashtags=get_associated_hashtags(company, index),
        )
    except ValidationError as e:
        logging.error("Company object '%s' could not be assembled: %s", target_urn, e)
        return None
