"""
Extraction of company employees from the people search clusters.
"""
import logging
import re
from typing import Any, List, Optional

from extractors.lookup import build_lookup_index, build_paging, extract_field, resolve, text_or
from models.entity_models import EntityResultEntity
from models.main_models import Employee, EmployeeExtractionResult

# urn:li:fsd_entityResultViewModel:(urn:li:fsd_profile:ACoAAB...,SEARCH_SRP,DEFAULT)
PROFILE_URN_PATTERN = re.compile(r"\(urn:li:fsd_profile:[^,)]+")
PREFERRED_PICTURE_WIDTHS = (200, 100)
# UTF-8 bullet decoded as latin-1 upstream
MISENCODED_BULLET = "â€¢"

def get_profile_urn(entity_result: EntityResultEntity) -> str:
    match = PROFILE_URN_PATTERN.search(entity_result.entity_urn or "")
    if not match:
        return "Unknown"
    return match.group(0)[1:]

def _artifact_url(artifact: Optional[dict], root_url: str) -> Optional[str]:
    segment = artifact.get("fileIdentifyingUrlPathSegment") if artifact else None
    if not segment or not isinstance(segment, str):
        return None
    if segment.startswith("https://"):
        return segment
    return f"{root_url}{segment}"

def get_profile_picture_url(image: Optional[dict]) -> Optional[str]:
    """
    Finds the best available profile picture URL.

    Prefers a 200px artifact, then 100px, then the first available one.
    Returns None when the result has no picture artifacts.
    """
    attributes = extract_field(image, "attributes")
    if not isinstance(attributes, list):
        return None
    picture = None
    for attribute in attributes:
        picture = extract_field(attribute, "detailData.nonEntityProfilePicture")
        if picture:
            break
    artifacts = extract_field(picture, "vectorImage.artifacts")
    if not isinstance(artifacts, list):
        return None
    artifacts = [artifact for artifact in artifacts if isinstance(artifact, dict)]
    root_url = extract_field(picture, "vectorImage.rootUrl") or ""

    for width in PREFERRED_PICTURE_WIDTHS:
        url = _artifact_url(next((a for a in artifacts if a.get("width") == width), None), root_url)
        if url:
            return url
    return _artifact_url(artifacts[0] if artifacts else None, root_url)

def get_connection_degree(entity_result: EntityResultEntity) -> Optional[str]:
    badge = extract_field(entity_result.badge_text, "text")
    if not isinstance(badge, str):
        return None
    return badge.replace(MISENCODED_BULLET, "", 1).strip()

def get_result_items(search_results: dict) -> List[Any]:
    # Only the first cluster carries the people results
    clusters = search_results.get("elements")
    if not isinstance(clusters, list) or not clusters:
        return []
    items = extract_field(clusters[0], "items")
    return items if isinstance(items, list) else []

def build_employee(entity_result: EntityResultEntity) -> Employee:
    fields = {
        "urn": get_profile_urn(entity_result),
        "full_name": text_or(extract_field(entity_result.title, "text"), "Unknown Name"),
        "headline": text_or(extract_field(entity_result.primary_subtitle, "text"), ""),
        "location": text_or(extract_field(entity_result.secondary_subtitle, "text"), "Unknown Location"),
        "profile_url": entity_result.navigation_url,
    }
    picture_url = get_profile_picture_url(entity_result.image)
    if picture_url is not None:
        fields["profile_picture_url"] = picture_url
    connection_degree = get_connection_degree(entity_result)
    if connection_degree is not None:
        fields["connection_degree"] = connection_degree
    return Employee(**fields)

def extract_company_employees(api_response: Any) -> Optional[EmployeeExtractionResult]:
    """
    Analyzes the Voyager people search response and extracts company
    employees with the paging data.

    Results without a navigation URL are private profiles ("LinkedIn
    Member") and are left out.

    Returns:
        Optional[EmployeeExtractionResult]: Employees and paging, or None
        if the search results envelope is missing.
    """
    if not isinstance(api_response, dict) or not isinstance(api_response.get("included"), list):
        logging.error("Invalid people response structure: 'included' array is missing.")
        return None

    search_results = extract_field(api_response, "data.data.searchDashClustersByAll")
    paging_info = build_paging(extract_field(search_results, "paging"))
    if paging_info is None:
        logging.error("Invalid people response structure: 'searchDashClustersByAll' is missing.")
        return None

    index = build_lookup_index(api_response["included"])
    employees = []
    for item in get_result_items(search_results):
        entity_result = resolve(index, extract_field(item, "item.*entityResult"), EntityResultEntity)
        if entity_result is None or not entity_result.navigation_url:
            continue
        employees.append(build_employee(entity_result))

    return EmployeeExtractionResult(employees=employees, paging=paging_info)
