"""
Extraction of job listings from the job cards endpoint.
"""
import logging
import re
from typing import Any, Optional, Tuple

from extractors.lookup import build_lookup_index, build_paging, extract_field, resolve, text_or
from models.entity_models import JobPostingCardEntity
from models.main_models import JobExtractionResult, JobListing, WorkModel

JOB_URL_TEMPLATE = "https://www.linkedin.com/jobs/view/{job_id}/"
LOCATION_PATTERN = re.compile(r"(.*) \((.*)\)")
KNOWN_WORK_MODELS = {WorkModel.ON_SITE.value, WorkModel.HYBRID.value, WorkModel.REMOTE.value}

def parse_location_and_work_model(description: Optional[str]) -> Tuple[str, WorkModel]:
    """
    Parses the location and work model from a job card's secondary description.

    "Bethesda, MD (Hybrid)" -> ("Bethesda, MD", Hybrid)
    "Remote" -> ("Remote", Unknown)
    """
    if not description:
        return "Unknown", WorkModel.UNKNOWN
    match = LOCATION_PATTERN.search(description)
    if match:
        location = match.group(1).strip()
        model = match.group(2).strip()
        if model in KNOWN_WORK_MODELS:
            return location, WorkModel(model)
    return description, WorkModel.UNKNOWN

def get_job_id(job_card: JobPostingCardEntity) -> Optional[str]:
    # "urn:li:fsd_jobPosting:4333848494" -> "4333848494"
    if not job_card.job_posting_urn:
        return None
    return job_card.job_posting_urn.split(":")[-1] or None

def extract_company_jobs(api_response: Any) -> Optional[JobExtractionResult]:
    """
    Analyzes the Voyager job cards response and extracts job listings
    along with the paging data.

    Returns:
        Optional[JobExtractionResult]: Job listings and paging, or None if
        the envelope is missing.
    """
    if not isinstance(api_response, dict) or not isinstance(api_response.get("included"), list):
        logging.error("Invalid jobs response structure: 'included' array is missing.")
        return None

    elements = extract_field(api_response, "data.elements")
    paging_info = build_paging(extract_field(api_response, "data.paging"))
    if not isinstance(elements, list) or paging_info is None:
        logging.error("Invalid jobs response structure: 'data.elements' or 'data.paging' is missing.")
        return None

    index = build_lookup_index(api_response["included"])
    job_listings = []
    for element in elements:
        job_card = resolve(index, extract_field(element, "jobCardUnion.*jobPostingCard"), JobPostingCardEntity)
        if job_card is None:
            continue
        job_id = get_job_id(job_card)
        if not job_id:
            continue

        description = extract_field(job_card.secondary_description, "text")
        location, work_model = parse_location_and_work_model(
            description if isinstance(description, str) else None
        )
        job_listings.append(JobListing(
            job_id=job_id,
            title=text_or(extract_field(job_card.title, "text"), "Unknown Title"),
            company_name=text_or(extract_field(job_card.primary_description, "text"), "Unknown Company"),
            location=location,
            work_model=work_model,
            job_url=JOB_URL_TEMPLATE.format(job_id=job_id),
        ))

    return JobExtractionResult(job_listings=job_listings, paging=paging_info)
