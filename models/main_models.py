"""
Module containing the flat records returned to API callers.

Records are serialized with camelCase aliases. Fields that are left unset
are omitted from the response, fields set to None are returned as null.
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class ResponseModel(BaseModel):
    """
    Base for all output records.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_response(self) -> dict:
        """
        Serializes the record the way it is sent to the caller.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

# --- Company profile ---

class Location(ResponseModel):
    """
    A company address, flagged as headquarters or not.
    Unknown address keys from the upstream payload are passed through.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    geographic_area: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    headquarter: Optional[bool] = None
    description: Optional[str] = None
    is_headquarters: bool = False

class CompanyProfile(ResponseModel):
    """
    Represents the company data prepared for CRM enrichment.
    """
    linkedin_urn: str = Field(..., description="Company entity URN")
    linkedin_url: Optional[str] = Field(None, description="Public company page URL")
    name: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    industry: Optional[str] = Field(None, description="First resolved industry")
    all_industries: List[str] = Field(default_factory=list)
    company_type: Optional[str] = None
    founded_year: Optional[int] = None
    specialties: List[str] = Field(default_factory=list)
    follower_count: Optional[int] = None
    employee_count: Optional[int] = None
    employee_count_range: Optional[str] = Field(None, description="e.g. '501-1000' or '10001+'")
    headquarters: Optional[Location] = None
    locations: List[Location] = Field(default_factory=list)
    logo_url: Optional[str] = None
    associated_hashtags: List[str] = Field(default_factory=list)

# --- Posts ---

class MediaType(str, Enum):
    IMAGE = "Image"
    VIDEO = "Video"
    RESHARE = "Reshare"
    TEXT = "Text"
    PROMO = "Promo"
    UNKNOWN = "Unknown"

class SocialCounts(ResponseModel):
    likes: int = 0
    comments: int = 0
    shares: int = 0

class MentionedCompany(ResponseModel):
    name: Optional[str] = None
    url: Optional[str] = None

class Post(ResponseModel):
    """
    A single company post from the organizational page feed.
    """
    urn: Optional[str] = None
    post_url: Optional[str] = None
    author_name: str
    posted_at: str
    post_text: str
    media_type: MediaType
    social_counts: SocialCounts
    hashtags: List[str] = Field(default_factory=list)
    mentioned_companies: List[MentionedCompany] = Field(default_factory=list)

class PagingInfo(ResponseModel):
    """
    Paging block copied from the upstream envelope.
    """
    start: Optional[int] = None
    count: Optional[int] = None
    total: Optional[int] = None

class PostsPagingInfo(PagingInfo):
    pagination_token: Optional[str] = None

class PostExtractionResult(ResponseModel):
    posts: List[Post]
    paging: PostsPagingInfo

# --- Jobs ---

class WorkModel(str, Enum):
    ON_SITE = "On-site"
    HYBRID = "Hybrid"
    REMOTE = "Remote"
    UNKNOWN = "Unknown"

class JobListing(ResponseModel):
    job_id: str
    title: str
    company_name: str
    location: str
    work_model: WorkModel
    job_url: str

class JobExtractionResult(ResponseModel):
    job_listings: List[JobListing]
    paging: PagingInfo

# --- People ---

class Employee(ResponseModel):
    """
    A company employee from the people search results.
    """
    urn: str
    full_name: str
    headline: str
    location: str
    profile_url: str
    profile_picture_url: Optional[str] = None
    connection_degree: Optional[str] = None

class EmployeeExtractionResult(ResponseModel):
    employees: List[Employee]
    paging: PagingInfo
