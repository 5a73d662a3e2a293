"""
Module containing models for entities found in the 'included' array
of a Voyager API response.

Each known '$type' tag maps to its own model; everything else becomes
a GenericEntity that keeps the raw key/value data.
"""
import logging
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

COMPANY_TYPE = "com.linkedin.voyager.organization.Company"
UPDATE_TYPE = "com.linkedin.voyager.dash.feed.Update"
SOCIAL_ACTIVITY_COUNTS_TYPE = "com.linkedin.voyager.dash.feed.SocialActivityCounts"
HASHTAG_TYPE = "com.linkedin.voyager.dash.feed.Hashtag"
MENTIONED_COMPANY_TYPE = "com.linkedin.voyager.dash.organization.Company"
JOB_POSTING_CARD_TYPE = "com.linkedin.voyager.dash.jobs.JobPostingCard"
ENTITY_RESULT_TYPE = "com.linkedin.voyager.dash.search.EntityResultViewModel"

class ApiEntity(BaseModel):
    """
    Base for every entity: the URN it is addressed by and its type tag.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    entity_urn: Optional[str] = Field(None, alias="entityUrn")
    type_tag: Optional[str] = Field(None, alias="$type")

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_malformed(cls, value, handler, info):
        # A malformed field falls back to its default, the entity is kept
        try:
            return handler(value)
        except ValidationError:
            logging.debug("Malformed field %s on %s", info.field_name, cls.__name__)
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)

class GenericEntity(ApiEntity):
    """
    Fallback for entities without a dedicated model.
    """
    data: Dict[str, Any] = Field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Returns a raw field of the entity.
        """
        return self.data.get(key, default)

class CompanyEntity(ApiEntity):
    name: Optional[str] = None
    url: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    company_page_url: Optional[str] = Field(None, alias="companyPageUrl")
    phone: Optional[Dict[str, Any]] = None
    company_industries: List[str] = Field(default_factory=list, alias="*companyIndustries")
    company_type: Optional[Dict[str, Any]] = Field(None, alias="companyType")
    founded_on: Optional[Dict[str, Any]] = Field(None, alias="foundedOn")
    specialities: List[str] = Field(default_factory=list)
    following_info: Optional[str] = Field(None, alias="*followingInfo")
    staff_count: Optional[int] = Field(None, alias="staffCount")
    staff_count_range: Optional[Dict[str, Any]] = Field(None, alias="staffCountRange")
    headquarter: Optional[Dict[str, Any]] = None
    confirmed_locations: List[Dict[str, Any]] = Field(default_factory=list, alias="confirmedLocations")
    logo: Optional[Dict[str, Any]] = None
    associated_hashtags: List[str] = Field(default_factory=list, alias="associatedHashtags")

class UpdateEntity(ApiEntity):
    """A single feed update (post)."""
    actor: Optional[Dict[str, Any]] = None
    commentary: Optional[Dict[str, Any]] = None
    content: Optional[Dict[str, Any]] = None
    social_content: Optional[Dict[str, Any]] = Field(None, alias="socialContent")
    social_detail: Optional[str] = Field(None, alias="*socialDetail")
    reshared_update: Optional[str] = Field(None, alias="*resharedUpdate")

class SocialActivityCountsEntity(ApiEntity):
    num_likes: Optional[int] = Field(None, alias="numLikes")
    num_comments: Optional[int] = Field(None, alias="numComments")
    num_shares: Optional[int] = Field(None, alias="numShares")

class HashtagEntity(ApiEntity):
    tracking_urn: Optional[str] = Field(None, alias="trackingUrn")

class MentionedCompanyEntity(ApiEntity):
    name: Optional[str] = None
    url: Optional[str] = None

class JobPostingCardEntity(ApiEntity):
    job_posting_urn: Optional[str] = Field(None, alias="jobPostingUrn")
    title: Optional[Dict[str, Any]] = None
    primary_description: Optional[Dict[str, Any]] = Field(None, alias="primaryDescription")
    secondary_description: Optional[Dict[str, Any]] = Field(None, alias="secondaryDescription")

class EntityResultEntity(ApiEntity):
    """A people-search result card."""
    navigation_url: Optional[str] = Field(None, alias="navigationUrl")
    title: Optional[Dict[str, Any]] = None
    primary_subtitle: Optional[Dict[str, Any]] = Field(None, alias="primarySubtitle")
    secondary_subtitle: Optional[Dict[str, Any]] = Field(None, alias="secondarySubtitle")
    badge_text: Optional[Dict[str, Any]] = Field(None, alias="badgeText")
    image: Optional[Dict[str, Any]] = None

ENTITY_TYPES: Dict[str, Type[ApiEntity]] = {
    COMPANY_TYPE: CompanyEntity,
    UPDATE_TYPE: UpdateEntity,
    SOCIAL_ACTIVITY_COUNTS_TYPE: SocialActivityCountsEntity,
    HASHTAG_TYPE: HashtagEntity,
    MENTIONED_COMPANY_TYPE: MentionedCompanyEntity,
    JOB_POSTING_CARD_TYPE: JobPostingCardEntity,
    ENTITY_RESULT_TYPE: EntityResultEntity,
}

def parse_entity(raw: Dict[str, Any]) -> ApiEntity:
    """
    Builds the entity variant matching the '$type' tag of a raw entity.
    Unknown tags give a GenericEntity holding the raw data.
    """
    type_tag = raw.get("$type")
    entity_cls = ENTITY_TYPES.get(type_tag) if isinstance(type_tag, str) else None
    if entity_cls is None:
        return GenericEntity(entity_urn=raw.get("entityUrn"), type_tag=type_tag, data=raw)
    return entity_cls.model_validate(raw)
