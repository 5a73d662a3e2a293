"""
Extraction of company posts from the organizational page feed.
"""
import logging
from typing import Any, List, Optional

from extractors.lookup import build_lookup_index, build_paging, extract_field, resolve, resolve_chain, text_or
from models.entity_models import (
    HashtagEntity,
    MentionedCompanyEntity,
    SocialActivityCountsEntity,
    UpdateEntity,
)
from models.main_models import (
    MediaType,
    MentionedCompany,
    Post,
    PostExtractionResult,
    PostsPagingInfo,
    SocialCounts,
)

FEED_KEY = "feedDashOrganizationalPageUpdatesByOrganizationalPageRelevanceFeed"

def _attributes(commentary: Optional[dict]) -> List[dict]:
    attributes = extract_field(commentary, "text.attributesV2")
    if not isinstance(attributes, list):
        return []
    return [attribute for attribute in attributes if isinstance(attribute, dict)]

def get_hashtags(commentary: Optional[dict], index) -> List[str]:
    """
    Extracts hashtags from the attributed spans of a post's commentary.

    The hashtag text is the last segment of the hashtag's tracking URN,
    e.g. "urn:li:hashtag:hiring" -> "hiring".
    """
    hashtags = []
    for attribute in _attributes(commentary):
        hashtag = resolve(index, extract_field(attribute, "detailData.*hashtag"), HashtagEntity)
        if hashtag is None or not hashtag.tracking_urn:
            continue
        hashtag_text = hashtag.tracking_urn.split(":")[-1]
        if hashtag_text:
            hashtags.append(hashtag_text)
    return hashtags

def get_mentioned_companies(commentary: Optional[dict], index) -> List[MentionedCompany]:
    """
    Extracts companies mentioned in the attributed spans of a post's commentary.
    """
    companies = []
    for attribute in _attributes(commentary):
        company = resolve(index, extract_field(attribute, "detailData.*companyName"), MentionedCompanyEntity)
        if company is not None:
            companies.append(MentionedCompany(name=company.name, url=company.url))
    return companies

def _has_component(content: Optional[dict], name: str) -> bool:
    # An empty component object still marks the component as present
    component = extract_field(content, name)
    return isinstance(component, (dict, list)) or bool(component)

def get_media_type(update: UpdateEntity) -> MediaType:
    """
    Classifies the media of a post. The first matching rule wins:
    promo, reshare, video, image, text, unknown.
    """
    if _has_component(update.content, "promoComponent"):
        return MediaType.PROMO
    if update.reshared_update:
        return MediaType.RESHARE
    if _has_component(update.content, "linkedInVideoComponent"):
        return MediaType.VIDEO
    if _has_component(update.content, "imageComponent"):
        return MediaType.IMAGE
    if extract_field(update.commentary, "text.text"):
        return MediaType.TEXT
    return MediaType.UNKNOWN

def get_social_counts(update: UpdateEntity, index) -> SocialCounts:
    """
    Follows post -> social detail -> activity counts. Any missing hop
    gives zero counts.
    """
    counts = resolve_chain(index, update.social_detail, "*totalSocialActivityCounts")
    if not isinstance(counts, SocialActivityCountsEntity):
        return SocialCounts(likes=0, comments=0, shares=0)
    return SocialCounts(
        likes=counts.num_likes or 0,
        comments=counts.num_comments or 0,
        shares=counts.num_shares or 0,
    )

def get_posted_at(update: UpdateEntity) -> str:
    # "3d • Edited • " -> "3d"
    sub_description = extract_field(update.actor, "subDescription.text")
    if not isinstance(sub_description, str):
        return "Unknown Date"
    return sub_description.split("•")[0].strip()

def get_paging(feed: dict) -> Optional[PostsPagingInfo]:
    extra = {}
    pagination_token = extract_field(feed, "metadata.paginationToken")
    if isinstance(pagination_token, str):
        extra["pagination_token"] = pagination_token
    return build_paging(feed.get("paging"), PostsPagingInfo, **extra)

def build_post(update: UpdateEntity, media_type: MediaType, index) -> Post:
    fields = {
        "urn": update.entity_urn,
        "author_name": text_or(extract_field(update.actor, "name.text"), "Unknown Author"),
        "posted_at": get_posted_at(update),
        "post_text": text_or(extract_field(update.commentary, "text.text"), ""),
        "media_type": media_type,
        "social_counts": get_social_counts(update, index),
        "hashtags": get_hashtags(update.commentary, index),
        "mentioned_companies": get_mentioned_companies(update.commentary, index),
    }
    post_url = extract_field(update.social_content, "shareUrl")
    if isinstance(post_url, str):
        fields["post_url"] = post_url
    return Post(**fields)

def extract_company_posts(api_response: Any) -> Optional[PostExtractionResult]:
    """
    Analyzes the Voyager organizational feed response and extracts the
    company posts with their paging data.

    Promotional updates are dropped; updates that cannot be resolved or are
    not feed updates are skipped. Order follows the feed's '*elements'.

    Returns:
        Optional[PostExtractionResult]: Posts and paging, or None if the
        feed envelope is missing.
    """
    if not isinstance(api_response, dict) or not isinstance(api_response.get("included"), list):
        logging.error("Invalid posts response structure: 'included' array is missing.")
        return None

    feed = extract_field(api_response, f"data.data.{FEED_KEY}")
    post_urns = extract_field(feed, "*elements")
    if not isinstance(post_urns, list):
        logging.error("Invalid posts response structure: feed '*elements' is missing.")
        return None
    paging = get_paging(feed)
    if paging is None:
        logging.error("Invalid posts response structure: feed 'paging' is missing.")
        return None

    index = build_lookup_index(api_response["included"])
    posts = []
    for post_urn in post_urns:
        update = resolve(index, post_urn, UpdateEntity)
        if update is None:
            continue
        media_type = get_media_type(update)
        if media_type == MediaType.PROMO:
            continue
        posts.append(build_post(update, media_type, index))

    return PostExtractionResult(posts=posts, paging=paging)
