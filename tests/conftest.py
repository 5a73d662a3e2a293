"""
Sample Voyager API responses shared by the extractor and endpoint tests.
"""
import pytest

COMPANY_URN = "urn:li:fs_normalized_company:1035"

@pytest.fixture
def company_response():
    """ Company profile response with industries, hashtags, locations and a logo """
    return {
        "data": {"*elements": [COMPANY_URN]},
        "included": [
            {
                "entityUrn": "urn:li:fs_industry:4",
                "$type": "com.linkedin.voyager.common.Industry",
                "localizedName": "Software Development",
            },
            {
                "entityUrn": "urn:li:fs_industry:96",
                "$type": "com.linkedin.voyager.common.Industry",
                "localizedName": "IT Services and IT Consulting",
            },
            {
                "entityUrn": "urn:li:fs_followingInfo:urn:li:company:1035",
                "$type": "com.linkedin.voyager.common.FollowingInfo",
                "followerCount": 24000000,
            },
            {
                "entityUrn": "urn:li:fs_contentTopicData:urn:li:hashtag:cloud",
                "$type": "com.linkedin.voyager.feed.shared.ContentTopicData",
                "*feedTopic": "urn:li:fs_feedTopic:cloud",
            },
            {
                "entityUrn": "urn:li:fs_feedTopic:cloud",
                "$type": "com.linkedin.voyager.feed.Topic",
                "topic": {"name": "cloud"},
            },
            {
                "entityUrn": "urn:li:fs_contentTopicData:urn:li:hashtag:ai",
                "$type": "com.linkedin.voyager.feed.shared.ContentTopicData",
                "*feedTopic": "urn:li:fs_feedTopic:missing",
            },
            {
                "entityUrn": COMPANY_URN,
                "$type": "com.linkedin.voyager.organization.Company",
                "name": "Microsoft",
                "url": "https://www.linkedin.com/company/microsoft",
                "tagline": "Empowering every person",
                "description": "Every company has a mission.",
                "companyPageUrl": "https://news.microsoft.com/",
                "phone": {"number": "+1 425 882 8080"},
                "*companyIndustries": ["urn:li:fs_industry:4", "urn:li:fs_industry:404", "urn:li:fs_industry:96"],
                "companyType": {"localizedName": "Public Company"},
                "foundedOn": {"year": 1975},
                "specialities": ["Business Software", "Cloud Computing"],
                "*followingInfo": "urn:li:fs_followingInfo:urn:li:company:1035",
                "staffCount": 228000,
                "staffCountRange": {"start": 10001},
                "headquarter": {
                    "line1": "1 Microsoft Way",
                    "city": "Redmond",
                    "geographicArea": "Washington",
                    "postalCode": "98052",
                    "country": "US",
                },
                "confirmedLocations": [
                    {
                        "line1": "1 Microsoft Way",
                        "city": "Redmond",
                        "geographicArea": "Washington",
                        "postalCode": "98052",
                        "country": "US",
                        "headquarter": True,
                    },
                    {
                        "line1": "11 Times Square",
                        "city": "New York",
                        "geographicArea": "NY",
                        "postalCode": "10036",
                        "country": "US",
                        "description": "Manhattan office",
                    },
                ],
                "logo": {
                    "image": {
                        "rootUrl": "https://media.licdn.com/dms/image/C560BAQ/",
                        "artifacts": [
                            {"width": 48, "fileIdentifyingUrlPathSegment": "logo_48"},
                            {"width": 200, "fileIdentifyingUrlPathSegment": "logo_200"},
                            {"width": 100, "fileIdentifyingUrlPathSegment": "logo_100"},
                        ],
                    }
                },
                "associatedHashtags": [
                    "urn:li:fs_contentTopicData:urn:li:hashtag:cloud",
                    "urn:li:fs_contentTopicData:urn:li:hashtag:ai",
                    "urn:li:fs_contentTopicData:urn:li:hashtag:unknown",
                ],
            },
        ],
    }

@pytest.fixture
def posts_response():
    """ Organizational feed response with a text post, an image post, a reshare and a promo """
    feed = {
        "metadata": {"paginationToken": "dXJuOmxpOmFjdGl2aXR5"},
        "paging": {"start": 0, "count": 10, "total": 120},
        "*elements": [
            "urn:li:fsd_update:1",
            "urn:li:fsd_update:promo",
            "urn:li:fsd_update:2",
            "urn:li:fsd_update:missing",
            "urn:li:fsd_update:3",
        ],
    }
    return {
        "data": {"data": {"feedDashOrganizationalPageUpdatesByOrganizationalPageRelevanceFeed": feed}},
        "included": [
            {
                "entityUrn": "urn:li:fsd_update:1",
                "$type": "com.linkedin.voyager.dash.feed.Update",
                "actor": {
                    "name": {"text": "Microsoft"},
                    "subDescription": {"text": "3d • Edited • "},
                },
                "commentary": {
                    "text": {
                        "text": "We're hiring! #hiring with @GitHub",
                        "attributesV2": [
                            {"detailData": {"*hashtag": "urn:li:fsd_hashtag:hiring"}},
                            {"detailData": {"*companyName": "urn:li:fsd_company:1418841"}},
                            {"detailData": {"*hashtag": "urn:li:fsd_hashtag:missing"}},
                            {"detailData": {"*companyName": "urn:li:fsd_hashtag:hiring"}},
                        ],
                    }
                },
                "socialContent": {"shareUrl": "https://www.linkedin.com/feed/update/urn:li:activity:1"},
                "*socialDetail": "urn:li:fsd_socialDetail:1",
            },
            {
                "entityUrn": "urn:li:fsd_socialDetail:1",
                "$type": "com.linkedin.voyager.dash.social.SocialDetail",
                "*totalSocialActivityCounts": "urn:li:fsd_socialActivityCounts:1",
            },
            {
                "entityUrn": "urn:li:fsd_socialActivityCounts:1",
                "$type": "com.linkedin.voyager.dash.feed.SocialActivityCounts",
                "numLikes": 1200,
                "numComments": 45,
                "numShares": 12,
            },
            {
                "entityUrn": "urn:li:fsd_hashtag:hiring",
                "$type": "com.linkedin.voyager.dash.feed.Hashtag",
                "trackingUrn": "urn:li:hashtag:hiring",
            },
            {
                "entityUrn": "urn:li:fsd_company:1418841",
                "$type": "com.linkedin.voyager.dash.organization.Company",
                "name": "GitHub",
                "url": "https://www.linkedin.com/company/github/",
            },
            {
                "entityUrn": "urn:li:fsd_update:promo",
                "$type": "com.linkedin.voyager.dash.feed.Update",
                "content": {"promoComponent": {"text": "Follow us"}, "imageComponent": {}},
            },
            {
                "entityUrn": "urn:li:fsd_update:2",
                "$type": "com.linkedin.voyager.dash.feed.Update",
                "actor": {"name": {"text": "Microsoft"}, "subDescription": {"text": "1w"}},
                "content": {"imageComponent": {"images": []}},
                "*socialDetail": "urn:li:fsd_socialDetail:missing",
            },
            {
                "entityUrn": "urn:li:fsd_update:3",
                "$type": "com.linkedin.voyager.dash.feed.Update",
                "*resharedUpdate": "urn:li:fsd_update:other",
                "content": {"linkedInVideoComponent": {}},
            },
        ],
    }

@pytest.fixture
def jobs_response():
    """ Job cards response with hybrid, remote and unparseable listings """
    return {
        "data": {
            "paging": {"start": 0, "count": 25, "total": 3},
            "elements": [
                {"jobCardUnion": {"*jobPostingCard": "urn:li:fsd_jobPostingCard:(4333848494,JOBS_SEARCH)"}},
                {"jobCardUnion": {"*jobPostingCard": "urn:li:fsd_jobPostingCard:(4333848495,JOBS_SEARCH)"}},
                {"jobCardUnion": {}},
                {"jobCardUnion": {"*jobPostingCard": "urn:li:fsd_jobPostingCard:(no_posting,JOBS_SEARCH)"}},
                {"jobCardUnion": {"*jobPostingCard": "urn:li:fsd_jobPostingCard:(4333848496,JOBS_SEARCH)"}},
            ],
        },
        "included": [
            {
                "entityUrn": "urn:li:fsd_jobPostingCard:(4333848494,JOBS_SEARCH)",
                "$type": "com.linkedin.voyager.dash.jobs.JobPostingCard",
                "jobPostingUrn": "urn:li:fsd_jobPosting:4333848494",
                "title": {"text": "Senior Software Engineer"},
                "primaryDescription": {"text": "Microsoft"},
                "secondaryDescription": {"text": "Bethesda, MD (Hybrid)"},
            },
            {
                "entityUrn": "urn:li:fsd_jobPostingCard:(4333848495,JOBS_SEARCH)",
                "$type": "com.linkedin.voyager.dash.jobs.JobPostingCard",
                "jobPostingUrn": "urn:li:fsd_jobPosting:4333848495",
                "secondaryDescription": {"text": "Remote"},
            },
            {
                "entityUrn": "urn:li:fsd_jobPostingCard:(no_posting,JOBS_SEARCH)",
                "$type": "com.linkedin.voyager.dash.jobs.JobPostingCard",
                "title": {"text": "No posting urn"},
            },
            {
                "entityUrn": "urn:li:fsd_jobPostingCard:(4333848496,JOBS_SEARCH)",
                "$type": "com.linkedin.voyager.dash.jobs.JobPostingCard",
                "jobPostingUrn": "urn:li:fsd_jobPosting:4333848496",
                "title": {"text": "Product Manager"},
                "primaryDescription": {"text": "Microsoft"},
            },
        ],
    }

def entity_result(profile_id, **fields):
    result = {
        "entityUrn": f"urn:li:fsd_entityResultViewModel:(urn:li:fsd_profile:{profile_id},SEARCH_SRP,DEFAULT)",
        "$type": "com.linkedin.voyager.dash.search.EntityResultViewModel",
    }
    result.update(fields)
    return result

@pytest.fixture
def people_response():
    """ People search response with public, private and second-cluster results """
    def item(profile_id):
        return {"item": {"*entityResult": entity_result(profile_id)["entityUrn"]}}

    return {
        "data": {
            "data": {
                "searchDashClustersByAll": {
                    "paging": {"start": 0, "count": 10, "total": 1000},
                    "elements": [
                        {"items": [item("ACoAAA1"), item("PRIVATE"), item("ACoAAA2"), item("MISSING")]},
                        {"items": [item("ACoAAA3")]},
                    ],
                }
            }
        },
        "included": [
            entity_result(
                "ACoAAA1",
                navigationUrl="https://www.linkedin.com/in/jane-doe",
                title={"text": "Jane Doe"},
                primarySubtitle={"text": "Principal Engineer at Microsoft"},
                secondarySubtitle={"text": "Seattle, WA"},
                badgeText={"text": "â€¢ 2nd"},
                image={
                    "attributes": [
                        {"detailData": {}},
                        {
                            "detailData": {
                                "nonEntityProfilePicture": {
                                    "vectorImage": {
                                        "rootUrl": "https://media.licdn.com/dms/image/D560/",
                                        "artifacts": [
                                            {"width": 400, "fileIdentifyingUrlPathSegment": "pic_400"},
                                            {"width": 100, "fileIdentifyingUrlPathSegment": "pic_100"},
                                            {"width": 200, "fileIdentifyingUrlPathSegment": "pic_200"},
                                        ],
                                    }
                                }
                            }
                        },
                    ]
                },
            ),
            entity_result("PRIVATE", title={"text": "LinkedIn Member"}),
            entity_result(
                "ACoAAA2",
                navigationUrl="https://www.linkedin.com/in/john-roe",
                title={"text": "John Roe"},
            ),
            entity_result(
                "ACoAAA3",
                navigationUrl="https://www.linkedin.com/in/second-cluster",
                title={"text": "Second Cluster"},
            ),
        ],
    }
