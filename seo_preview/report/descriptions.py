from __future__ import annotations

from collections import namedtuple
from types import MappingProxyType
from typing import Optional

ISSUE_DESCRIPTIONS = MappingProxyType({
    "title": "The title tag is crucial for search engines and users to understand your page content. It should be concise and descriptive, ideally between 30-60 characters.",
    "description": "Meta descriptions appear in search results and should accurately summarize your page content to encourage clicks. Aim for 120-160 characters.",
    "keywords": "While less important for ranking today, meta keywords can still help categorize your content for some search engines or internal site search.",
    "og_title": "Open Graph (OG) title controls how your content appears when shared on social media like Facebook. Make it compelling.",
    "og_description": "The OG description provides a summary when shared on social media. It should be engaging and concise.",
    "og_image": "An OG image makes your shared content more visually appealing on social platforms, increasing click-through rates.",
    "twitter_card": "Twitter Cards define how your content is displayed on Twitter, enabling rich media experiences.",
    "twitter_title": "This title is used when your content is shared on Twitter. Keep it concise and relevant.",
    "twitter_description": "The Twitter description summarizes your content on Twitter. Aim for engaging and informative text.",
    "twitter_image": "An image specifically for Twitter shares can significantly boost engagement.",
    "canonical": "A canonical URL specifies the preferred version of a web page, helping to prevent duplicate content issues.",
    "robots": "The robots meta tag instructs search engine crawlers on how to crawl or index page content.",
    "viewport": "The viewport meta tag ensures your page is responsive and displays correctly on all devices.",
    "charset": "Character set declaration ensures proper text rendering across different browsers and languages.",
    "language": "Declaring the page language helps search engines and browsers understand the content's language.",
    "author": "Specifying an author can be beneficial for credibility and is sometimes used by search engines.",
    "favicon": "A favicon is a small icon that represents your website in browser tabs and bookmarks, aiding brand recognition.",
})

RECOMMENDATION_DETAILS = MappingProxyType({
    "open graph": "Ensure OG tags (og:title, og:description, og:image) are present and optimized for platforms like Facebook and LinkedIn.",
    "twitter card": "Implement Twitter Card tags (twitter:card, twitter:title, twitter:description, twitter:image) for better appearance on Twitter.",
})

PRIORITY_LABELS = MappingProxyType({
    "error": "High Priority",
    "warning": "Medium Priority",
    "info": "Low Priority",
})

ScoreBand = namedtuple("ScoreBand", ["label", "description"])

# (minimum score, band), highest first
SCORE_BANDS = (
    (90, ScoreBand("excellent", "Excellent! Your website is well-optimized.")),
    (70, ScoreBand("good", "Good, but some areas need improvement.")),
    (0, ScoreBand("poor", "Needs significant improvement for better SEO.")),
)


def describe_issue(issue) -> str:
    description = ISSUE_DESCRIPTIONS.get(issue.field.lower())
    if description:
        return description
    return f"This {issue.severity} relates to the '{issue.field}' field and is important for your site's SEO."


def recommendation_details(recommendation: str) -> Optional[str]:
    low = recommendation.lower()
    for topic, details in RECOMMENDATION_DETAILS.items():
        if topic in low:
            return details
    return None


def score_band(score: int) -> ScoreBand:
    for minimum, band in SCORE_BANDS:
        if score >= minimum:
            return band
    return SCORE_BANDS[-1][1]
