"""Data for the Google, Facebook and Twitter share previews.

The base URL of the analyzed page is always passed in explicitly; it stands
in for the page host when no canonical URL is declared.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from ..models import MetadataRecord

PREVIEW_TYPES = ("google", "facebook", "twitter")


@dataclass(frozen=True)
class SocialPreview:
    type: str
    available: bool
    title: str = ""
    description: str = ""
    display_url: str = ""
    image: Optional[str] = None
    placeholder: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _hostname(url: str) -> str:
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def display_host(record: MetadataRecord, base_url: str) -> str:
    return _hostname(record.canonical) or _hostname(base_url)


def google_preview(record: MetadataRecord, base_url: str) -> SocialPreview:
    return SocialPreview(
        type="google",
        available=True,
        title=record.title or "Title tag not found",
        description=record.description or "Meta description not found",
        display_url=record.canonical or _hostname(base_url),
    )


def facebook_preview(record: MetadataRecord, base_url: str) -> SocialPreview:
    if not (record.og_title or record.og_description or record.og_image):
        return SocialPreview(
            type="facebook",
            available=False,
            placeholder="Open Graph tags (og:title, og:description, og:image) not found. Add them for a better Facebook preview.",
        )
    return SocialPreview(
        type="facebook",
        available=True,
        title=record.og_title or record.title or "og:title not found",
        description=record.og_description or record.description or "og:description not found",
        display_url=display_host(record, base_url),
        image=record.og_image or None,
    )


def twitter_preview(record: MetadataRecord, base_url: str) -> SocialPreview:
    if not (record.twitter_title or record.twitter_description or record.twitter_image or record.twitter_card):
        return SocialPreview(
            type="twitter",
            available=False,
            placeholder="Twitter Card tags (e.g., twitter:title, twitter:description, twitter:image) not found. Add them for a better Twitter preview.",
        )
    return SocialPreview(
        type="twitter",
        available=True,
        title=record.twitter_title or record.title or "twitter:title not found",
        description=record.twitter_description or record.description or "twitter:description not found",
        display_url=display_host(record, base_url),
        image=record.twitter_image or None,
    )


_BUILDERS = {
    "google": google_preview,
    "facebook": facebook_preview,
    "twitter": twitter_preview,
}


def build_previews(record: MetadataRecord, base_url: str) -> Dict[str, SocialPreview]:
    return {name: _BUILDERS[name](record, base_url) for name in PREVIEW_TYPES}
