import logging

from ..base_module import SEOModule
from ..models import MetadataRecord, split_keywords
from .meta_tags import (
    make_soup,
    get_meta_content,
    get_document_title,
    get_canonical_url,
    get_charset,
    get_language,
    get_favicon,
)

logger = logging.getLogger(__name__)

# Record field -> meta name/property key
META_FIELDS = {
    "description": "description",
    "og_title": "og:title",
    "og_description": "og:description",
    "og_image": "og:image",
    "twitter_card": "twitter:card",
    "twitter_title": "twitter:title",
    "twitter_description": "twitter:description",
    "twitter_image": "twitter:image",
    "robots": "robots",
    "viewport": "viewport",
    "author": "author",
}


def extract(html, source_url: str) -> MetadataRecord:
    """
    Pulls the fixed set of metadata fields out of an HTML document.

    Missing elements give empty values; the first match in document order wins.

    Args:
        html (str | bytes): Raw HTML. Bytes are decoded by BeautifulSoup,
            which honours a <meta charset> declaration.
        source_url (str): Absolute URL the document came from, used to resolve
            a relative favicon href.

    Returns:
        MetadataRecord: The extracted fields.
    """
    soup = make_soup(html)
    values = {name: get_meta_content(soup, key) for name, key in META_FIELDS.items()}
    return MetadataRecord(
        title=get_meta_content(soup, "title") or get_document_title(soup),
        keywords=split_keywords(get_meta_content(soup, "keywords")),
        canonical=get_canonical_url(soup),
        charset=get_charset(soup),
        language=get_language(soup),
        favicon=get_favicon(soup, source_url),
        **values,
    )


class MetadataExtractor(SEOModule):
    """Fetches a page and extracts its metadata record."""

    def analyze(self, url: str, html=None) -> dict:
        results = {"extraction_status": "pending", "url": url, "isLoaded": False}
        if html is None:
            html = self.fetch_html(url)
        results["isLoaded"] = True
        results["htmlSize"] = len(html)
        record = extract(html, url)
        logger.debug("Extracted metadata for %s: title=%r", url, record.title)
        results["record"] = record
        results["extraction_status"] = "completed"
        return {self.module_name: results}
