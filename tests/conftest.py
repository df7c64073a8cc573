import pytest

from seo_preview.models import MetadataRecord

GOOD_TITLE = "Handmade Widgets and Gadgets for Every Home"  # 43 chars
GOOD_DESCRIPTION = (
    "Browse our catalogue of handmade widgets and gadgets, crafted by local "
    "artisans and shipped worldwide with free returns on every order."
)  # 135 chars

FULL_PAGE_HTML = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{GOOD_TITLE}</title>
  <meta name="description" content="{GOOD_DESCRIPTION}">
  <meta name="keywords" content="widgets, gadgets , ,handmade">
  <meta property="og:title" content="Acme Widgets">
  <meta property="og:description" content="Handmade widgets">
  <meta property="og:image" content="https://example.com/og.png">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:title" content="Acme Widgets on Twitter">
  <meta name="twitter:description" content="Widgets for everyone">
  <meta name="twitter:image" content="https://example.com/tw.png">
  <meta name="robots" content="index, follow">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta name="author" content="Acme Team">
  <link rel="canonical" href="https://example.com/widgets">
  <link rel="icon" href="/static/favicon.png">
</head>
<body><h1>Widgets</h1></body>
</html>
"""


@pytest.fixture
def full_page_html():
    return FULL_PAGE_HTML


@pytest.fixture
def complete_record():
    return MetadataRecord(
        title=GOOD_TITLE,
        description=GOOD_DESCRIPTION,
        keywords=("widgets", "gadgets"),
        og_title="Acme Widgets",
        og_description="Handmade widgets",
        og_image="https://example.com/og.png",
        twitter_card="summary_large_image",
        twitter_title="Acme Widgets on Twitter",
        twitter_description="Widgets for everyone",
        twitter_image="https://example.com/tw.png",
        canonical="https://example.com/widgets",
        robots="index, follow",
        viewport="width=device-width, initial-scale=1",
        charset="utf-8",
        language="en",
        author="Acme Team",
        favicon="https://example.com/static/favicon.png",
    )
