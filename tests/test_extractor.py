import pytest

from seo_preview.extraction import extract
from seo_preview.models import RECORD_FIELDS

from conftest import GOOD_DESCRIPTION, GOOD_TITLE


def test_extracts_every_field_from_full_page(full_page_html):
    record = extract(full_page_html, "https://example.com/widgets?ref=1")

    assert record.title == GOOD_TITLE
    assert record.description == GOOD_DESCRIPTION
    assert record.keywords == ("widgets", "gadgets", "handmade")
    assert record.og_title == "Acme Widgets"
    assert record.og_image == "https://example.com/og.png"
    assert record.twitter_card == "summary_large_image"
    assert record.twitter_image == "https://example.com/tw.png"
    assert record.canonical == "https://example.com/widgets"
    assert record.robots == "index, follow"
    assert record.viewport == "width=device-width, initial-scale=1"
    assert record.charset == "utf-8"
    assert record.language == "en"
    assert record.author == "Acme Team"
    assert record.favicon == "https://example.com/static/favicon.png"


def test_empty_document_yields_empty_values_and_default_favicon():
    record = extract("", "https://example.com/page")

    data = record.to_dict()
    assert set(data) == set(RECORD_FIELDS)
    assert data["keywords"] == []
    for name in RECORD_FIELDS:
        if name not in ("keywords", "favicon"):
            assert data[name] == "", name
    assert record.favicon == "https://example.com/favicon.ico"


def test_malformed_markup_does_not_raise():
    html = "<html><head><meta name='description' content='Broken page'><title>Unclosed"
    record = extract(html, "https://example.com/")
    assert record.description == "Broken page"


def test_first_description_wins():
    html = """
    <head>
      <meta name="description" content="first">
      <meta name="description" content="second">
    </head>
    """
    assert extract(html, "https://example.com/").description == "first"


def test_property_attribute_matches_as_well_as_name():
    html = '<meta property="description" content="via property">'
    assert extract(html, "https://example.com/").description == "via property"


def test_meta_key_match_is_case_sensitive():
    html = '<meta name="Description" content="capitalised">'
    assert extract(html, "https://example.com/").description == ""


def test_meta_title_takes_precedence_over_title_element():
    html = '<title>Document title</title><meta name="title" content="Meta title">'
    assert extract(html, "https://example.com/").title == "Meta title"


def test_title_element_whitespace_is_collapsed():
    html = "<title>\n  Widgets   and\n gadgets </title>"
    assert extract(html, "https://example.com/").title == "Widgets and gadgets"


def test_empty_keywords_content_gives_empty_tuple():
    html = '<meta name="keywords" content=" , ,">'
    assert extract(html, "https://example.com/").keywords == ()


def test_charset_and_language():
    html = '<html lang="de-DE"><head><meta charset="ISO-8859-1"></head></html>'
    record = extract(html, "https://example.com/")
    assert record.charset == "ISO-8859-1"
    assert record.language == "de-DE"


def test_relative_favicon_resolves_against_origin():
    html = '<link rel="icon" href="/icon.png">'
    assert extract(html, "https://example.com/page").favicon == "https://example.com/icon.png"


def test_absolute_favicon_is_kept_verbatim():
    html = '<link rel="icon" href="https://cdn.x.com/icon.png">'
    assert extract(html, "https://example.com/page").favicon == "https://cdn.x.com/icon.png"


def test_shortcut_icon_rel_and_port_preserved():
    html = '<link rel="shortcut icon" href="/fav.ico">'
    assert extract(html, "http://localhost:8080/a/b").favicon == "http://localhost:8080/fav.ico"


def test_favicon_ignores_other_icon_rels():
    html = '<link rel="apple-touch-icon" href="/apple.png"><link rel="icon" href="/real.png">'
    assert extract(html, "https://example.com/").favicon == "https://example.com/real.png"


def test_canonical_uses_first_link():
    html = '<link rel="canonical" href="https://a.example/"><link rel="canonical" href="https://b.example/">'
    assert extract(html, "https://example.com/").canonical == "https://a.example/"


@pytest.mark.parametrize("rel", ["Shortcut Icon", "ICON", "shortcut icon"])
def test_favicon_rel_is_case_insensitive(rel):
    html = f'<link rel="{rel}" href="/real.ico">'
    assert extract(html, "https://example.com/").favicon == "https://example.com/real.ico"


def test_canonical_rel_is_case_insensitive():
    html = '<link rel="CANONICAL" href="https://example.com/page">'
    assert extract(html, "https://example.com/").canonical == "https://example.com/page"


@pytest.mark.parametrize("page_url,expected", [
    ("https://example.com:443/page", "https://example.com/i.png"),
    ("http://example.com:80/", "http://example.com/i.png"),
    ("https://example.com:8443/", "https://example.com:8443/i.png"),
])
def test_favicon_origin_drops_default_port(page_url, expected):
    assert extract('<link rel="icon" href="/i.png">', page_url).favicon == expected
