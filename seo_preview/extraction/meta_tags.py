from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

DEFAULT_FAVICON = "/favicon.ico"
FAVICON_RELS = ("icon", "shortcut icon")
DEFAULT_PORTS = {"http": 80, "https": 443}


def make_soup(html) -> BeautifulSoup:
    # Bytes are decoded by BeautifulSoup itself, honouring <meta charset>.
    # Keep rel/class values as plain strings so a rel value compares as a whole.
    return BeautifulSoup(html or "", "html.parser", multi_valued_attributes=None)


def _rel_matcher(*values):
    # rel values match case-insensitively in HTML
    return lambda rel: rel is not None and rel.lower() in values


def get_meta_content(soup: BeautifulSoup, key: str) -> str:
    """Content of the first <meta> whose name or property equals ``key``."""
    tag = soup.find(lambda t: t.name == "meta" and (t.get("name") == key or t.get("property") == key))
    if tag is None:
        return ""
    return tag.get("content") or ""


def get_document_title(soup: BeautifulSoup) -> str:
    title_tag = soup.find("title")
    if title_tag is None:
        return ""
    # Collapse whitespace the way a browser reports document.title
    return " ".join(title_tag.get_text().split())


def get_canonical_url(soup: BeautifulSoup) -> str:
    tag = soup.find("link", attrs={"rel": _rel_matcher("canonical")})
    return (tag.get("href") or "") if tag else ""


def get_charset(soup: BeautifulSoup) -> str:
    tag = soup.find("meta", attrs={"charset": True})
    return (tag.get("charset") or "") if tag else ""


def get_language(soup: BeautifulSoup) -> str:
    html_tag = soup.find("html")
    return (html_tag.get("lang") or "") if html_tag else ""


def origin_of(url: str) -> str:
    """scheme://host[:port], leaving out the scheme's default port."""
    parsed = urlparse(url)
    host = parsed.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parsed.port
    if port is not None and port != DEFAULT_PORTS.get(parsed.scheme):
        host = f"{host}:{port}"
    return f"{parsed.scheme}://{host}"


def get_favicon(soup: BeautifulSoup, base_url: str) -> str:
    tag = soup.find("link", attrs={"rel": _rel_matcher(*FAVICON_RELS)})
    href = (tag.get("href") if tag else None) or DEFAULT_FAVICON
    if href.startswith("http"):
        return href
    return urljoin(origin_of(base_url) + "/", href)
