# seo_preview/base_module.py
import logging
from abc import ABC, abstractmethod
from urllib.parse import quote, urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .errors import InvalidURLError, classify_failure

logger = logging.getLogger(__name__)

DEFAULT_ACCESS_PATHS = [
    "",  # direct request
    "https://api.allorigins.win/raw?url=",
    "https://cors-anywhere.herokuapp.com/",
    "https://api.codetabs.com/v1/proxy?quest=",
]


def is_valid_url(url: str) -> bool:
    if not url or not url.startswith("http"):
        return False
    try:
        result = urlparse(url)
        return all([result.scheme in ("http", "https"), result.netloc])
    except ValueError:
        return False


def build_request_url(access_path: str, url: str) -> str:
    """An empty access path fetches the URL directly; any other path is a proxy prefix."""
    if not access_path:
        return url
    return f"{access_path}{quote(url, safe='')}"


class SEOModule(ABC):
    """
    Abstract base class for the analysis modules.
    Each module implements its own 'analyze' method and shares the HTTP session.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}
        self.global_config = self.config.get("Global", {})

        default_ua = self.global_config.get(
            "user_agent",
            'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0 Safari/537.36'
        )
        accept_lang = self.global_config.get("accept_language", "en-US,en;q=0.5")
        self.headers = {
            'User-Agent': default_ua,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
            'Accept-Language': accept_lang,
        }

        self.session = requests.Session()
        retries_total = int(self.global_config.get("http_retries_total", 0))
        if retries_total > 0:
            backoff = float(self.global_config.get("http_backoff_factor", 0.2))
            status_forcelist = self.global_config.get("http_status_forcelist", [500, 502, 503, 504])
            retry_cfg = Retry(
                total=retries_total,
                connect=retries_total,
                read=retries_total,
                backoff_factor=backoff,
                status_forcelist=status_forcelist,
                allowed_methods={"HEAD", "GET", "OPTIONS"},
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_cfg)
            self.session.mount('http://', adapter)
            self.session.mount('https://', adapter)
        self.session.headers.update(self.headers)

    @abstractmethod
    def analyze(self, url: str, **kwargs) -> dict:
        """
        Runs the module against the given URL.

        Returns:
            dict: ``{module_name: results}`` so results from several modules
                  can be merged into one report.
        """

    @property
    def access_paths(self) -> list:
        return list(self.global_config.get("access_paths", DEFAULT_ACCESS_PATHS))

    def fetch_html(self, url: str) -> bytes:
        """
        Fetches the raw HTML bytes of a URL, trying each access path in order.
        BeautifulSoup works out the encoding, including from <meta charset>.

        Raises:
            InvalidURLError: the URL is not an absolute http(s) URL.
            FetchError: every access path failed; the subclass says why.
        """
        if not is_valid_url(url):
            raise InvalidURLError()
        timeout = self.global_config.get("request_timeout", 15)

        last_status = None
        last_had_response = False
        for access_path in self.access_paths:
            request_url = build_request_url(access_path, url)
            try:
                resp = self.session.get(request_url, timeout=timeout)
                resp.raise_for_status()
                logger.debug("Fetched %s via %s (%s bytes)", url, access_path or "direct", len(resp.content))
                return resp.content
            except requests.exceptions.RequestException as e:
                response = getattr(e, "response", None)
                last_had_response = response is not None
                last_status = response.status_code if response is not None else None
                logger.info("Access path %s failed for %s in %s: %s", access_path or "direct", url, self.module_name, e)
                continue

        raise classify_failure(last_status, last_had_response)

