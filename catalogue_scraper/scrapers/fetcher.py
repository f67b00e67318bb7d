# catalogue_scraper/scrapers/fetcher.py

"""Document fetching: one GET per URL, parsed with BeautifulSoup.

Fetch and page-read capabilities are passed around as plain callables
(:data:`DocumentFetcher`, :data:`PageReader`) so that tests can swap in
in-memory documents without touching the network.
"""

import logging
from collections.abc import Callable

from bs4 import BeautifulSoup
from curl_cffi import requests as curl_requests

from catalogue_scraper.config.settings import Settings

logger = logging.getLogger("catalogue_scraper.fetcher")

DocumentFetcher = Callable[[str], BeautifulSoup]
PageReader = Callable[[str, DocumentFetcher], tuple[int, str]]


class FetchError(RuntimeError):
    """A document could not be retrieved; the run cannot continue."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


def parse_document(html: str) -> BeautifulSoup:
    """Parse raw HTML with the configured parser."""
    return BeautifulSoup(html, Settings.HTML_PARSER)


def _new_session() -> curl_requests.Session:
    """Create a browser-impersonating session."""
    return curl_requests.Session(
        impersonate=Settings.IMPERSONATE_BROWSER
    )


def fetch_document(
    url: str,
    *,
    session: curl_requests.Session | None = None,
    timeout: float | None = None,
) -> BeautifulSoup:
    """GET *url* once and return the parsed document.

    Raises:
        FetchError: on a transport error or a non-200 status.
    """
    own_session = session is None
    active = session if session is not None else _new_session()
    try:
        logger.debug("GET %s", url)
        try:
            resp = active.get(
                url,
                headers=dict(Settings.DEFAULT_HEADERS),
                timeout=timeout or Settings.REQUEST_TIMEOUT,
            )
        except Exception as exc:
            raise FetchError(url, str(exc)) from exc

        if resp.status_code != 200:
            raise FetchError(url, f"HTTP {resp.status_code}")

        logger.debug(
            "Fetched %s (%d chars)", url, len(resp.text)
        )
        return parse_document(resp.text)
    finally:
        if own_session:
            active.close()
