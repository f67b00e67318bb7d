# catalogue_scraper/scrapers/field_extractor.py

"""Product page field extraction: serialized size and description."""

import logging

from bs4 import BeautifulSoup

from catalogue_scraper.scrapers.fetcher import DocumentFetcher

logger = logging.getLogger("catalogue_scraper.extractor")


def serialized_size(doc: BeautifulSoup) -> int:
    """Return the UTF-8 byte length of the document's serialized HTML.

    This measures markup as re-serialized by the parser, which can
    differ from the bytes that came over the wire.

    Raises:
        ValueError: if the document cannot be serialized.
    """
    try:
        html = doc.decode()
        return len(html.encode("utf-8"))
    except (RecursionError, UnicodeEncodeError) as exc:
        msg = f"Cannot serialize document: {exc}"
        raise ValueError(msg) from exc


def meta_description(doc: BeautifulSoup) -> str:
    """Return the content of the first ``<meta name="description">``."""
    for meta in doc.find_all("meta"):
        if meta.get("name") == "description":
            content = meta.get("content")
            return content if isinstance(content, str) else ""
    return ""


def extract_fields(doc: BeautifulSoup) -> tuple[int, str]:
    """Return ``(size_bytes, description)`` for a product page."""
    size = serialized_size(doc)
    description = meta_description(doc)
    if not description:
        logger.debug("Product page has no description meta tag")
    return size, description


def read_product_page(
    url: str, fetcher: DocumentFetcher,
) -> tuple[int, str]:
    """Fetch *url* through *fetcher* and extract its fields."""
    return extract_fields(fetcher(url))
