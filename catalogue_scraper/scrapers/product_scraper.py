# catalogue_scraper/scrapers/product_scraper.py

"""Turns one catalogue entry into a completed Product."""

import logging
from urllib.parse import urljoin

from bs4 import Tag

from catalogue_scraper.config.settings import Settings
from catalogue_scraper.models.product import Product
from catalogue_scraper.scrapers.fetcher import DocumentFetcher, PageReader
from catalogue_scraper.scrapers.price_parser import parse_price

logger = logging.getLogger("catalogue_scraper.product")


def scrape_product(
    entry: Tag,
    page_reader: PageReader,
    fetcher: DocumentFetcher,
    base_url: str | None = None,
) -> Product:
    """Scrape a single catalogue entry.

    The entry's link gives the title and the product page to read;
    its price element gives the unit price. *page_reader* is called
    with *fetcher* to obtain the page size and description, so both
    can be replaced with in-memory stubs.

    Raises:
        ValueError: if the entry has no link to a product page.
    """
    link = entry.select_one(Settings.LINK_SELECTOR)
    href = link.get("href") if link is not None else None
    if link is None or not isinstance(href, str) or not href.strip():
        msg = f"Catalogue entry has no product link: {entry!s:.200}"
        raise ValueError(msg)

    title = link.get_text().strip()
    destination = urljoin(base_url, href) if base_url else href

    price_el = entry.select_one(Settings.PRICE_SELECTOR)
    unit_price = parse_price(price_el.get_text() if price_el else "")

    size, description = page_reader(destination, fetcher)

    logger.debug(
        "Scraped '%s' (%s, %d bytes) from %s",
        title,
        unit_price,
        size,
        destination,
    )
    return Product(
        title=title,
        unit_price=unit_price,
        page_size=size,
        description=description,
    )
