# catalogue_scraper/services/collector.py

"""Concurrent fan-out over catalogue entries and fan-in of Products.

Entries are enumerated into a list first, so the number of tasks
launched and the number of results awaited are both ``len(entries)``.
"""

import asyncio
import logging
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

from catalogue_scraper.config.settings import Settings
from catalogue_scraper.models.product import Product
from catalogue_scraper.scrapers.fetcher import (
    DocumentFetcher,
    PageReader,
    fetch_document,
)
from catalogue_scraper.scrapers.field_extractor import read_product_page
from catalogue_scraper.scrapers.product_scraper import scrape_product

logger = logging.getLogger("catalogue_scraper.collector")

EntryScraper = Callable[
    [Tag, PageReader, DocumentFetcher, str | None], Product
]


def find_entries(
    root_doc: BeautifulSoup,
    selector: str = Settings.PRODUCT_SELECTOR,
) -> list[Tag]:
    """Return every catalogue entry node in document order."""
    return list(root_doc.select(selector))


async def _scrape_entry(
    index: int,
    scraper: EntryScraper,
    entry: Tag,
    page_reader: PageReader,
    fetcher: DocumentFetcher,
    base_url: str | None,
) -> tuple[int, Product]:
    """Run the blocking scraper on a worker thread, tagged with its index."""
    product = await asyncio.to_thread(
        scraper, entry, page_reader, fetcher, base_url
    )
    return index, product


async def collect_all(
    root_doc: BeautifulSoup,
    *,
    page_reader: PageReader = read_product_page,
    fetcher: DocumentFetcher = fetch_document,
    scraper: EntryScraper = scrape_product,
    selector: str = Settings.PRODUCT_SELECTOR,
    base_url: str | None = None,
) -> list[Product]:
    """Scrape every entry of *root_doc* concurrently.

    Returns exactly one Product per entry, in catalogue order, whatever
    order the tasks finish in. The first failing task cancels the others
    and its exception propagates, so a partial catalogue is never
    returned. Hung fetches are bounded by the fetcher's own timeout.
    """
    entries = find_entries(root_doc, selector)
    expected = len(entries)
    if expected == 0:
        logger.info("No catalogue entries match '%s'", selector)
        return []

    logger.info("Scraping %d catalogue entries", expected)
    tasks = [
        asyncio.create_task(
            _scrape_entry(
                index, scraper, entry, page_reader, fetcher, base_url
            )
        )
        for index, entry in enumerate(entries)
    ]

    slots: list[Product | None] = [None] * expected
    try:
        for finished in asyncio.as_completed(tasks):
            index, product = await finished
            slots[index] = product
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    products = [p for p in slots if p is not None]
    logger.info(
        "Collected %d/%d products", len(products), expected
    )
    return products


def collect_all_sync(
    root_doc: BeautifulSoup,
    *,
    page_reader: PageReader = read_product_page,
    fetcher: DocumentFetcher = fetch_document,
    scraper: EntryScraper = scrape_product,
    selector: str = Settings.PRODUCT_SELECTOR,
    base_url: str | None = None,
) -> list[Product]:
    """Blocking wrapper around :func:`collect_all`."""
    return asyncio.run(
        collect_all(
            root_doc,
            page_reader=page_reader,
            fetcher=fetcher,
            scraper=scraper,
            selector=selector,
            base_url=base_url,
        )
    )
