# catalogue_scraper/services/catalogue_orchestrator.py

"""Orchestrates a catalogue scrape from root page to report."""

import asyncio
import functools
import logging

from catalogue_scraper.config.settings import Settings
from catalogue_scraper.models.product import Product
from catalogue_scraper.models.report import Report
from catalogue_scraper.scrapers.fetcher import (
    DocumentFetcher,
    PageReader,
    fetch_document,
)
from catalogue_scraper.scrapers.field_extractor import read_product_page
from catalogue_scraper.services.collector import collect_all
from catalogue_scraper.storage.report_formatter import render

logger = logging.getLogger("catalogue_scraper.orchestrator")


class CatalogueOrchestrator:
    """Coordinates fetching, concurrent scraping and report rendering.

    The fetcher and page reader are injected so the whole pipeline can
    run against in-memory documents. Without an injected fetcher,
    *request_timeout* bounds every HTTP request of the run.
    """

    def __init__(
        self,
        fetcher: DocumentFetcher | None = None,
        page_reader: PageReader = read_product_page,
        settings: Settings | None = None,
        request_timeout: float | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.fetcher: DocumentFetcher = (
            fetcher
            if fetcher is not None
            else functools.partial(
                fetch_document,
                timeout=request_timeout or self.settings.REQUEST_TIMEOUT,
            )
        )
        self.page_reader = page_reader

    async def scrape(self, url: str) -> list[Product]:
        """Fetch the catalogue at *url* and scrape all its entries."""
        logger.info("Fetching catalogue %s", url)
        root_doc = await asyncio.to_thread(self.fetcher, url)
        return await collect_all(
            root_doc,
            page_reader=self.page_reader,
            fetcher=self.fetcher,
            selector=self.settings.PRODUCT_SELECTOR,
            base_url=url,
        )

    async def build_report(self, url: str) -> Report:
        """Scrape *url* and render the resulting report."""
        products = await self.scrape(url)
        report = render(products)
        logger.info(
            "Report ready: %d products, total %s",
            len(report.results),
            report.total,
        )
        return report
