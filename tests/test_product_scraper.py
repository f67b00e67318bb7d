# tests/test_product_scraper.py

"""Tests for scraping a single catalogue entry."""

import unittest
from decimal import Decimal
from unittest.mock import MagicMock

from bs4 import BeautifulSoup, Tag

from catalogue_scraper.models.product import Product
from catalogue_scraper.scrapers.fetcher import DocumentFetcher
from catalogue_scraper.scrapers.product_scraper import scrape_product


def _entry(html: str) -> Tag:
    """Parse an entry fragment and return its wrapping div."""
    soup = BeautifulSoup(
        f'<div class="product">{html}</div>', "lxml"
    )
    node = soup.select_one(".product")
    assert node is not None
    return node


def stub_fetcher(url: str) -> BeautifulSoup:
    """Never consulted by the stub page reader."""
    return BeautifulSoup("", "lxml")


def stub_page_reader(
    url: str, fetcher: DocumentFetcher,
) -> tuple[int, str]:
    """Return canned page facts."""
    return 42, "life, etc."


class TestScrapeProduct(unittest.TestCase):
    """scrape_product builds a Product from an entry node."""

    def test_builds_product(self) -> None:
        """Title, price, size and description are all populated."""
        entry = _entry(
            '<a href="example.com">hi</a>'
            '<p class="pricePerUnit">£3.50</p>'
        )
        product = scrape_product(entry, stub_page_reader, stub_fetcher)
        self.assertEqual(
            product,
            Product(
                title="hi",
                unit_price=Decimal("3.50"),
                page_size=42,
                description="life, etc.",
            ),
        )

    def test_title_is_trimmed(self) -> None:
        """Whitespace around the link text is removed."""
        entry = _entry(
            '<h3><a href="/p/1">\n   Apricot Ripe   \n</a></h3>'
            '<p class="pricePerUnit">£3.50/unit</p>'
        )
        product = scrape_product(entry, stub_page_reader, stub_fetcher)
        self.assertEqual(product.title, "Apricot Ripe")

    def test_page_reader_gets_href_and_fetcher(self) -> None:
        """The link target and the injected fetcher reach the reader."""
        reader = MagicMock(return_value=(10, "d"))
        entry = _entry('<a href="https://shop.test/p/9">x</a>')
        scrape_product(entry, reader, stub_fetcher)
        reader.assert_called_once_with(
            "https://shop.test/p/9", stub_fetcher
        )

    def test_relative_href_resolved_against_base(self) -> None:
        """A base URL turns a relative link into an absolute one."""
        reader = MagicMock(return_value=(10, "d"))
        entry = _entry('<a href="apricot.html">x</a>')
        scrape_product(
            entry,
            reader,
            stub_fetcher,
            base_url="https://shop.test/catalogue/index.html",
        )
        reader.assert_called_once_with(
            "https://shop.test/catalogue/apricot.html", stub_fetcher
        )

    def test_missing_price_defaults_to_zero(self) -> None:
        """An entry with no price element costs zero."""
        entry = _entry('<a href="/p/1">Free sample</a>')
        product = scrape_product(entry, stub_page_reader, stub_fetcher)
        self.assertEqual(product.unit_price, Decimal("0"))

    def test_missing_link_raises(self) -> None:
        """An entry without a link cannot be scraped."""
        entry = _entry('<p class="pricePerUnit">£3.50</p>')
        with self.assertRaises(ValueError):
            scrape_product(entry, stub_page_reader, stub_fetcher)

    def test_empty_href_raises(self) -> None:
        """A link with an empty href cannot be fetched."""
        entry = _entry('<a href="  ">x</a>')
        with self.assertRaises(ValueError):
            scrape_product(entry, stub_page_reader, stub_fetcher)

    def test_reader_failure_propagates(self) -> None:
        """Errors from the page reader are not swallowed."""
        reader = MagicMock(side_effect=RuntimeError("boom"))
        entry = _entry('<a href="/p/1">x</a>')
        with self.assertRaises(RuntimeError):
            scrape_product(entry, reader, stub_fetcher)


if __name__ == "__main__":
    unittest.main()
