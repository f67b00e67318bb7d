# catalogue_scraper/config/settings.py

"""Central configuration for the catalogue scraper."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the catalogue scraper."""

    # --- Catalogue ---
    CATALOGUE_URL: str = os.getenv(
        "CATALOGUE_URL",
        "http://hiring-tests.s3-website-eu-west-1.amazonaws.com"
        "/2015_Developer_Scrape/5_products.html",
    )
    PRODUCT_SELECTOR: str = ".product"      # One node per catalogue entry
    PRICE_SELECTOR: str = ".pricePerUnit"   # Per-unit price inside an entry
    LINK_SELECTOR: str = "a"                # Title + product page href

    # --- Fetching ---
    # Seconds per HTTP request; bounds every fetch, hung ones included
    REQUEST_TIMEOUT: float = float(
        os.getenv("CATALOGUE_REQUEST_TIMEOUT", "15")
    )
    HTML_PARSER: str = "lxml"

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": (
            "text/html,application/xhtml+xml,"
            "application/xml;q=0.9,image/avif,"
            "image/webp,image/apng,*/*;q=0.8"
        ),
        "Accept-Language": "en-GB,en;q=0.9",
        "sec-fetch-dest": "document",
        "sec-fetch-mode": "navigate",
        "sec-fetch-site": "none",
        "Upgrade-Insecure-Requests": "1",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
