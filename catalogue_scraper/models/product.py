# catalogue_scraper/models/product.py

"""Product data model for inter-module data flow."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    """Facts scraped for a single catalogue entry.

    ``page_size`` is the byte length of the product page's serialized
    HTML, not its transfer size.
    """

    title: str
    unit_price: Decimal
    page_size: int
    description: str = ""
