# catalogue_scraper/models/report.py

"""Display-side models built at formatting time."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDisplay:
    """Read-only projection of a Product with rendered size and price."""

    title: str
    size: str          # e.g. "61.6kb"
    unit_price: str    # two-decimal numeric token, e.g. "3.50"
    description: str


@dataclass(frozen=True)
class Report:
    """Final output value: ordered results plus their price total."""

    results: tuple[ProductDisplay, ...] = ()
    total: str = "0.00"
