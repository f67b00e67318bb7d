# catalogue_scraper/storage/report_formatter.py

"""Aggregation, display formatting and JSON serialization of reports.

The display rules are plain functions so they can be tested apart from
serialization:

* sizes are kilobytes (``bytes / 1000``) rounded half-up to one place,
  with a trailing ``.0`` dropped: ``61550 -> "61.6kb"``, ``40000 -> "40kb"``;
* prices always carry two decimals and are written to JSON as bare
  numbers (``3.50``, not ``"3.50"`` or ``3.5``).
"""

import json
import logging
import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from catalogue_scraper.models.product import Product
from catalogue_scraper.models.report import ProductDisplay, Report

logger = logging.getLogger("catalogue_scraper.report")

_CENTS = Decimal("0.01")
_INDENT = "    "


def total_price(products: Iterable[Product]) -> Decimal:
    """Sum unit prices at full precision."""
    return sum((p.unit_price for p in products), Decimal("0"))


def round_half_up_one_place(value: float) -> float:
    """Round to one decimal place, halves away from zero for positives."""
    return math.floor(value * 10 + 0.5) / 10


def _plain_number(value: float) -> str:
    """Shortest decimal text for *value*, without a trailing ``.0``."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_size(size_bytes: int) -> str:
    """Render a byte count as e.g. ``"61.6kb"``."""
    kilobytes = round_half_up_one_place(size_bytes / 1000.0)
    return f"{_plain_number(kilobytes)}kb"


def format_price(value: Decimal) -> str:
    """Render a price with exactly two decimal places."""
    return str(value.quantize(_CENTS, rounding=ROUND_HALF_UP))


def to_display(product: Product) -> ProductDisplay:
    """Project a Product onto its display form."""
    return ProductDisplay(
        title=product.title,
        size=format_size(product.page_size),
        unit_price=format_price(product.unit_price),
        description=product.description,
    )


def render(products: Iterable[Product]) -> Report:
    """Build the report, keeping the given product order."""
    items = list(products)
    total = total_price(items)
    logger.debug(
        "Rendering %d products, total %s", len(items), total
    )
    return Report(
        results=tuple(to_display(p) for p in items),
        total=format_price(total),
    )


def _json_string(value: str) -> str:
    """Encode a JSON string literal; ``&``, ``<``, ``>`` stay literal."""
    return json.dumps(value, ensure_ascii=False)


def _display_lines(item: ProductDisplay, depth: int) -> list[str]:
    """JSON object lines for one result entry."""
    pad = _INDENT * depth
    inner = _INDENT * (depth + 1)
    fields = [
        f'{inner}"title": {_json_string(item.title)}',
        f'{inner}"size": {_json_string(item.size)}',
        f'{inner}"unit_price": {item.unit_price}',
        f'{inner}"description": {_json_string(item.description)}',
    ]
    return [f"{pad}{{", ",\n".join(fields), f"{pad}}}"]


def serialize(report: Report) -> bytes:
    """Serialize *report* as indented UTF-8 JSON ending in a newline.

    Prices are numeric tokens that must keep their trailing zeros,
    which :mod:`json` cannot express for numbers, so the object is
    laid out here and only string literals go through :func:`json.dumps`.
    """
    if report.results:
        entries = [
            "\n".join(_display_lines(item, 2))
            for item in report.results
        ]
        results = "[\n" + ",\n".join(entries) + f"\n{_INDENT}]"
    else:
        results = "[]"

    text = (
        "{\n"
        f'{_INDENT}"results": {results},\n'
        f'{_INDENT}"total": {report.total}\n'
        "}\n"
    )
    return text.encode("utf-8")
