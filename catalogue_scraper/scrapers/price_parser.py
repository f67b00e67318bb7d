# catalogue_scraper/scrapers/price_parser.py

"""Unit price extraction from free-form price text."""

import logging
import re
from decimal import Decimal, InvalidOperation

logger = logging.getLogger("catalogue_scraper.price")

_DECIMAL_RE = re.compile(r"[0-9]+\.[0-9]+")

ZERO_PRICE = Decimal("0")


def parse_price(raw: str | None) -> Decimal:
    """Extract the first decimal number from text like '£3.50/unit'.

    Text with no decimal number yields zero. Only the first match is
    used, later numbers in the same text are ignored.

    Raises:
        ValueError: if a matched substring does not convert. The
            pattern only admits valid decimals, so this is a bug.
    """
    if not raw:
        return ZERO_PRICE
    match = _DECIMAL_RE.search(raw)
    if match is None:
        logger.debug("No price found in %r, using 0", raw)
        return ZERO_PRICE
    try:
        return Decimal(match.group())
    except InvalidOperation as exc:
        msg = f"Unparseable price {match.group()!r} in {raw!r}"
        raise ValueError(msg) from exc
