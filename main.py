# main.py

"""Entry point for the catalogue scraper CLI."""

import argparse
import asyncio
import logging
import sys

from catalogue_scraper.config.logging_config import setup_logging
from catalogue_scraper.config.settings import Settings

logger = logging.getLogger("catalogue_scraper.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="catalogue_scraper",
        description=(
            "Scrape a product catalogue and print a JSON report of "
            "titles, sizes, unit prices and their total."
        ),
    )
    parser.add_argument(
        "-u",
        "--url",
        default=Settings.CATALOGUE_URL,
        help="Catalogue page URL (default: CATALOGUE_URL setting).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the report to this file instead of stdout.",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=None,
        help="Seconds allowed per HTTP request (default: REQUEST_TIMEOUT).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the scrape and exit with its status."""
    log_file = setup_logging()
    logger.info("catalogue_scraper starting, log file: %s", log_file)

    args = _build_parser().parse_args(argv)

    from catalogue_scraper.cli.runner import run_scrape

    exit_code = asyncio.run(
        run_scrape(
            url=args.url,
            output=args.output,
            request_timeout=args.timeout,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
