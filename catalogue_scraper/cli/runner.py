# catalogue_scraper/cli/runner.py

"""Headless scrape runner: builds the report and writes it once."""

import logging
import sys
from pathlib import Path
from typing import BinaryIO

from rich.console import Console
from rich.markup import escape

from catalogue_scraper.models.report import Report
from catalogue_scraper.services.catalogue_orchestrator import (
    CatalogueOrchestrator,
)
from catalogue_scraper.storage.report_formatter import serialize

logger = logging.getLogger("catalogue_scraper.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def write_report(
    report: Report,
    output: str | None = None,
    sink: BinaryIO | None = None,
) -> None:
    """Write the serialized report to *output* or to *sink*/stdout."""
    payload = serialize(report)
    if output is not None:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
        _err.print(f"[dim]Saved report → {escape(str(path))}[/dim]")
        return
    stream = sink if sink is not None else sys.stdout.buffer
    stream.write(payload)
    stream.flush()


async def run_scrape(
    url: str,
    output: str | None = None,
    request_timeout: float | None = None,
    orchestrator: CatalogueOrchestrator | None = None,
) -> int:
    """Scrape *url* and emit the report. Returns an exit code (0=ok, 1=fail).

    Any failure aborts before anything is written, so a partial report
    is never emitted.
    """
    orch = orchestrator or CatalogueOrchestrator(
        request_timeout=request_timeout
    )
    _err.print(f"[bold]Scraping:[/bold] {escape(url)}")

    try:
        report = await orch.build_report(url)
    except Exception as exc:
        logger.error("Scrape of %s failed: %s", url, exc, exc_info=True)
        _err.print(f"[red]Scrape failed: {escape(str(exc))}[/red]")
        return 1

    _err.print(
        f"[green]✓ {len(report.results)} products,"
        f" total {report.total}[/green]"
    )
    try:
        write_report(report, output)
    except OSError as exc:
        logger.error("Writing report failed: %s", exc, exc_info=True)
        _err.print(f"[red]Write failed: {escape(str(exc))}[/red]")
        return 1
    return 0
