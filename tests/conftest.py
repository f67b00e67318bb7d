# tests/conftest.py

"""Shared pytest fixtures for all catalogue scraper tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from catalogue_scraper.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_logs_dir(
    tmp_path: Path,
) -> Generator[Path, None, None]:
    """Point LOGS_DIR at a temp ``logs/`` dir so runs never touch the repo."""
    original = Settings.LOGS_DIR
    Settings.LOGS_DIR = tmp_path / "logs"
    yield Settings.LOGS_DIR
    Settings.LOGS_DIR = original
