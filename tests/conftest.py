"""Shared test fixtures."""

from pathlib import Path

import pytest

FIXTURE_DIR = Path(__file__).parent / "scrapers" / "fixtures" / "htma"


@pytest.fixture
def comedy_html() -> str:
    """Comedy listing with two well-formed show cards."""
    return (FIXTURE_DIR / "comedy.html").read_text(encoding="utf-8")


@pytest.fixture
def mixed_html() -> str:
    """Music listing with two good cards and four malformed ones."""
    return (FIXTURE_DIR / "mixed.html").read_text(encoding="utf-8")


@pytest.fixture
def empty_listing_html() -> str:
    """Listing page whose container holds no show cards."""
    return (FIXTURE_DIR / "empty_listing.html").read_text(encoding="utf-8")
