"""Box office listing scrapers."""

from htma_scanner.exceptions import (
    ExtractionSkip,
    ParseError,
    ScraperError,
    TransportError,
)
from htma_scanner.scrapers.base import BaseScraper
from htma_scanner.scrapers.categories import CATEGORY_PATHS, get_category_url
from htma_scanner.scrapers.htma import HtmaScraper
from htma_scanner.scrapers.models import Category, ExtractionResult, Show, SkippedCard

__all__ = [
    "CATEGORY_PATHS",
    "get_category_url",
    "BaseScraper",
    "HtmaScraper",
    "Category",
    "ExtractionResult",
    "Show",
    "SkippedCard",
    "ScraperError",
    "TransportError",
    "ParseError",
    "ExtractionSkip",
]
