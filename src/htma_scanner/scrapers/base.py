"""Base scraper interface for box office listing scrapers."""

import logging
import re
from abc import ABC, abstractmethod

import httpx
from bs4 import Tag

from htma_scanner.config import settings
from htma_scanner.exceptions import TransportError
from htma_scanner.scrapers.models import Category, ExtractionResult

logger = logging.getLogger(__name__)


class BaseScraper(ABC):
    """
    Abstract base class for listing scrapers.

    Subclasses implement get_shows. Unlike per-card problems, which are
    reported in the result, transport and document errors are raised.
    """

    @abstractmethod
    async def get_shows(self, category: Category) -> ExtractionResult:
        """
        Fetch the shows listed for a category.

        Args:
            category: Category listing to fetch

        Returns:
            Extracted shows and the cards that were skipped

        Raises:
            TransportError: if the page could not be fetched
            ParseError: if the page is not a listing page
        """
        pass

    async def _fetch_html(self, url: str) -> str:
        """GET a page and return its body, raising TransportError on failure."""
        logger.debug(f"Fetching {url}")
        try:
            async with httpx.AsyncClient(
                timeout=settings.scrape_timeout,
                verify=settings.verify_ssl,
                follow_redirects=True,
                headers={"User-Agent": settings.user_agent},
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPError as e:
            raise TransportError(url, str(e) or type(e).__name__) from e

    @staticmethod
    def _get_text(tag: Tag) -> str:
        """Get clean text from a tag with runs of whitespace collapsed."""
        return re.sub(r"\s+", " ", tag.get_text(separator=" ")).strip()
