"""Haifa theatre (htma.smarticket.co.il) listing scraper using BeautifulSoup."""

import logging

from bs4 import BeautifulSoup, Tag

from htma_scanner.exceptions import ExtractionSkip, ParseError
from htma_scanner.scrapers.base import BaseScraper
from htma_scanner.scrapers.categories import get_category_url
from htma_scanner.scrapers.models import Category, ExtractionResult, Show, SkippedCard
from htma_scanner.utils.dates import parse_show_datetime

logger = logging.getLogger(__name__)

# Selectors tied to the site's current markup
LISTING_SELECTOR = "div.category_shows"
CARD_SELECTOR = "div.details-container"
TITLE_SELECTOR = "h2"
DATE_SELECTOR = "div.date_container"
TIME_SELECTOR = "div.time_container"


class HtmaScraper(BaseScraper):
    """
    Scraper for the Haifa theatre box office.

    Each category page holds a single <div class="category_shows"> with one
    <div class="details-container"> card per show. A card has the title in
    an <h2>, the date as "יום ד', 15 בינואר 2025" in div.date_container and
    the time as "בשעה 20:30" in div.time_container.
    Static HTML, no JS rendering required.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url

    async def get_shows(self, category: Category) -> ExtractionResult:
        """Fetch and extract the listing for one category."""
        url = get_category_url(category, self.base_url)
        html = await self._fetch_html(url)
        result = self._parse_html(html, category)

        logger.info(
            f"HTMA {category}: found {len(result.shows)} shows, "
            f"skipped {len(result.skipped)} cards"
        )
        return result

    def _parse_html(self, html: str, category: Category) -> ExtractionResult:
        """Parse show cards from a listing page."""
        if not html or not html.strip():
            raise ParseError("Empty document")

        soup = BeautifulSoup(html, "html.parser")
        listing = soup.select_one(LISTING_SELECTOR)
        if listing is None:
            raise ParseError(f"No {LISTING_SELECTOR} element in document")

        result = ExtractionResult(category=category)
        for position, card in enumerate(listing.select(CARD_SELECTOR)):
            try:
                result.shows.append(self._parse_card(card, category))
            except ExtractionSkip as e:
                logger.warning(f"HTMA {category}: skipped card {position}: {e}")
                result.skipped.append(SkippedCard(position=position, reason=str(e)))

        return result

    def _parse_card(self, card: Tag, category: Category) -> Show:
        """Parse a single show card, raising ExtractionSkip if any field is unusable."""
        title = self._field_text(card, TITLE_SELECTOR, "title")
        date_text = self._field_text(card, DATE_SELECTOR, "date")
        time_text = self._field_text(card, TIME_SELECTOR, "time")

        try:
            show_date, show_time = parse_show_datetime(date_text, time_text)
        except ParseError as e:
            raise ExtractionSkip(str(e)) from e

        return Show(title=title, date=show_date, time=show_time, category=category)

    def _field_text(self, card: Tag, selector: str, name: str) -> str:
        tag = card.select_one(selector)
        text = self._get_text(tag) if tag is not None else ""
        if not text:
            raise ExtractionSkip(f"missing {name}")
        return text
