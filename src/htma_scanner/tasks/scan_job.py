"""Scan job that fetches the listings of several categories."""

import asyncio
import logging
from dataclasses import dataclass, field

from htma_scanner.scrapers import BaseScraper, HtmaScraper
from htma_scanner.exceptions import ScraperError
from htma_scanner.scrapers.models import Category, ExtractionResult, Show

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (Category.COMEDY, Category.MUSIC)


@dataclass
class ScanReport:
    """Per-category outcome of a scan."""

    results: dict[Category, ExtractionResult] = field(default_factory=dict)
    failures: dict[Category, ScraperError] = field(default_factory=dict)

    @property
    def shows(self) -> list[Show]:
        """All shows, grouped by category in the order the categories were requested."""
        return [show for result in self.results.values() for show in result.shows]

    @property
    def all_ok(self) -> bool:
        return not self.failures


async def _scan_category(
    scraper: BaseScraper, category: Category
) -> ExtractionResult | ScraperError:
    try:
        return await scraper.get_shows(category)
    except ScraperError as e:
        logger.error(f"Error scanning {category}: {e}")
        return e


async def run_scan(
    categories: list[Category] | tuple[Category, ...] = DEFAULT_CATEGORIES,
    scraper: BaseScraper | None = None,
) -> ScanReport:
    """
    Fetch every requested category and collect the results.

    Categories are fetched concurrently and independently: a transport or
    document error in one category is recorded in the report and does not
    affect the others.
    """
    scraper = scraper or HtmaScraper()
    # Drop duplicates, keep request order
    categories = list(dict.fromkeys(categories))

    logger.info(f"Scanning {len(categories)} categories: {', '.join(map(str, categories))}")

    outcomes = await asyncio.gather(
        *(_scan_category(scraper, category) for category in categories)
    )

    report = ScanReport()
    for category, outcome in zip(categories, outcomes):
        if isinstance(outcome, ScraperError):
            report.failures[category] = outcome
        else:
            report.results[category] = outcome

    logger.info(
        f"Scan complete: {len(report.results)} succeeded, {len(report.failures)} failed, "
        f"{len(report.shows)} shows"
    )
    return report
