"""Exceptions raised while fetching and parsing listings."""


class ScraperError(Exception):
    """Base class for all scraper errors."""


class TransportError(ScraperError):
    """The listing page could not be fetched (network failure or non-2xx status)."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url


class ParseError(ScraperError):
    """A document or a date/time string did not have the expected shape."""


class ExtractionSkip(ScraperError):
    """A single show card is missing a field; the card is skipped, the batch continues."""
