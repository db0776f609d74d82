"""Data models for scrapers."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Any


class Category(str, Enum):
    """Show category on the box office site."""

    COMEDY = "Comedy"
    MUSIC = "Music"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Category":
        """
        Look up a category by its display name, ignoring case.

        Raises:
            ValueError: if no category has that name
        """
        wanted = name.strip().lower()
        for category in cls:
            if category.value.lower() == wanted:
                return category
        raise ValueError(f"Unknown category: {name!r}")


@dataclass(frozen=True)
class Show:
    """
    A single show extracted from a listing page.

    Only ever built once every field has been extracted and normalised,
    so a Show is always complete.
    """

    title: str  # Show title as it appears on the listing
    date: date  # Calendar date, no time-of-day
    time: time  # Wall-clock start time, no timezone
    category: Category  # Listing the show was found on

    def __post_init__(self) -> None:
        """Validate fields and store the title trimmed."""
        title = self.title.strip() if isinstance(self.title, str) else ""
        if not title:
            raise ValueError("title must be a non-empty string")
        if isinstance(self.date, datetime) or not isinstance(self.date, date):
            raise ValueError("date must be a date without a time component")
        if not isinstance(self.time, time) or self.time.tzinfo is not None:
            raise ValueError("time must be a naive time of day")
        if not isinstance(self.category, Category):
            raise ValueError("category must be a Category")
        object.__setattr__(self, "title", title)

    def __str__(self) -> str:
        return (
            f"Title: {self.title}, Date: {self.date}, "
            f"Time: {self.time}, Category: {self.category}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            "title": self.title,
            "date": self.date.isoformat(),
            "time": self.time.strftime("%H:%M"),
            "category": self.category.value,
        }


@dataclass(frozen=True)
class SkippedCard:
    """A show card that could not be turned into a Show."""

    position: int  # 0-based index of the card in document order
    reason: str


@dataclass
class ExtractionResult:
    """Shows extracted from one listing page, plus the cards that were skipped."""

    category: Category
    shows: list[Show] = field(default_factory=list)
    skipped: list[SkippedCard] = field(default_factory=list)
