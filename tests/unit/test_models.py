"""Unit tests for the scraper data models."""

import dataclasses
from datetime import date, datetime, time, timezone

import pytest

from htma_scanner.scrapers.models import Category, ExtractionResult, Show


def make_show(**overrides) -> Show:
    fields = {
        "title": "Show A",
        "date": date(2025, 3, 1),
        "time": time(19, 0),
        "category": Category.COMEDY,
    }
    fields.update(overrides)
    return Show(**fields)


class TestCategory:
    def test_str_is_display_name(self) -> None:
        assert str(Category.COMEDY) == "Comedy"
        assert str(Category.OTHER) == "Other"

    def test_from_name_is_case_insensitive(self) -> None:
        assert Category.from_name("music") == Category.MUSIC
        assert Category.from_name("  COMEDY ") == Category.COMEDY

    def test_from_name_rejects_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown category"):
            Category.from_name("Opera")


class TestShow:
    def test_strips_title(self) -> None:
        assert make_show(title="  Show A \n").title == "Show A"

    def test_rejects_blank_title(self) -> None:
        with pytest.raises(ValueError, match="title"):
            make_show(title="   ")

    def test_rejects_datetime_as_date(self) -> None:
        with pytest.raises(ValueError, match="date"):
            make_show(date=datetime(2025, 3, 1, 19, 0))

    def test_rejects_timezone_aware_time(self) -> None:
        with pytest.raises(ValueError, match="time"):
            make_show(time=time(19, 0, tzinfo=timezone.utc))

    def test_rejects_plain_string_category(self) -> None:
        with pytest.raises(ValueError, match="category"):
            make_show(category="Comedy")

    def test_is_immutable(self) -> None:
        show = make_show()
        with pytest.raises(dataclasses.FrozenInstanceError):
            show.title = "Other"  # type: ignore[misc]

    def test_equality_is_by_value(self) -> None:
        assert make_show() == make_show()
        assert make_show() != make_show(category=Category.MUSIC)

    def test_str(self) -> None:
        assert str(make_show()) == (
            "Title: Show A, Date: 2025-03-01, Time: 19:00:00, Category: Comedy"
        )

    def test_to_dict(self) -> None:
        assert make_show(title="אורקסטרה").to_dict() == {
            "title": "אורקסטרה",
            "date": "2025-03-01",
            "time": "19:00",
            "category": "Comedy",
        }


class TestExtractionResult:
    def test_defaults_to_empty_lists(self) -> None:
        result = ExtractionResult(category=Category.MUSIC)
        assert result.shows == []
        assert result.skipped == []

    def test_lists_are_not_shared(self) -> None:
        a = ExtractionResult(category=Category.MUSIC)
        b = ExtractionResult(category=Category.MUSIC)
        a.shows.append(make_show())
        assert b.shows == []
