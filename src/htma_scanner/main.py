"""Command-line entry point: scan category listings and print the shows."""

import argparse
import asyncio
import json
import logging
import sys

from htma_scanner.config import settings
from htma_scanner.scrapers.models import Category
from htma_scanner.tasks.scan_job import DEFAULT_CATEGORIES, ScanReport, run_scan

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _category(value: str) -> Category:
    try:
        return Category.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htma-scanner",
        description="List upcoming shows from the Haifa theatre box office.",
    )
    parser.add_argument(
        "categories",
        nargs="*",
        type=_category,
        metavar="CATEGORY",
        help=(
            "Categories to scan: "
            f"{', '.join(c.value for c in Category)} "
            f"(default: {', '.join(c.value for c in DEFAULT_CATEGORIES)})"
        ),
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print shows as a JSON array",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        metavar="LEVEL",
        help=f"Logging level: {', '.join(LOG_LEVELS)} (default: {settings.log_level.upper()})",
    )
    return parser


def print_report(report: ScanReport, as_json: bool = False) -> None:
    """Print the shows on stdout and skip/failure summaries on stderr."""
    if as_json:
        print(json.dumps([show.to_dict() for show in report.shows], ensure_ascii=False, indent=2))
    else:
        for show in report.shows:
            print(show)

    for category, result in report.results.items():
        if result.skipped:
            print(f"{category}: skipped {len(result.skipped)} card(s)", file=sys.stderr)
    for category, error in report.failures.items():
        print(f"{category}: FAILED: {error}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    categories = args.categories or list(DEFAULT_CATEGORIES)
    report = asyncio.run(run_scan(categories))
    print_report(report, as_json=args.json)
    return 0 if report.all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
