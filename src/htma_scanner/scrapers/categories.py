"""Mapping from show categories to listing page URLs."""

from urllib.parse import quote

from htma_scanner.config import settings
from htma_scanner.scrapers.models import Category

# Path segment of each category's listing page on the box office site.
# OTHER uses the site root, which lists every show.
CATEGORY_PATHS: dict[Category, str] = {
    Category.COMEDY: "בידור",
    Category.MUSIC: "מוסיקה",
    Category.OTHER: "",
}


def get_category_url(category: Category, base_url: str | None = None) -> str:
    """
    Get the listing page URL for a category.

    Args:
        category: Category to fetch
        base_url: Site root (uses settings if not provided)

    Returns:
        Absolute URL with the Hebrew path segment percent-encoded
    """
    root = (base_url or settings.base_url).rstrip("/")
    return f"{root}/{quote(CATEGORY_PATHS[category])}"
