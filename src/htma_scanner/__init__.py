"""Show listing scraper for the Haifa theatre box office."""

__version__ = "0.1.0"
