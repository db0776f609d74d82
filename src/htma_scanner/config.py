"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Box office site
    base_url: str = "https://htma.smarticket.co.il"

    # Scraping settings
    scrape_timeout: int = 30
    user_agent: str = "Mozilla/5.0 (compatible; htma-scanner/0.1)"
    verify_ssl: bool = True

    # Logging
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
