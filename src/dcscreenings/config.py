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

    # TMDb API (enrichment is skipped when empty)
    tmdb_api_key: str = ""

    # Scraping settings
    scrape_timeout: int = 30
    browser_timeout_ms: int = 30000
    browser_headless: bool = True
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    # Reference timezone for "today"
    timezone: str = "America/New_York"

    # Output
    snapshot_path: str = "data/screenings.json"


# Global settings instance
settings = Settings()
