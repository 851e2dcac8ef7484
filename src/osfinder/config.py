from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database
    database_url: str
    db_echo: bool = False

    # JWT
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_access_expire_minutes: int = 30
    jwt_refresh_expire_days: int = 7

    # Public site (used for backlink verification and claim codes)
    site_url: str = "https://opensourcefinder.com"
    backlink_markers: list[str] = [
        "opensourcefinder.com",
        "open-source-finder.com",
        "OpenSourceFinder",
        "Open Source Finder",
    ]

    # Outbound HTTP (GitHub raw content / API)
    github_token: str | None = None
    http_timeout_seconds: float = 10.0

    # Sponsor plan
    sponsor_duration_days: int = 7


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
