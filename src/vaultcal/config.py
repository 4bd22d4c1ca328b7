"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VAULTCAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Vault settings
    vault_path: Path | None = None
    include_patterns: list[str] = ["**/*.md"]
    exclude_patterns: list[str] | None = None  # None = connector defaults

    # Extraction settings
    default_event_type: str = "default"
    process_entries_below: str = ""  # only parse entries below the line holding this text

    # Events API cache
    events_cache_ttl: float = 60.0  # seconds


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
