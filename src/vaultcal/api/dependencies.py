"""FastAPI dependency injection for shared resources."""

from functools import lru_cache

from vaultcal.config import Settings
from vaultcal.vault.connector import VaultConnector


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def build_connector(settings: Settings) -> VaultConnector | None:
    """Build a connector for the configured vault, or None if it is missing."""
    vault_path = settings.vault_path
    if not vault_path or not vault_path.exists():
        return None
    return VaultConnector(
        vault_path,
        include_patterns=settings.include_patterns,
        exclude_patterns=settings.exclude_patterns,
    )
