"""Vault connector and front matter modules."""

from vaultcal.vault.connector import VaultConnector
from vaultcal.vault.metadata import NoteMetadata, has_matching_metadata
from vaultcal.vault.parser import parse_markdown

__all__ = ["NoteMetadata", "VaultConnector", "has_matching_metadata", "parse_markdown"]
