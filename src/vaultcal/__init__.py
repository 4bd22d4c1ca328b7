"""VaultCal: calendar events extracted from Obsidian vault notes."""

__version__ = "0.1.0"
