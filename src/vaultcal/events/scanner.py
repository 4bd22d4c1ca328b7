"""Vault-wide event scan: reads every note and collects its events."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from vaultcal.events.extractor import EntryError, extract_events, split_lines
from vaultcal.events.filters import EventQuery, matches_filter
from vaultcal.events.synthesizer import Event
from vaultcal.parsing.parser import line_contains_parse_below_token
from vaultcal.parsing.status import EventCategory
from vaultcal.vault.connector import VaultConnector
from vaultcal.vault.metadata import has_matching_metadata
from vaultcal.vault.parser import parse_note_metadata

logger = logging.getLogger(__name__)


@dataclass
class FileFailure:
    """A note that could not be read or scanned."""

    path: str
    error: str


@dataclass
class ScanResult:
    """Events collected across the vault, plus what went wrong along the way."""

    events: list[Event] = field(default_factory=list)
    failures: list[FileFailure] = field(default_factory=list)
    entry_errors: list[EntryError] = field(default_factory=list)


def _parse_below_index(text: str, token: str) -> int | None:
    """Return the index of the first line holding the token, -1 for no token.

    None means the token is set but the note never contains it.
    """
    if token == "":
        return -1
    for index, line in enumerate(split_lines(text)):
        if line_contains_parse_below_token(line, token):
            return index
    return None


def _note_selected(note_path: str, text: str, query: EventQuery) -> bool:
    if not query.metadata_keys and not query.metadata_values:
        return True
    return has_matching_metadata(
        parse_note_metadata(note_path, text), query.metadata_keys, query.metadata_values
    )


def scan_vault_for_events(
    connector: VaultConnector,
    query: EventQuery | None = None,
    event_type: EventCategory | str = EventCategory.DEFAULT,
    parse_below_token: str = "",
) -> ScanResult:
    """Extract events from every note in the vault.

    Notes are processed one at a time and each note's events stay in line
    order. A note that can't be read is recorded in ``failures`` and the scan
    moves on. With ``parse_below_token`` set, only entries after the first
    line holding the token count, and notes without it contribute nothing.
    """
    query = query or EventQuery()
    result = ScanResult()

    for note in connector.list_notes():
        note_path = note.as_posix()
        try:
            text = connector.read_text(note)
        except Exception as e:
            logger.warning("Error reading %s: %s", note_path, e)
            result.failures.append(FileFailure(path=note_path, error=str(e)))
            continue

        if not _note_selected(note_path, text, query):
            continue

        below = _parse_below_index(text, parse_below_token)
        if below is None:
            continue

        errors: list[EntryError] = []
        events = extract_events(text, note_path, event_type, on_error=errors.append)
        result.entry_errors.extend(err for err in errors if err.line_index > below)
        result.events.extend(e for e in events if e.line > below and matches_filter(e, query))

    logger.debug(
        "Scanned vault %s: %d events, %d failed notes",
        connector.vault_path,
        len(result.events),
        len(result.failures),
    )
    return result


def get_events_in_range(
    connector: VaultConnector,
    start: date,
    end: date,
    query: EventQuery | None = None,
    event_type: EventCategory | str = EventCategory.DEFAULT,
    parse_below_token: str = "",
) -> list[Event]:
    """Get events whose date falls within [start, end], sorted by date.

    Events on the same date keep their scan order.
    """
    scan = scan_vault_for_events(connector, query, event_type, parse_below_token)
    in_range = [e for e in scan.events if start <= e.start.date() <= end]
    in_range.sort(key=lambda e: e.start)
    return in_range
