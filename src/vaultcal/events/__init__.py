"""Event synthesis, line grouping, filtering and vault scanning."""

from vaultcal.events.extractor import EntryError, extract_events, group_entries
from vaultcal.events.filters import EventQuery, matches_filter
from vaultcal.events.synthesizer import Event, convert_to_event

__all__ = [
    "EntryError",
    "Event",
    "EventQuery",
    "convert_to_event",
    "extract_events",
    "group_entries",
    "matches_filter",
]
