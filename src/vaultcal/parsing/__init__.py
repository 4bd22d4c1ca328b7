"""Pattern matching and entry parsing for note text."""

from vaultcal.parsing.parser import ListEntry, ParsedLine, extract_dates, parse_line
from vaultcal.parsing.status import EventCategory, TaskStatus, mark_for_event_type

__all__ = [
    "EventCategory",
    "ListEntry",
    "ParsedLine",
    "TaskStatus",
    "extract_dates",
    "mark_for_event_type",
    "parse_line",
]
