"""Line grouper: splits a note into entries and extracts events from them.

A checklist line (``- [ ] text``) owns every following indented line that is
not itself a checklist line; those lines, trimmed, become the entry's body.
Any other line is an entry of its own.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from vaultcal.events.synthesizer import Event, convert_to_event
from vaultcal.parsing.parser import ListEntry, ParsedLine, parse_line
from vaultcal.parsing.patterns import CHECKLIST_RE, INDENTED_RE, LIST_ITEM_RE
from vaultcal.parsing.status import EventCategory

logger = logging.getLogger(__name__)


@dataclass
class EntryError:
    """An entry that failed to convert into an event."""

    path: str
    line_index: int
    text: str
    error: str


def split_lines(text: str) -> list[str]:
    """Split note text into lines, accepting both LF and CRLF endings."""
    return text.replace("\r\n", "\n").split("\n")


def _plain_entry(line: str) -> ListEntry:
    list_match = LIST_ITEM_RE.match(line)
    if list_match:
        return ListEntry(
            header="",
            body=line,
            indentation=list_match.group(1),
            list_marker=list_match.group(2),
        )
    indent_match = INDENTED_RE.match(line)
    return ListEntry(header="", body=line, indentation=indent_match.group(0) if indent_match else "")


def iter_entries(lines: list[str]) -> Iterator[tuple[int, ListEntry]]:
    """Yield (header line index, raw entry) pairs in line order."""
    index = 0
    while index < len(lines):
        line = lines[index]
        checklist = CHECKLIST_RE.match(line)
        if not checklist:
            yield index, _plain_entry(line)
            index += 1
            continue

        body_lines: list[str] = []
        next_index = index + 1
        while (
            next_index < len(lines)
            and INDENTED_RE.match(lines[next_index])
            and not CHECKLIST_RE.match(lines[next_index])
        ):
            body_lines.append(lines[next_index].strip())
            next_index += 1

        yield index, ListEntry(
            header=checklist.group(4).strip(),
            body="\n".join(body_lines),
            indentation=checklist.group(1),
            list_marker=checklist.group(2),
            status_character=checklist.group(3),
        )
        index = next_index


def group_entries(lines: list[str]) -> list[tuple[int, ParsedLine]]:
    """Parse every entry of a note, paired with its header line index."""
    return [(index, parse_line(entry)) for index, entry in iter_entries(lines)]


def extract_events(
    text: str,
    path: str,
    event_type: EventCategory | str = EventCategory.DEFAULT,
    on_error: Callable[[EntryError], None] | None = None,
) -> list[Event]:
    """Extract all dated entries of a note as events, in line order.

    An entry that fails to convert is logged and passed to ``on_error``;
    the remaining entries are still processed.
    """
    events: list[Event] = []
    for index, parsed in group_entries(split_lines(text)):
        try:
            event = convert_to_event(parsed, index, path, event_type)
        except Exception as e:
            logger.warning(
                "Error converting entry to event in %s (line %d, %r): %s",
                path,
                index,
                parsed.original_line,
                e,
            )
            if on_error is not None:
                on_error(
                    EntryError(path=path, line_index=index, text=parsed.original_line, error=str(e))
                )
            continue
        if event is not None:
            events.append(event)
    return events
