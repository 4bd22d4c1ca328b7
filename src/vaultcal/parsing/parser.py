"""Entry parser: turns one checklist item or plain line into a ParsedLine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from vaultcal.parsing.patterns import (
    ALT_DUE_DATE_RE,
    BLOCK_LINK_RE,
    DUE_DATE_RE,
    END_TIME_RE,
    RECURRENCE_RE,
    TASK_RE,
    TIME_RANGE_RE,
    TIME_STANDARD_RE,
    TIME_WITH_TAG_RE,
)
from vaultcal.parsing.status import TaskStatus, status_from_character


@dataclass
class TimeInfo:
    """A time of day written in a note."""

    hour: int
    minute: int
    second: int | None = None
    is_end_time: bool = False


@dataclass
class DateInfo:
    """One date annotation matched in the text."""

    date: str  # YYYY-MM-DD as written
    value: date | None  # None when the digits don't form a real calendar date
    raw_match: str  # exact matched substring, removed from content on cleanup


@dataclass
class ListEntry:
    """A raw entry: checklist text plus its indented continuation lines.

    Plain lines have an empty header and the whole line as body. The
    structural fields are filled in by the line grouper.
    """

    header: str
    body: str
    indentation: str = ""
    list_marker: str = ""
    status_character: str | None = None  # set only for checklist lines


@dataclass
class ParsedLine:
    """Canonical form of one entry after metadata extraction."""

    original_line: str
    content: str
    indentation: str = ""
    is_task: bool = False
    task_status: TaskStatus = TaskStatus.NOT_A_TASK
    status_character: str | None = None
    start_time: TimeInfo | None = None
    end_time: TimeInfo | None = None
    dates: list[DateInfo] = field(default_factory=list)
    has_recurrence: bool = False
    recurrence_rule: str | None = None
    block_link: str | None = None
    is_list_item: bool = False
    list_marker: str = ""


def _resolve_date(value: str) -> date | None:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def extract_dates(text: str) -> list[DateInfo]:
    """Extract every ``@{YYYY-MM-DD}`` annotation in order of appearance.

    Duplicates are kept. A leading space, if present, is part of the raw match.
    """
    return [
        DateInfo(date=m.group(1), value=_resolve_date(m.group(1)), raw_match=m.group(0))
        for m in DUE_DATE_RE.finditer(text)
    ]


def clean_content(content: str, dates: list[DateInfo]) -> str:
    """Remove each matched date annotation once, then trim."""
    result = content
    for info in dates:
        if info.raw_match:
            result = result.replace(info.raw_match, "", 1)
    return result.strip()


def parse_line(entry: ListEntry) -> ParsedLine:
    """Parse a raw entry into a ParsedLine.

    Dates are read from the header first and then the body, so the first
    annotation in reading order comes first. Content is the header when there
    is one, otherwise the body, with matched annotations stripped. Never raises
    on malformed text.
    """
    content = entry.header if entry.header else entry.body
    dates = extract_dates(entry.header) + extract_dates(entry.body)

    parsed = ParsedLine(
        original_line=entry.header + entry.body,
        content=clean_content(content, dates),
        indentation=entry.indentation,
        dates=dates,
        is_list_item=bool(entry.list_marker),
        list_marker=entry.list_marker,
    )
    if entry.status_character is not None:
        parsed.is_task = True
        parsed.status_character = entry.status_character
        parsed.task_status = status_from_character(entry.status_character)
    return parsed


def _time_from_groups(groups: tuple[str | None, ...], is_end_time: bool = False) -> TimeInfo | None:
    hour, minute = int(groups[0] or 0), int(groups[1] or 0)
    second = int(groups[2]) if groups[2] else None
    if hour > 23 or minute > 59 or (second is not None and second > 59):
        return None
    return TimeInfo(hour=hour, minute=minute, second=second, is_end_time=is_end_time)


def extract_times(line: str) -> tuple[TimeInfo | None, TimeInfo | None]:
    """Return (start, end) times written in a line.

    A ``HH:MM-HH:MM`` range gives both. Otherwise the start comes from a
    ``<time>`` tag or the first plain time, and the end from a ``⏲`` marker.
    Out-of-range values such as ``25:00`` are ignored.
    """
    range_match = TIME_RANGE_RE.search(line)
    if range_match:
        groups = range_match.groups()
        return _time_from_groups(groups[:3]), _time_from_groups(groups[3:], is_end_time=True)

    start: TimeInfo | None = None
    end: TimeInfo | None = None

    end_match = END_TIME_RE.search(line)
    if end_match:
        end = _time_from_groups(end_match.groups(), is_end_time=True)
        # Keep the end marker's digits from being read as the start time
        line = line[: end_match.start()] + line[end_match.end() :]

    tagged = TIME_WITH_TAG_RE.search(line)
    plain = tagged or TIME_STANDARD_RE.search(line)
    if plain:
        start = _time_from_groups(plain.groups())
    return start, end


def extract_recurrence(line: str) -> str | None:
    """Return the rule after a trailing ``🔁`` marker, if any."""
    match = RECURRENCE_RE.search(line)
    return match.group(1).strip() if match else None


def extract_block_link(line: str) -> str | None:
    """Return the id of a trailing `` ^block-id`` anchor, if any."""
    match = BLOCK_LINK_RE.search(line)
    return match.group(1) if match else None


def line_contains_time(line: str) -> bool:
    """Check if a line carries time or date information or is a task."""
    patterns = (
        TIME_STANDARD_RE,
        TIME_WITH_TAG_RE,
        DUE_DATE_RE,
        ALT_DUE_DATE_RE,
        END_TIME_RE,
        TASK_RE,
    )
    return any(pattern.search(line) for pattern in patterns)


def line_contains_parse_below_token(line: str, token: str) -> bool:
    """Check if a line contains the marker below which entries are parsed.

    An empty token means every line qualifies. The token is matched literally.
    """
    if token == "":
        return True
    return token in line
