"""Event synthesizer: builds calendar events from parsed entries."""

from dataclasses import dataclass
from datetime import datetime, time

from vaultcal.errors import EventSynthesisError
from vaultcal.parsing.parser import ParsedLine
from vaultcal.parsing.status import EventCategory


@dataclass
class Event:
    """A calendar event extracted from a note.

    ``id`` is only unique within one file; compose it with ``path`` (see
    ``uid``) when events from several notes share a collection.
    """

    id: str
    title: str
    start: datetime
    end: datetime
    all_day: bool
    event_type: str
    path: str
    line: int  # index of the entry's first line in the note
    block_link: str | None = None

    @property
    def uid(self) -> str:
        return f"{self.path}#{self.id}"


def convert_to_event(
    parsed: ParsedLine,
    line_index: int,
    path: str,
    event_type: EventCategory | str = EventCategory.DEFAULT,
) -> Event | None:
    """Convert a parsed entry into an event, or None if it carries no date.

    Only the first matched date is used; start and end both fall on it and
    the event is all-day. Times parsed elsewhere in the entry are not attached.

    Raises:
        EventSynthesisError: the first date doesn't resolve to a calendar date.
    """
    if not parsed.dates:
        return None

    first = parsed.dates[0]
    if first.value is None:
        raise EventSynthesisError(f"Invalid date {first.date!r} in {parsed.original_line!r}")

    start = datetime.combine(first.value, time.min)
    end = datetime.combine(first.value, time.min)

    event = Event(
        id=f"{start:%Y%m%d%H%M}00{line_index}",
        title=parsed.content,
        start=start,
        end=end,
        all_day=True,
        event_type=str(event_type),
        path=path,
        line=line_index,
    )
    if parsed.block_link:
        event.block_link = parsed.block_link
    return event
