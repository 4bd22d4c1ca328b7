"""Pydantic models for the VaultCal API."""

from datetime import datetime

from pydantic import BaseModel

from vaultcal.events.synthesizer import Event


class Note(BaseModel):
    """A parsed note from the vault."""

    path: str
    content: str
    frontmatter: dict[str, object]


class EventResponse(BaseModel):
    """A calendar event extracted from a note."""

    id: str  # unique within its note only
    uid: str  # "<path>#<id>", unique across the vault
    title: str
    start: datetime
    end: datetime
    all_day: bool
    event_type: str
    path: str
    line: int
    block_link: str | None = None

    @classmethod
    def from_event(cls, event: Event) -> "EventResponse":
        return cls(
            id=event.id,
            uid=event.uid,
            title=event.title,
            start=event.start,
            end=event.end,
            all_day=event.all_day,
            event_type=event.event_type,
            path=event.path,
            line=event.line,
            block_link=event.block_link,
        )
