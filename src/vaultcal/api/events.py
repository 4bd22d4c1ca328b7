"""Calendar events API endpoints."""

import logging
import time
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from vaultcal.api.dependencies import build_connector, get_settings
from vaultcal.config import Settings
from vaultcal.events.filters import EventQuery
from vaultcal.events.scanner import get_events_in_range
from vaultcal.models import EventResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["events"])

# Simple TTL cache for events
_cache: dict[str, object] = {"data": None, "ts": 0.0, "key": ""}


def _parse_date(value: str, name: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid {name} date: {value}") from None


@router.get("/events", response_model=list[EventResponse])
async def list_events(
    settings: Annotated[Settings, Depends(get_settings)],
    start: str = Query(description="Start date YYYY-MM-DD"),
    end: str = Query(description="End date YYYY-MM-DD"),
    event_type: str | None = Query(default=None, description="Only events of this type"),
    content: str | None = Query(default=None, description="Regex the title must match"),
    folder: Annotated[list[str] | None, Query(description="Folder prefixes to include")] = None,
) -> list[EventResponse]:
    """List calendar events in a date range."""
    start_date = _parse_date(start, "start")
    end_date = _parse_date(end, "end")
    if end_date < start_date:
        raise HTTPException(status_code=400, detail="end must not be before start")

    cache_key = (
        f"{settings.vault_path}:{settings.default_event_type}:{settings.process_entries_below}:"
        f"{start}:{end}:{event_type}:{content}:{folder}"
    )
    now = time.time()
    if (
        _cache["data"] is not None
        and (now - _cache["ts"]) < settings.events_cache_ttl  # type: ignore[operator]
        and _cache["key"] == cache_key
    ):
        return _cache["data"]  # type: ignore[return-value]

    connector = build_connector(settings)
    if connector is None:
        raise HTTPException(status_code=503, detail="Vault path not configured or missing")

    query = EventQuery(event_type=event_type, content_regex=content, folder_paths=folder or [])
    events = get_events_in_range(
        connector,
        start_date,
        end_date,
        query,
        event_type=settings.default_event_type,
        parse_below_token=settings.process_entries_below,
    )
    result = [EventResponse.from_event(e) for e in events]

    _cache["data"] = result
    _cache["ts"] = now
    _cache["key"] = cache_key
    return result
