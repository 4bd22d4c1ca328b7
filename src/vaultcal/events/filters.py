"""Filter predicate applied to extracted events."""

import logging
import re
from dataclasses import dataclass, field

from vaultcal.events.synthesizer import Event

logger = logging.getLogger(__name__)


@dataclass
class EventQuery:
    """Constraints an event must satisfy. Unset fields don't constrain.

    ``metadata_keys``/``metadata_values`` select notes by front matter and are
    applied per file by the vault scanner, not by ``matches_filter``.
    """

    event_type: str | None = None
    content_regex: str | None = None
    folder_paths: list[str] = field(default_factory=list)
    metadata_keys: list[str] = field(default_factory=list)
    metadata_values: dict[str, str] = field(default_factory=dict)


def matches_filter(event: Event, query: EventQuery) -> bool:
    """Check if an event matches every constraint set on the query.

    An invalid ``content_regex`` is logged and ignored. Events without a path
    are not subject to the folder constraint.
    """
    if query.event_type and event.event_type != query.event_type:
        return False

    if query.content_regex:
        try:
            pattern = re.compile(query.content_regex)
        except re.error:
            logger.error("Invalid regex pattern: %s", query.content_regex)
        else:
            if not pattern.search(event.title):
                return False

    if query.folder_paths and event.path:
        if not any(event.path.startswith(folder) for folder in query.folder_paths):
            return False

    return True
