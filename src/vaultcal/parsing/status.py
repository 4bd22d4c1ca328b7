"""Mapping between checkbox characters, task statuses and event categories."""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Status of a checklist item, keyed off the character inside its brackets."""

    TODO = "Todo"
    DONE = "Done"
    CANCELLED = "Cancelled"
    FORWARDED = "Forwarded"
    DEFERRED = "Deferred"
    IN_PROGRESS = "InProgress"
    QUESTION = "Question"
    IMPORTANT = "Important"
    INFO = "Info"
    BOOKMARK = "Bookmark"
    PRO = "Pro"
    CON = "Con"
    BRAINSTORMING = "Brainstorming"
    EXAMPLE = "Example"
    QUOTE = "Quote"
    NOTE = "Note"
    WIN = "Win"
    LOSE = "Lose"
    ADD = "Add"
    REVIEWED = "Reviewed"
    UNKNOWN = "Unknown"
    NOT_A_TASK = "NotATask"


STATUS_MAPPING: dict[str, TaskStatus] = {
    " ": TaskStatus.TODO,
    "x": TaskStatus.DONE,
    "X": TaskStatus.DONE,
    "-": TaskStatus.CANCELLED,
    ">": TaskStatus.FORWARDED,
    "D": TaskStatus.DEFERRED,
    "/": TaskStatus.IN_PROGRESS,
    "?": TaskStatus.QUESTION,
    "!": TaskStatus.IMPORTANT,
    "i": TaskStatus.INFO,
    "B": TaskStatus.BOOKMARK,
    "P": TaskStatus.PRO,
    "C": TaskStatus.CON,
    "b": TaskStatus.BRAINSTORMING,
    "E": TaskStatus.EXAMPLE,
    "Q": TaskStatus.QUOTE,
    "N": TaskStatus.NOTE,
    "W": TaskStatus.WIN,
    "L": TaskStatus.LOSE,
    "+": TaskStatus.ADD,
    "R": TaskStatus.REVIEWED,
}


def status_from_character(char: str) -> TaskStatus:
    """Return the status for a checkbox character; anything unmapped is UNKNOWN."""
    return STATUS_MAPPING.get(char, TaskStatus.UNKNOWN)


class EventCategory(StrEnum):
    """Category tag carried by an event.

    DEFAULT is the unspecified category. The TASK_* members keep the
    ``TASK-<KIND>`` labels used in stored event types.
    """

    DEFAULT = "default"
    TASK_TODO = "TASK-TODO"
    TASK_DONE = "TASK-DONE"
    TASK_CANCELLED = "TASK-CANCELLED"
    TASK_IN_PROGRESS = "TASK-IN_PROGRESS"
    TASK_IMPORTANT = "TASK-IMPORTANT"
    TASK_QUESTION = "TASK-QUESTION"
    TASK_REVIEW = "TASK-REVIEW"
    TASK_IDEA = "TASK-IDEA"
    TASK_PRO = "TASK-PRO"
    TASK_CON = "TASK-CON"
    TASK_BRAINSTORMING = "TASK-BRAINSTORMING"
    TASK_EXAMPLE = "TASK-EXAMPLE"
    TASK_QUOTE = "TASK-QUOTE"
    TASK_NOTE = "TASK-NOTE"
    TASK_WIN = "TASK-WIN"
    TASK_LOSE = "TASK-LOSE"


# Not the inverse of STATUS_MAPPING: CON maps to "-" here but "C" -> Con above,
# and the lowercase marks for EXAMPLE/QUOTE/NOTE/WIN/LOSE are not forward keys.
CATEGORY_MARKS: dict[EventCategory, str | None] = {
    EventCategory.DEFAULT: None,
    EventCategory.TASK_TODO: " ",
    EventCategory.TASK_DONE: "x",
    EventCategory.TASK_CANCELLED: "-",
    EventCategory.TASK_IN_PROGRESS: "/",
    EventCategory.TASK_IMPORTANT: "!",
    EventCategory.TASK_QUESTION: "?",
    EventCategory.TASK_REVIEW: ">",
    EventCategory.TASK_IDEA: "i",
    EventCategory.TASK_PRO: "+",
    EventCategory.TASK_CON: "-",
    EventCategory.TASK_BRAINSTORMING: "b",
    EventCategory.TASK_EXAMPLE: "e",
    EventCategory.TASK_QUOTE: "q",
    EventCategory.TASK_NOTE: "n",
    EventCategory.TASK_WIN: "w",
    EventCategory.TASK_LOSE: "l",
}


def parse_event_category(label: str | None) -> EventCategory:
    """Parse a stored event-type label into a category.

    Only the segment after ``TASK-`` up to the next dash is considered, so
    ``TASK-DONE-old`` still reads as TASK_DONE. Labels without the prefix or
    with an unknown kind are DEFAULT.
    """
    if not label or not label.startswith("TASK-"):
        return EventCategory.DEFAULT
    kind = label.split("-")[1]
    try:
        return EventCategory(f"TASK-{kind}")
    except ValueError:
        return EventCategory.DEFAULT


def mark_for_event_type(event_type: EventCategory | str | None) -> str | None:
    """Return the checkbox character for an event category.

    Returns None when the category has no checkbox form (DEFAULT, unknown
    labels, labels without the ``TASK-`` prefix).
    """
    category = (
        event_type if isinstance(event_type, EventCategory) else parse_event_category(event_type)
    )
    return CATEGORY_MARKS[category]
