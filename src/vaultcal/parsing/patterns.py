"""Regex patterns recognized in note text.

Only DUE_DATE_RE feeds event extraction today. The remaining date, time and
marker patterns are used by the helper extractors in ``vaultcal.parsing.parser``
and are kept here so callers can build on them.

All patterns are compiled once and used through ``search``/``finditer``/``match``,
so no scan position is carried between calls.
"""

import re

# Strict YYYY-MM-DD; [0-9] keeps non-ASCII digits out
_DATE = r"([0-9]{4}-[0-9]{2}-[0-9]{2})"
_TIME = r"([0-9]{1,2}):([0-9]{2})(?::([0-9]{2}))?"

# Line structure
LIST_MARKER = r"(-|\*|\+|[0-9]+\.)"
LIST_ITEM_RE = re.compile(rf"^(\s*){LIST_MARKER}\s+(.*)$")
TASK_RE = re.compile(rf"^(\s*){LIST_MARKER}\s+\[(.)\]\s+(.*)$")
# Looser than TASK_RE: the text after the checkbox may be empty ("- [x]")
CHECKLIST_RE = re.compile(rf"^(\s*){LIST_MARKER}\s+\[(.)\]\s*(.*)$")
INDENTED_RE = re.compile(r"^\s+")

# Times
TIME_STANDARD_RE = re.compile(_TIME)
TIME_WITH_TAG_RE = re.compile(rf"<time>{_TIME}</time>")
END_TIME_RE = re.compile(rf"⏲\s?{_TIME}")
TIME_RANGE_RE = re.compile(rf"{_TIME}-{_TIME}")

# Dates
DUE_DATE_RE = re.compile(rf"\s?@\{{{_DATE}\}}")
ALT_DUE_DATE_RE = re.compile(rf"\s(\U0001f4c5|\U0001f4c6|@\{{|\[due::)\s?{_DATE}(\]|\}})?")
START_DATE_RE = re.compile(rf"\U0001f6eb\s?{_DATE}")
SCHEDULED_DATE_RE = re.compile(rf"[⏳⌛]\s?{_DATE}")
DONE_DATE_RE = re.compile(rf"✅\s?{_DATE}")

# Trailing markers
RECURRENCE_RE = re.compile(r"\U0001f501([a-zA-Z0-9, !]+)$")
BLOCK_LINK_RE = re.compile(r"\s\^([a-zA-Z0-9-]+)$")
