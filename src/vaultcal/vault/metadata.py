"""Front matter exposed as an opaque key-value mapping."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class NoteMetadata:
    """Read-only view over a note's front matter.

    No key is assumed to exist; callers go through ``get`` and ``has``.
    """

    def __init__(self, data: Mapping[str, object]) -> None:
        self._data = dict(data)

    def get(self, key: str, default: object = None) -> object:
        return self._data.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._data

    def keys(self) -> Iterator[str]:
        return iter(self._data)

    def to_dict(self) -> dict[str, object]:
        return dict(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoteMetadata):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"NoteMetadata({self._data!r})"


def has_matching_metadata(
    metadata: NoteMetadata | None,
    keys: list[str],
    values: Mapping[str, object],
) -> bool:
    """Check if a note's front matter has all ``keys`` and every ``values`` pair.

    A note without front matter never matches.
    """
    if metadata is None:
        return False
    if any(not metadata.has(key) for key in keys):
        return False
    return all(metadata.get(key) == value for key, value in values.items())
