"""Cursor over the tab-separated fields of a single export line."""

from typing import List, Sequence


class FieldCursor:
    """Forward-only cursor over an indexed field list.

    Reads past the end return an empty string so block checks can probe
    trailing offsets without bounds arithmetic.
    """

    def __init__(self, fields: Sequence[str], start: int = 0) -> None:
        self._fields: List[str] = list(fields)
        self._index = start

    @property
    def index(self) -> int:
        return self._index

    @property
    def exhausted(self) -> bool:
        """True once the cursor has moved past the last field."""
        return self._index >= len(self._fields)

    def peek(self, offset: int = 0) -> str:
        """Return the field at ``index + offset`` or ``""`` when out of range."""
        position = self._index + offset
        if 0 <= position < len(self._fields):
            return self._fields[position]
        return ""

    def advance(self, count: int = 1) -> None:
        """Move forward by ``count`` fields.

        Raises:
            ValueError: if count is not positive.
        """
        if count < 1:
            raise ValueError(f"Cursor must advance by at least 1, got {count}")
        self._index += count
