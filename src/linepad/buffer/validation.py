"""Bounds checks shared by the document store and the line editor."""

from __future__ import annotations

from .errors import InvalidOffsetError, LineIndexError


def ensure_line_index(index: int, line_count: int, *, insert: bool = False) -> int:
    upper = line_count + 1 if insert else line_count
    if index < 0 or index >= upper:
        raise LineIndexError("Line index out of range", index=index, line_count=line_count)
    return index


def ensure_offset(offset: int, length: int) -> int:
    if offset < 0 or offset > length:
        raise InvalidOffsetError("Offset out of range", offset=offset, length=length)
    return offset
