"""Exceptions raised when buffer invariants are violated."""

from __future__ import annotations


class LineIndexError(IndexError):
    """A line index fell outside ``[0, line_count)``."""

    def __init__(self, message: str, *, index: int, line_count: int) -> None:
        super().__init__(f"{message} (index={index}, line_count={line_count})")
        self.index = index
        self.line_count = line_count


class InvalidOffsetError(ValueError):
    """A cursor offset fell outside ``[0, len(buffer)]``."""

    def __init__(self, message: str, *, offset: int, length: int) -> None:
        super().__init__(f"{message} (offset={offset}, length={length})")
        self.offset = offset
        self.length = length


__all__ = ["LineIndexError", "InvalidOffsetError"]
