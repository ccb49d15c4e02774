"""Scratch buffer for the one line currently checked out of the document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .validation import ensure_offset


@dataclass(slots=True)
class ActiveLineEditor:
    """Characters of the focused line plus a cursor offset.

    ``offset`` always satisfies ``0 <= offset <= len(buffer)``; the value
    ``len(buffer)`` means the cursor sits after the last character. None of
    the editing methods raise.
    """

    buffer: List[str] = field(default_factory=list)
    offset: int = 0

    @property
    def text(self) -> str:
        return "".join(self.buffer)

    @property
    def at_line_start(self) -> bool:
        return self.offset == 0

    def insert(self, char: str) -> None:
        if self.offset <= len(self.buffer):
            self.buffer.insert(self.offset, char)
            self.offset += 1

    def insert_text(self, text: str) -> None:
        for char in text:
            self.insert(char)

    def remove_before_cursor(self) -> bool:
        """Delete the character left of the cursor.

        Returns ``False`` without touching anything at the start of the
        line; joining with the previous line is the session's job.
        """

        if 0 < self.offset <= len(self.buffer):
            del self.buffer[self.offset - 1]
            self.offset -= 1
            return True
        return False

    def move_left(self) -> None:
        if self.offset > 0:
            self.offset -= 1

    def move_right(self) -> None:
        if self.offset < len(self.buffer):
            self.offset += 1

    def move_to_start(self) -> None:
        self.offset = 0

    def move_to_end(self) -> None:
        self.offset = len(self.buffer)

    def checkout(self, line: Sequence[str], offset: Optional[int] = None) -> None:
        """Replace the buffer with a copy of ``line``, clamping ``offset``."""

        self.buffer = list(line)
        target = 0 if offset is None else min(max(offset, 0), len(self.buffer))
        self.offset = ensure_offset(target, len(self.buffer))

    def reset(self) -> None:
        self.buffer = []
        self.offset = 0

    def split(self) -> tuple[List[str], List[str]]:
        return self.buffer[: self.offset], self.buffer[self.offset :]


__all__ = ["ActiveLineEditor"]
