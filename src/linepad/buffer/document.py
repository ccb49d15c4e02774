"""Line store holding the persisted content of a document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .validation import ensure_line_index

Line = List[str]


def _split_lines(text: str) -> list[str]:
    # Newline-terminated text gets no phantom empty last line; "" has no lines.
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass(slots=True)
class LineDocument:
    """Ordered lines, each a list of single-character strings.

    Indices are validated on every access; an out-of-range index is a
    caller bug and raises ``LineIndexError`` instead of being ignored.
    ``version`` increases on every mutation and ``dirty`` stays set until
    ``mark_clean`` is called after a successful save.
    """

    _lines: List[Line] = field(default_factory=list)
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "LineDocument":
        return cls(_lines=[list(line) for line in _split_lines(text)])

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineDocument":
        return cls(_lines=[list(line) for line in lines])

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get(self, index: int) -> Line:
        ensure_line_index(index, self.line_count)
        return list(self._lines[index])

    def get_text(self, index: int) -> str:
        ensure_line_index(index, self.line_count)
        return "".join(self._lines[index])

    def set(self, index: int, line: Sequence[str]) -> None:
        ensure_line_index(index, self.line_count)
        self._lines[index] = list(line)
        self._touch()

    def insert_line(self, index: int, line: Sequence[str]) -> None:
        ensure_line_index(index, self.line_count, insert=True)
        self._lines.insert(index, list(line))
        self._touch()

    def remove_line(self, index: int) -> Line:
        ensure_line_index(index, self.line_count)
        removed = self._lines.pop(index)
        self._touch()
        return removed

    def snapshot(self) -> tuple[str, ...]:
        return tuple("".join(line) for line in self._lines)

    def serialize(self) -> str:
        """Join lines, terminating each one (the last included) with ``\\n``."""

        return "".join("".join(line) + "\n" for line in self._lines)

    def mark_clean(self) -> None:
        self.dirty = False

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True


__all__ = ["Line", "LineDocument"]
