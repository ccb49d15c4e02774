"""Read-only snapshot handed from the session to renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class EditorMirror:
    """Everything a renderer needs; the selected row shows the live buffer."""

    lines: tuple[str, ...]
    selected: Optional[int]
    active: tuple[str, ...]
    offset: int
    path: Optional[str] = None
    dirty: bool = False

    @property
    def active_text(self) -> str:
        return "".join(self.active)

    def cursor_spans(self) -> tuple[str, str, str]:
        """Split the active line into ``(before, at_cursor, after)``.

        A cursor past the last character highlights a single space.
        """

        before = "".join(self.active[: self.offset])
        if self.offset < len(self.active):
            return (
                before,
                self.active[self.offset],
                "".join(self.active[self.offset + 1 :]),
            )
        return before, " ", ""


__all__ = ["EditorMirror"]
