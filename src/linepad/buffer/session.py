"""Editing session: owns the document and the checked-out scratch line.

The selected document line is never authoritative while it is checked
out. Every method that changes the selection commits the scratch buffer
first and checks out the new line before returning, so callers never
observe a half-finished transfer.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Optional, Union

from linepad.commands import CommandResult, EditCommand, dispatch_command
from linepad.runtime import telemetry
from linepad.runtime.config import EditorConfig

from .document import LineDocument
from .line_editor import ActiveLineEditor
from .sync import EditorMirror

PathLike = Union[str, os.PathLike]


def _read_text(path: Path) -> str:
    if not path.exists():
        return ""
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _write_atomic(path: Path, content: str) -> None:
    # Write through symlinks: the link stays, its target gets the content.
    path = path.resolve()
    temp_name: Optional[str] = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if path.exists():
            os.chmod(temp_name, stat.S_IMODE(os.stat(path).st_mode))
        os.replace(temp_name, path)
        temp_name = None
    finally:
        if temp_name is not None and os.path.exists(temp_name):
            os.remove(temp_name)


class EditorSession:
    """Command surface over a ``LineDocument`` and an ``ActiveLineEditor``."""

    def __init__(
        self,
        document: Optional[LineDocument] = None,
        *,
        path: Optional[PathLike] = None,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self._document = document if document is not None else LineDocument()
        self._editor = ActiveLineEditor()
        self._selected: Optional[int] = None
        self.path = Path(path) if path is not None else None
        self.config = config or EditorConfig()
        self.logger = telemetry.get_logger("linepad.session")
        if not self._document.is_empty:
            self._checkout(0, 0)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        path: Optional[PathLike] = None,
        config: Optional[EditorConfig] = None,
    ) -> "EditorSession":
        return cls(LineDocument.from_text(text), path=path, config=config)

    @classmethod
    def open(
        cls, path: PathLike, *, config: Optional[EditorConfig] = None
    ) -> "EditorSession":
        """Load ``path``; a file that does not exist yet gives an empty document."""

        target = Path(path)
        with telemetry.span(
            "session::load",
            component="session",
            metadata={"path": str(target)},
        ) as handle:
            text = _read_text(target)
            session = cls.from_text(text, path=target, config=config)
            handle.add_metadata("lines", session.line_count)
        return session

    # -- read-only state -------------------------------------------------

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    @property
    def offset(self) -> int:
        return self._editor.offset

    @property
    def active_text(self) -> str:
        return self._editor.text

    @property
    def line_count(self) -> int:
        return self._document.line_count

    @property
    def lines(self) -> tuple[str, ...]:
        """Committed document lines; the selected one may be stale."""

        return self._document.snapshot()

    @property
    def at_line_start(self) -> bool:
        return self._editor.at_line_start

    @property
    def dirty(self) -> bool:
        if self._document.dirty:
            return True
        if self._selected is None:
            return False
        return self._editor.buffer != self._document.get(self._selected)

    def mirror(self) -> EditorMirror:
        lines = list(self._document.snapshot())
        if self._selected is not None:
            lines[self._selected] = self._editor.text
        return EditorMirror(
            lines=tuple(lines),
            selected=self._selected,
            active=tuple(self._editor.buffer),
            offset=self._editor.offset,
            path=str(self.path) if self.path is not None else None,
            dirty=self.dirty,
        )

    # -- checkout / commit -----------------------------------------------

    def _commit(self) -> None:
        if self._selected is None:
            return
        # Unchanged lines are left alone so navigation alone never dirties.
        if self._editor.buffer != self._document.get(self._selected):
            self._document.set(self._selected, self._editor.buffer)

    def _checkout(self, index: int, offset: Optional[int]) -> None:
        self._editor.checkout(self._document.get(index), offset)
        self._selected = index

    def _move_vertical(self, step: int) -> bool:
        current = self._selected
        if current is None:
            return False
        candidate = min(max(current + step, 0), self._document.line_count - 1)
        if candidate == current:
            return False
        with telemetry.span(
            "session::move_vertical",
            component="session",
            metadata={"from": current, "to": candidate},
        ):
            self._commit()
            self._checkout(candidate, self._editor.offset)
        return True

    # -- navigation --------------------------------------------------------

    def move_up(self) -> bool:
        return self._move_vertical(-1)

    def move_down(self) -> bool:
        return self._move_vertical(1)

    def move_left(self) -> bool:
        before = self._editor.offset
        self._editor.move_left()
        return self._editor.offset != before

    def move_right(self) -> bool:
        before = self._editor.offset
        self._editor.move_right()
        return self._editor.offset != before

    def move_home(self) -> bool:
        before = self._editor.offset
        self._editor.move_to_start()
        return self._editor.offset != before

    def move_end(self) -> bool:
        before = self._editor.offset
        self._editor.move_to_end()
        return self._editor.offset != before

    # -- character edits ---------------------------------------------------

    def insert_char(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError("insert_char expects a single character")
        if char in "\r\n":
            raise ValueError("line breaks must go through split_line()")
        self._editor.insert(char)

    def insert_tab(self) -> None:
        self._editor.insert_text(self.config.tab_text)

    def delete_backward(self) -> bool:
        """Delete left of the cursor; at offset 0 this does nothing."""

        return self._editor.remove_before_cursor()

    # -- line boundary edits -----------------------------------------------

    def split_line(self) -> None:
        if self._selected is None:
            with telemetry.span("session::seed", component="session"):
                self._document.insert_line(0, [])
                self._editor.reset()
                self._selected = 0
            return

        index = self._selected
        with telemetry.span(
            "session::split",
            component="session",
            metadata={"line": index, "offset": self._editor.offset},
        ):
            head, tail = self._editor.split()
            self._document.set(index, head)
            self._document.insert_line(index + 1, tail)
            self._checkout(index + 1, 0)

    def join_or_delete_backward(self) -> bool:
        """Backspace: delete a character, or merge into the previous line."""

        if self._editor.offset > 0:
            return self._editor.remove_before_cursor()

        index = self._selected
        if index is None or index == 0:
            return False

        with telemetry.span(
            "session::join",
            component="session",
            metadata={"line": index},
        ):
            previous = self._document.get(index - 1)
            seam = len(previous)
            self._document.set(index - 1, previous + self._editor.buffer)
            self._document.remove_line(index)
            self._checkout(index - 1, seam)
        return True

    # -- persistence -------------------------------------------------------

    def save(self, path: Optional[PathLike] = None) -> Path:
        """Commit the scratch line and write the document to disk.

        The write goes through a temporary file that replaces the target,
        so a failure leaves any existing file untouched. ``OSError`` is
        propagated to the caller.
        """

        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("No path to save to")

        with telemetry.span(
            "session::save",
            component="session",
            metadata={"path": str(target)},
        ) as handle:
            self._commit()
            content = self._document.serialize()
            _write_atomic(target, content)
            handle.add_metadata("lines", self._document.line_count)

        self._document.mark_clean()
        self.path = target
        return target

    def dispatch(self, command: EditCommand) -> CommandResult:
        self.logger.debug(f"command::{command.kind.value}")
        return dispatch_command(self, command)


__all__ = ["EditorSession"]
