"""Built-in key bindings matching the editor's on-screen hints."""

from __future__ import annotations

from linepad.commands import CommandKind

from .models import Binding, WhenClause
from .registry import KeymapRegistry

AT_LINE_START = "at_line_start"

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding("edit.split", "enter", CommandKind.SPLIT, "Break the line at the cursor"),
    Binding("edit.tab", "tab", CommandKind.INSERT_TAB, "Insert spaces"),
    Binding(
        "edit.delete_backward",
        "backspace",
        CommandKind.DELETE_BACKWARD,
        "Delete the character before the cursor",
        when=(WhenClause(AT_LINE_START, False),),
    ),
    Binding(
        "edit.join",
        "backspace",
        CommandKind.JOIN_OR_DELETE_BACKWARD,
        "Join with the previous line",
        when=(WhenClause(AT_LINE_START, True),),
    ),
    Binding("move.left", "left", CommandKind.MOVE_LEFT, "Cursor left"),
    Binding("move.right", "right", CommandKind.MOVE_RIGHT, "Cursor right"),
    Binding("move.up", "up", CommandKind.MOVE_UP, "Previous line"),
    Binding("move.down", "down", CommandKind.MOVE_DOWN, "Next line"),
    Binding("move.home", "home", CommandKind.MOVE_HOME, "Start of line"),
    Binding("move.end", "end", CommandKind.MOVE_END, "End of line"),
    Binding("file.save_quit", "escape", CommandKind.SAVE, "Save&Quit"),
    Binding("file.quit", "ctrl+q", CommandKind.QUIT, "Quit"),
)


def load_default_keymaps(registry: KeymapRegistry) -> KeymapRegistry:
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding)
    return registry


__all__ = ["AT_LINE_START", "DEFAULT_BINDINGS", "load_default_keymaps"]
