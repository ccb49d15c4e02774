"""Discrete edit commands consumed by ``EditorSession.dispatch``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandKind(str, Enum):
    INSERT_CHAR = "insert_char"
    INSERT_TAB = "insert_tab"
    DELETE_BACKWARD = "delete_backward"
    SPLIT = "split"
    JOIN_OR_DELETE_BACKWARD = "join_or_delete_backward"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_HOME = "move_home"
    MOVE_END = "move_end"
    SAVE = "save"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class EditCommand:
    """One command; only ``INSERT_CHAR`` carries a payload."""

    kind: CommandKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is CommandKind.INSERT_CHAR:
            if self.char is None or len(self.char) != 1:
                raise ValueError("INSERT_CHAR requires exactly one character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} does not take a character")

    @classmethod
    def insert_char(cls, char: str) -> "EditCommand":
        return cls(CommandKind.INSERT_CHAR, char)

    @classmethod
    def of(cls, kind: CommandKind | str) -> "EditCommand":
        return cls(CommandKind(kind))


@dataclass(slots=True)
class CommandResult:
    """Outcome of a dispatched command."""

    consumed: bool = True
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


__all__ = ["CommandKind", "EditCommand", "CommandResult"]
