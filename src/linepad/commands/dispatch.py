"""Handler table translating ``EditCommand`` values into session calls."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, cast

from .models import CommandKind, CommandResult, EditCommand

if TYPE_CHECKING:
    from linepad.buffer.session import EditorSession

CommandHandler = Callable[["EditorSession", EditCommand], CommandResult]


def _changed(changed: bool, status: str) -> CommandResult:
    return CommandResult(consumed=True, status=status if changed else "noop")


def _insert_char(session: "EditorSession", command: EditCommand) -> CommandResult:
    # EditCommand rejects INSERT_CHAR without a character.
    session.insert_char(cast(str, command.char))
    return CommandResult(status="insert")


def _insert_tab(session: "EditorSession", command: EditCommand) -> CommandResult:
    del command
    session.insert_tab()
    return CommandResult(status="insert")


def _delete_backward(session: "EditorSession", command: EditCommand) -> CommandResult:
    del command
    return _changed(session.delete_backward(), "delete")


def _join_or_delete(session: "EditorSession", command: EditCommand) -> CommandResult:
    del command
    return _changed(session.join_or_delete_backward(), "join")


def _split(session: "EditorSession", command: EditCommand) -> CommandResult:
    del command
    session.split_line()
    return CommandResult(status="split")


def _move(name: str) -> CommandHandler:
    def handler(session: "EditorSession", command: EditCommand) -> CommandResult:
        del command
        return _changed(getattr(session, name)(), "move")

    handler.__name__ = f"_{name}"
    return handler


def _save(session: "EditorSession", command: EditCommand) -> CommandResult:
    del command
    path = session.save()
    return CommandResult(status="saved", message=str(path), quit=True)


def _quit(session: "EditorSession", command: EditCommand) -> CommandResult:
    del command
    message = "discarded unsaved changes" if session.dirty else None
    return CommandResult(status="quit", message=message, quit=True)


_COMMAND_HANDLERS: Dict[CommandKind, CommandHandler] = {
    CommandKind.INSERT_CHAR: _insert_char,
    CommandKind.INSERT_TAB: _insert_tab,
    CommandKind.DELETE_BACKWARD: _delete_backward,
    CommandKind.JOIN_OR_DELETE_BACKWARD: _join_or_delete,
    CommandKind.SPLIT: _split,
    CommandKind.MOVE_LEFT: _move("move_left"),
    CommandKind.MOVE_RIGHT: _move("move_right"),
    CommandKind.MOVE_UP: _move("move_up"),
    CommandKind.MOVE_DOWN: _move("move_down"),
    CommandKind.MOVE_HOME: _move("move_home"),
    CommandKind.MOVE_END: _move("move_end"),
    CommandKind.SAVE: _save,
    CommandKind.QUIT: _quit,
}


def dispatch_command(session: "EditorSession", command: EditCommand) -> CommandResult:
    return _COMMAND_HANDLERS[command.kind](session, command)


__all__ = ["dispatch_command"]
