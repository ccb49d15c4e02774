from __future__ import annotations

import pytest

from linepad.commands import CommandKind, EditCommand
from linepad.keymaps import (
    AT_LINE_START,
    Binding,
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    load_default_keymaps,
)


def make_resolver() -> KeymapResolver:
    return KeymapResolver(load_default_keymaps(KeymapRegistry()))


@pytest.mark.parametrize(
    ("key", "kind"),
    [
        ("enter", CommandKind.SPLIT),
        ("tab", CommandKind.INSERT_TAB),
        ("left", CommandKind.MOVE_LEFT),
        ("right", CommandKind.MOVE_RIGHT),
        ("up", CommandKind.MOVE_UP),
        ("down", CommandKind.MOVE_DOWN),
        ("home", CommandKind.MOVE_HOME),
        ("end", CommandKind.MOVE_END),
        ("escape", CommandKind.SAVE),
        ("ctrl+q", CommandKind.QUIT),
    ],
)
def test_default_bindings(key: str, kind: CommandKind) -> None:
    result = make_resolver().resolve(KeyStroke.parse(key))

    assert result.status == "match"
    assert result.command == EditCommand.of(kind)


def test_backspace_depends_on_cursor_position() -> None:
    resolver = make_resolver()
    stroke = KeyStroke.parse("backspace")

    inside = resolver.resolve(stroke, context={AT_LINE_START: False})
    at_start = resolver.resolve(stroke, context={AT_LINE_START: True})

    assert inside.command == EditCommand.of(CommandKind.DELETE_BACKWARD)
    assert at_start.command == EditCommand.of(CommandKind.JOIN_OR_DELETE_BACKWARD)


def test_printable_text_falls_through_to_insert() -> None:
    result = make_resolver().resolve(KeyStroke.parse("A", text="A"))

    assert result.status == "text"
    assert result.command == EditCommand.insert_char("A")


def test_shifted_text_is_inserted() -> None:
    stroke = KeyStroke("exclamation_mark", modifiers=("shift",), text="!")

    result = make_resolver().resolve(stroke)

    assert result.command == EditCommand.insert_char("!")


@pytest.mark.parametrize(
    "stroke",
    [
        KeyStroke.parse("ctrl+x", text="\x18"),
        KeyStroke.parse("alt+a", text="a"),
        KeyStroke.parse("f5"),
    ],
)
def test_unbound_non_text_keys_miss(stroke: KeyStroke) -> None:
    result = make_resolver().resolve(stroke)

    assert result.status == "miss"
    assert result.command is None


def test_when_context_selects_binding() -> None:
    registry = KeymapRegistry()
    registry.register_binding(
        Binding("low", "f2", CommandKind.MOVE_HOME, when=("editing",))
    )
    registry.register_binding(
        Binding("high", "f2", CommandKind.MOVE_END, when=("!editing",), priority=5)
    )
    resolver = KeymapResolver(registry)

    assert resolver.resolve(KeyStroke("f2"), context={"editing": True}).binding.id == "low"
    assert resolver.resolve(KeyStroke("f2")).binding.id == "high"
