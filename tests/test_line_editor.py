from __future__ import annotations

import pytest

from linepad.buffer import ActiveLineEditor


def make_editor(text: str, offset: int = 0) -> ActiveLineEditor:
    editor = ActiveLineEditor()
    editor.checkout(list(text), offset)
    return editor


def test_insert_at_cursor_advances_offset() -> None:
    editor = make_editor("ab", 1)

    editor.insert("X")

    assert editor.text == "aXb"
    assert editor.offset == 2


def test_insert_at_end() -> None:
    editor = make_editor("ab", 2)

    editor.insert("c")

    assert editor.text == "abc"
    assert editor.offset == 3


def test_insert_text_inserts_in_order() -> None:
    editor = make_editor("ab", 1)

    editor.insert_text("    ")

    assert editor.text == "a    b"
    assert editor.offset == 5


def test_remove_before_cursor() -> None:
    editor = make_editor("abc", 2)

    assert editor.remove_before_cursor() is True
    assert editor.text == "ac"
    assert editor.offset == 1


def test_remove_at_start_is_noop() -> None:
    editor = make_editor("abc", 0)

    assert editor.remove_before_cursor() is False
    assert editor.text == "abc"
    assert editor.offset == 0


def test_horizontal_moves_saturate() -> None:
    editor = make_editor("ab")

    editor.move_left()
    assert editor.offset == 0

    for _ in range(5):
        editor.move_right()
    assert editor.offset == 2

    editor.move_to_start()
    assert editor.at_line_start

    editor.move_to_end()
    assert editor.offset == 2


@pytest.mark.parametrize(("offset", "expected"), [(None, 0), (1, 1), (9, 3), (-4, 0)])
def test_checkout_clamps_offset(offset: int | None, expected: int) -> None:
    editor = ActiveLineEditor()

    editor.checkout(list("abc"), offset)

    assert editor.offset == expected


def test_checkout_copies_line() -> None:
    source = list("abc")
    editor = ActiveLineEditor()

    editor.checkout(source)
    editor.insert("z")

    assert source == list("abc")


def test_split_does_not_mutate() -> None:
    editor = make_editor("abcd", 1)

    head, tail = editor.split()

    assert head == ["a"]
    assert tail == list("bcd")
    assert editor.text == "abcd"


def test_reset_empties_buffer() -> None:
    editor = make_editor("abc", 3)

    editor.reset()

    assert editor.buffer == []
    assert editor.offset == 0


def test_multi_codepoint_text_is_indexed_per_character() -> None:
    editor = make_editor("héllo", 2)

    editor.remove_before_cursor()

    assert editor.text == "hllo"
