from __future__ import annotations

import pytest

from linepad.buffer import LineDocument, LineIndexError


def test_load_splits_on_newlines_without_trailing_empty_line() -> None:
    document = LineDocument.from_text("ab\ncd\n")

    assert document.snapshot() == ("ab", "cd")
    assert document.line_count == 2
    assert document.dirty is False


def test_load_empty_text_has_no_lines() -> None:
    document = LineDocument.from_text("")

    assert document.is_empty
    assert document.snapshot() == ()
    assert document.serialize() == ""


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("abc", ("abc",)),
        ("\n", ("",)),
        ("a\n\n", ("a", "")),
        ("a\r\nb\r\n", ("a", "b")),
        ("tab\there\x0cfeed\n", ("tab\there\x0cfeed",)),
    ],
)
def test_load_edge_cases(text: str, expected: tuple[str, ...]) -> None:
    assert LineDocument.from_text(text).snapshot() == expected


def test_serialize_terminates_every_line() -> None:
    document = LineDocument.from_text("abc")

    assert document.serialize() == "abc\n"


@pytest.mark.parametrize("text", ["ab\ncd\n", "\n", "one\n\nthree\n", "ünï\ncödé\n"])
def test_serialize_is_inverse_of_load_for_terminated_text(text: str) -> None:
    assert LineDocument.from_text(text).serialize() == text


def test_get_returns_a_copy() -> None:
    document = LineDocument.from_text("ab\n")

    line = document.get(0)
    line.append("z")

    assert document.get_text(0) == "ab"


def test_set_insert_remove_shift_indices() -> None:
    document = LineDocument.from_lines(["a", "b", "c"])

    document.set(1, list("B"))
    document.insert_line(1, list("x"))
    removed = document.remove_line(0)

    assert removed == ["a"]
    assert document.snapshot() == ("x", "B", "c")
    assert document.dirty is True
    assert document.version == 3


def test_insert_line_accepts_append_position() -> None:
    document = LineDocument.from_lines(["a"])

    document.insert_line(1, [])

    assert document.snapshot() == ("a", "")


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_out_of_range_access_fails_fast(index: int) -> None:
    document = LineDocument.from_lines(["a", "b"])

    with pytest.raises(LineIndexError) as info:
        document.get(index)

    assert info.value.index == index
    assert info.value.line_count == 2


def test_bounds_checks_on_mutation() -> None:
    document = LineDocument.from_lines(["a"])

    with pytest.raises(LineIndexError):
        document.set(1, [])
    with pytest.raises(LineIndexError):
        document.insert_line(2, [])
    with pytest.raises(LineIndexError):
        document.remove_line(1)
    with pytest.raises(IndexError):
        LineDocument().get(0)

    assert document.snapshot() == ("a",)
    assert document.version == 0


def test_mark_clean_resets_dirty_flag() -> None:
    document = LineDocument.from_lines(["a"])
    document.set(0, list("b"))

    document.mark_clean()

    assert document.dirty is False
