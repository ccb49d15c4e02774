from __future__ import annotations

import pytest

from linepad.adapters.textual import gutter, render_lines, scroll_top
from linepad.buffer import EditorMirror, EditorSession


def make_mirror(text: str, *, down: int = 0, right: int = 0) -> EditorMirror:
    session = EditorSession.from_text(text)
    for _ in range(down):
        session.move_down()
    for _ in range(right):
        session.move_right()
    return session.mirror()


def test_gutter_right_aligns_numbers() -> None:
    assert gutter(7, 8) == "       7| "
    assert gutter(123456789012, 8) == "12345678| "


def test_render_lines_plain_text() -> None:
    rendered = render_lines(make_mirror("ab\ncd\n", down=1, right=1))

    assert rendered.plain == "       1| ab\n       2| cd"


def test_cursor_cell_is_reversed() -> None:
    rendered = render_lines(make_mirror("ab\ncd\n", right=1))

    reversed_spans = [span for span in rendered.spans if span.style == "reverse"]
    assert len(reversed_spans) == 1
    span = reversed_spans[0]
    assert rendered.plain[span.start : span.end] == "b"


def test_cursor_past_end_renders_space() -> None:
    rendered = render_lines(make_mirror("ab\n", right=2), gutter_width=2)

    assert rendered.plain == " 1| ab "


def test_render_window() -> None:
    rendered = render_lines(make_mirror("a\nb\nc\nd\n"), gutter_width=1, top=1, height=2)

    assert rendered.plain == "2| b\n3| c"


def test_render_empty_document() -> None:
    assert render_lines(make_mirror("")).plain == ""


@pytest.mark.parametrize(
    ("top", "selected", "height", "count", "expected"),
    [
        (0, 0, 5, 10, 0),
        (0, 7, 5, 10, 3),
        (4, 2, 5, 10, 2),
        (3, 4, 5, 10, 3),
        (8, 5, 5, 6, 1),
        (2, None, 5, 10, 0),
    ],
)
def test_scroll_top_keeps_selection_visible(
    top: int, selected: int | None, height: int, count: int, expected: int
) -> None:
    assert scroll_top(top, selected, height, count) == expected
