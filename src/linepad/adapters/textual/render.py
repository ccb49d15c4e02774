"""Turn an ``EditorMirror`` into styled rich text for the editor view."""

from __future__ import annotations

from rich.text import Text

from linepad.buffer import EditorMirror

GUTTER_STYLE = "dim"
CURSOR_STYLE = "reverse"
SAVE_HINT = "Save&Quit: <ESC> | Quit: <C-q>"


def gutter(number: int, width: int) -> str:
    """Right-aligned line number, cut to ``width`` digits, then ``| ``."""

    label = str(number)[:width]
    return f"{label:>{width}}| "


def scroll_top(top: int, selected: int | None, height: int, line_count: int) -> int:
    """Smallest scroll change that keeps ``selected`` inside the viewport."""

    height = max(height, 1)
    if selected is None or line_count == 0:
        return 0
    if selected < top:
        top = selected
    elif selected >= top + height:
        top = selected - height + 1
    return max(0, min(top, max(line_count - height, 0)))


def render_lines(
    mirror: EditorMirror,
    *,
    gutter_width: int = 8,
    top: int = 0,
    height: int | None = None,
) -> Text:
    stop = len(mirror.lines) if height is None else min(len(mirror.lines), top + height)
    output = Text(no_wrap=True, overflow="crop")
    for index in range(top, stop):
        if index > top:
            output.append("\n")
        output.append(gutter(index + 1, gutter_width), style=GUTTER_STYLE)
        if index == mirror.selected:
            before, at_cursor, after = mirror.cursor_spans()
            output.append(before)
            output.append(at_cursor, style=CURSOR_STYLE)
            output.append(after)
        else:
            output.append(mirror.lines[index])
    return output


__all__ = ["SAVE_HINT", "gutter", "render_lines", "scroll_top"]
