"""Document store, scratch line editor, and the session tying them together."""

from .document import Line, LineDocument
from .errors import InvalidOffsetError, LineIndexError
from .line_editor import ActiveLineEditor
from .session import EditorSession
from .sync import EditorMirror
from .validation import ensure_line_index, ensure_offset

__all__ = [
    "ActiveLineEditor",
    "EditorMirror",
    "EditorSession",
    "InvalidOffsetError",
    "Line",
    "LineDocument",
    "LineIndexError",
    "ensure_line_index",
    "ensure_offset",
]
