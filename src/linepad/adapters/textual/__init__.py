"""Textual front end; the app module is imported lazily because it needs textual."""

from .controller import TextualEditorAdapter, TextualUIHooks, create_default_resolver
from .render import gutter, render_lines, scroll_top

__all__ = [
    "TextualEditorAdapter",
    "TextualUIHooks",
    "create_default_resolver",
    "gutter",
    "render_lines",
    "scroll_top",
]
