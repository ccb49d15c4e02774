"""Key bindings that turn key strokes into edit commands."""

from .models import Binding, KeyStroke, WhenClause
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionResult
from .defaults import AT_LINE_START, DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "AT_LINE_START",
    "Binding",
    "DEFAULT_BINDINGS",
    "KeyStroke",
    "WhenClause",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "load_default_keymaps",
]
