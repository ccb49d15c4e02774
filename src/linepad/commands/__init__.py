"""Edit command stream and its dispatch table."""

from .models import CommandKind, CommandResult, EditCommand
from .dispatch import dispatch_command

__all__ = [
    "CommandKind",
    "CommandResult",
    "EditCommand",
    "dispatch_command",
]
