"""Full-screen line editor built around a checked-out scratch line."""

__all__ = [
    "adapters",
    "buffer",
    "commands",
    "keymaps",
    "runtime",
]

__version__ = "0.1.0"
