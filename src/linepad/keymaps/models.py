"""Dataclasses describing key strokes and their command bindings."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from linepad.commands import CommandKind

KNOWN_MODIFIERS = ("alt", "ctrl", "meta", "shift")


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press."""

    key: str
    modifiers: tuple[str, ...] = ()
    text: str | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def parse(cls, name: str, *, text: str | None = None) -> "KeyStroke":
        """Build a stroke from a Textual-style name such as ``ctrl+q``."""

        *prefix, key = name.split("+")
        modifiers = [part for part in prefix if part.lower() in KNOWN_MODIFIERS]
        if len(key) > 1:
            key = key.lower()
        return cls(key=key, modifiers=tuple(modifiers), text=text)

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers + (self.key,))
        return self.key

    @property
    def is_plain(self) -> bool:
        return not (set(self.modifiers) - {"shift"})


@dataclass(frozen=True, slots=True)
class WhenClause:
    """Boolean flag gating a binding, e.g. ``at_line_start`` or ``!at_line_start``."""

    flag: str
    expected: bool = True

    def __post_init__(self) -> None:
        if not self.flag:
            raise ValueError("flag cannot be empty")

    @classmethod
    def parse(cls, expression: str) -> "WhenClause":
        expr = expression.strip()
        if not expr:
            raise ValueError("expression cannot be empty")
        if expr.startswith("!"):
            return cls(expr[1:], False)
        return cls(expr, True)

    def evaluate(self, context: Mapping[str, bool]) -> bool:
        return bool(context.get(self.flag, False)) is self.expected


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates one key token with a command kind."""

    id: str
    key: str
    command: CommandKind
    description: str = ""
    when: tuple[WhenClause, ...] = ()
    priority: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.key:
            raise ValueError("binding key cannot be empty")
        object.__setattr__(self, "command", CommandKind(self.command))
        if self.command is CommandKind.INSERT_CHAR:
            raise ValueError("character insertion is resolved from key text")
        object.__setattr__(self, "key", KeyStroke.parse(self.key).token)
        normalized_when = tuple(
            clause if isinstance(clause, WhenClause) else WhenClause.parse(str(clause))
            for clause in self.when
        )
        object.__setattr__(self, "when", normalized_when)

    @property
    def when_map(self) -> Mapping[str, bool]:
        return MappingProxyType({clause.flag: clause.expected for clause in self.when})

    def allows(self, context: Mapping[str, bool]) -> bool:
        return all(clause.evaluate(context) for clause in self.when)


__all__ = ["KeyStroke", "WhenClause", "Binding", "KNOWN_MODIFIERS"]
