"""Resolve key strokes into edit commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Optional

from linepad.commands import EditCommand
from linepad.runtime.telemetry import span

from .models import Binding, KeyStroke
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver.

    ``status`` is ``"match"`` for a registered binding, ``"text"`` when a
    printable key falls through to character insertion, and ``"miss"``
    otherwise.
    """

    status: Literal["match", "text", "miss"]
    command: Optional[EditCommand] = None
    binding: Optional[Binding] = None


class KeymapResolver:
    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name

    def resolve(
        self,
        stroke: KeyStroke,
        *,
        context: Optional[Mapping[str, bool]] = None,
    ) -> ResolutionResult:
        ctx = context or {}
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"key": stroke.token},
        ) as handle:
            binding = self._select_binding(stroke.token, ctx)
            if binding is not None:
                handle.add_metadata("status", "match")
                handle.add_metadata("binding_id", binding.id)
                return ResolutionResult(
                    status="match",
                    command=EditCommand.of(binding.command),
                    binding=binding,
                )

            text = _insertable_text(stroke)
            if text is not None:
                handle.add_metadata("status", "text")
                return ResolutionResult(
                    status="text", command=EditCommand.insert_char(text)
                )

            handle.add_metadata("status", "miss")
            return ResolutionResult(status="miss")

    def _select_binding(
        self, token: str, context: Mapping[str, bool]
    ) -> Optional[Binding]:
        candidates = [
            binding
            for binding in self._registry.bindings_for(token)
            if binding.allows(context)
        ]
        if not candidates:
            return None
        candidates.sort(key=lambda b: (-b.priority, b.id))
        return candidates[0]


def _insertable_text(stroke: KeyStroke) -> Optional[str]:
    """Printable single character carried by a plain stroke, if any."""

    text = stroke.text
    if stroke.is_plain and text is not None and len(text) == 1 and text.isprintable():
        return text
    return None


__all__ = ["KeymapResolver", "ResolutionResult"]
