"""Keymap registry storing key bindings and detecting conflicts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from linepad.runtime.telemetry import span

from .models import Binding


@dataclass(slots=True)
class RegistryStats:
    binding_count: int
    keys: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a new binding would shadow an existing one."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        conflicts_tuple = tuple(conflicts)
        message = (
            f"Binding '{binding.id}' conflicts with {[b.id for b in conflicts_tuple]}"
        )
        super().__init__(message)
        self.binding = binding
        self.conflicts = conflicts_tuple


class KeymapRegistry:
    """Owns bindings, indexed by key token."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._bindings: Dict[str, Binding] = {}
        self._key_index: Dict[str, set[str]] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "key": binding.key},
        ) as handle:
            conflicts = [
                c for c in self.detect_conflicts(binding) if c.id != binding.id
            ]
            if conflicts and not replace:
                handle.add_metadata(
                    "conflicts", ",".join(conflict.id for conflict in conflicts)
                )
                raise KeymapConflictError(binding, conflicts)

            if binding.id in self._bindings:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self._drop(self._bindings[binding.id])
            for conflict in conflicts:
                self._drop(conflict)

            self._bindings[binding.id] = binding
            self._key_index.setdefault(binding.key, set()).add(binding.id)
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.get(binding_id)
        if binding is None:
            return None
        self._drop(binding)
        self._revision += 1
        return binding

    def bindings_for(self, key: str) -> tuple[Binding, ...]:
        ids = self._key_index.get(key, set())
        return tuple(self._bindings[binding_id] for binding_id in sorted(ids))

    def stats(self) -> RegistryStats:
        return RegistryStats(
            binding_count=len(self._bindings),
            keys=tuple(sorted(self._key_index)),
        )

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        return [
            existing
            for existing in self.bindings_for(binding.key)
            if _contexts_overlap(binding, existing)
        ]

    def _drop(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        bucket = self._key_index.get(binding.key)
        if bucket is None:
            return
        bucket.discard(binding.id)
        if not bucket:
            self._key_index.pop(binding.key, None)


def _contexts_overlap(left: Binding, right: Binding) -> bool:
    """Two bindings overlap unless some shared flag expects opposite values."""

    left_map = left.when_map
    right_map = right.when_map

    if not left.when and not right.when:
        return True

    for flag, expected in left_map.items():
        if flag in right_map and right_map[flag] != expected:
            return False

    if not left.when or not right.when:
        return False

    return left_map == right_map


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
