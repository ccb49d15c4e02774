"""Editor settings resolved from ``LINEPAD_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX, PRESETS

DEFAULT_TAB_WIDTH = 4
DEFAULT_GUTTER_WIDTH = 8


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Knobs for the front end and the Tab command."""

    tab_width: int = DEFAULT_TAB_WIDTH
    gutter_width: int = DEFAULT_GUTTER_WIDTH
    log_preset: Optional[str] = None

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            raise ValueError("tab_width must be positive")
        if self.gutter_width < 1:
            raise ValueError("gutter_width must be positive")
        if self.log_preset is not None and self.log_preset.lower() not in PRESETS:
            raise ValueError(f"Unknown log preset '{self.log_preset}'")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorConfig":
        source = os.environ if env is None else env
        preset = source.get(f"{ENV_PREFIX}LOG_PRESET") or None
        return cls(
            tab_width=_env_int(source, "TAB_WIDTH", DEFAULT_TAB_WIDTH),
            gutter_width=_env_int(source, "GUTTER_WIDTH", DEFAULT_GUTTER_WIDTH),
            log_preset=preset,
        )

    def override(self, **changes: object) -> "EditorConfig":
        """Return a copy with every non-``None`` change applied."""

        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def tab_text(self) -> str:
        return " " * self.tab_width


__all__ = ["EditorConfig", "DEFAULT_TAB_WIDTH", "DEFAULT_GUTTER_WIDTH"]
