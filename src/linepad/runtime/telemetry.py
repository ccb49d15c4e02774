"""Telemetry for the editor, backed by telelog.

Public surface:

``configure(...)`` -- adopt a telelog config or one of the named presets
``get_logger(name)`` -- cached logger bound to the active config
``record_event(name, ...)`` -- structured one-off event
``span(name, ...)`` -- profiled block, optionally tracked as a component

Two environment variables are read when a config is built:
``LINEPAD_LOG_LEVEL`` and ``LINEPAD_LOG_FILE``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "LINEPAD_"
DEFAULT_LOGGER_NAME = "linepad"
DEFAULT_LOG_FILE = "linepad.log"
PRESETS = ("development", "production", "quiet")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


@dataclass(frozen=True)
class LogSettings:
    """Plain description of a telelog config before it is built."""

    level: str
    console: bool
    log_file: Optional[str] = None
    buffered: bool = False

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level.upper())
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
        # Spans rely on telelog's profiler.
        config.with_profiling(True)
        return config


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def settings_for(preset: Optional[str] = None) -> LogSettings:
    """Resolve ``preset`` (or the plain environment) into ``LogSettings``."""

    level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE") or None

    if preset is None:
        return LogSettings(level=level or "INFO", console=True, log_file=log_file)

    key = preset.lower()
    if key == "development":
        return LogSettings(level="DEBUG", console=True, log_file=log_file)
    if key == "production":
        return LogSettings(
            level=level or "INFO",
            console=False,
            log_file=log_file or DEFAULT_LOG_FILE,
            buffered=True,
        )
    if key == "quiet":
        # The terminal belongs to the editor UI; only a log file may be written.
        return LogSettings(level=level or "WARNING", console=False, log_file=log_file)
    raise ValueError(f"Unknown preset '{preset}'. Expected one of {PRESETS}.")


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``config`` is an explicit ``telelog.Config``; ``preset`` names one of
    ``PRESETS``. Passing neither rebuilds the config from the environment.
    Cached loggers are dropped either way.
    """

    global _ACTIVE_CONFIG
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    _ACTIVE_CONFIG = config if config is not None else settings_for(preset).build()
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = settings_for().build()

    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _LOGGER_CACHE.get(logger_name)
    if logger is None:
        logger = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
        _LOGGER_CACHE[logger_name] = logger
    return logger


def _emit(logger: Any, level: Any, message: str, payload: Dict[str, Any]) -> None:
    name = str(level).lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return

    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str | Any = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span`` so callers can attach late metadata."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload = {"span": self.span_name, **self.metadata, "reason": reason}
        if self.component_name:
            payload["component"] = self.component_name
        _emit(self.logger, "error", "span::fail", payload)


def _component_name(name: str, component: Optional[str | bool]) -> Optional[str]:
    if component is True:
        return name
    return component if isinstance(component, str) else None


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block; ``component=True`` reuses ``name`` as component id.

    Metadata is pushed as logger context for the duration of the block.
    Exceptions are logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=_component_name(name, component),
        metadata={key: _stringify(value) for key, value in (metadata or {}).items()},
    )
    pushed = list(handle.metadata)

    with ExitStack() as stack:
        for key in pushed:
            log.add_context(key, handle.metadata[key])
            stack.callback(log.remove_context, key)
        if handle.component_name:
            stack.enter_context(log.track_component(handle.component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "PRESETS",
    "LogSettings",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "settings_for",
    "span",
]
