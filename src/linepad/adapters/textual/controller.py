"""Adapter that feeds key events into an ``EditorSession`` and reports back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from linepad.buffer import EditorMirror, EditorSession
from linepad.commands import CommandResult
from linepad.keymaps import (
    AT_LINE_START,
    KeymapRegistry,
    KeymapResolver,
    KeyStroke,
    load_default_keymaps,
)
from linepad.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update the host UI."""

    update_view: Callable[[EditorMirror], None]
    update_status: Callable[[str], None] = _noop
    request_exit: Callable[[CommandResult], None] = _noop
    log: Callable[[str], None] = _noop


def create_default_resolver() -> KeymapResolver:
    registry = KeymapRegistry(logger_name="linepad.keymaps")
    load_default_keymaps(registry)
    return KeymapResolver(registry, logger_name="linepad.keymaps")


class TextualEditorAdapter:
    """Resolves keys, dispatches commands, and pushes fresh mirrors to the UI.

    The adapter never touches session internals: it reads flags and
    mirrors through the session's public properties.
    """

    def __init__(
        self,
        session: EditorSession,
        hooks: TextualUIHooks,
        *,
        resolver: Optional[KeymapResolver] = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.resolver = resolver or create_default_resolver()
        self.logger = telemetry.get_logger("linepad.adapters.textual")
        self._refresh_view()

    def keymap_flags(self) -> Dict[str, bool]:
        return {AT_LINE_START: self.session.at_line_start}

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[CommandResult]:
        """Resolve and run one key; ``None`` means the key is unbound.

        ``OSError`` raised while saving propagates to the caller.
        """

        stroke = KeyStroke.parse(key, text=text)
        if modifiers:
            stroke = KeyStroke(
                stroke.key, stroke.modifiers + tuple(modifiers), text=text
            )
        self._log_state("key ->", key=stroke.token, text=text)

        resolution = self.resolver.resolve(stroke, context=self.keymap_flags())
        if resolution.command is None:
            self._log_state("miss <-", key=stroke.token)
            return None

        result = self.session.dispatch(resolution.command)
        self._after_result(result)
        self._log_state(
            "result <-",
            command=resolution.command.kind.value,
            status=result.status,
            message=result.message,
            quit=result.quit,
        )
        return result

    def _after_result(self, result: CommandResult) -> None:
        status = result.message or result.status
        if status:
            self.hooks.update_status(status)
        self._refresh_view()
        if result.quit:
            telemetry.record_event(
                "editor.exit", data={"status": result.status, "dirty": self.session.dirty}
            )
            self.hooks.request_exit(result)

    def _refresh_view(self) -> None:
        self.hooks.update_view(self.session.mirror())

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        return {
            "line": self.session.selected,
            "offset": self.session.offset,
            "lines": self.session.line_count,
            "dirty": self.session.dirty,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "create_default_resolver"]
