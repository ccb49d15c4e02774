"""Executable Textual front end for the line editor."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, cast

try:  # pragma: no cover - imported only when the editor UI runs
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use linepad.adapters.textual.app"
    ) from exc

from linepad.buffer import EditorMirror, EditorSession
from linepad.commands import CommandResult
from linepad.runtime import telemetry
from linepad.runtime.config import EditorConfig

from .controller import TextualEditorAdapter, TextualUIHooks
from .render import SAVE_HINT, render_lines, scroll_top


class EditorView(Static, can_focus=True):
    """Focusable view that forwards every key press to the app."""

    def on_key(self, event: events.Key) -> None:
        app = cast("LinepadApp", self.app)
        if app.route_key(event.key, event.character):
            event.prevent_default()
            event.stop()

    def on_resize(self, event: events.Resize) -> None:
        del event
        cast("LinepadApp", self.app).redraw()


class LinepadApp(App[int]):
    """Full-screen editor hosting one ``EditorSession``."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #editor-view {
        height: 1fr;
        border: double $accent;
        border-title-color: $primary;
        border-subtitle-align: center;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "discard", "Quit", show=False, priority=True),
    ]

    def __init__(self, session: EditorSession, *, config: EditorConfig) -> None:
        super().__init__()
        self.session = session
        self.config = config
        self.adapter: TextualEditorAdapter | None = None
        self.error: OSError | None = None
        self._mirror: EditorMirror | None = None
        self._top = 0
        self._view: EditorView | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        self._view = EditorView("", id="editor-view")
        self._view.border_title = str(self.session.path or "[unnamed]")
        self._view.border_subtitle = SAVE_HINT
        self._status = Static("", id="status-line")
        yield self._view
        yield self._status

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            request_exit=self._request_exit,
            log=lambda line: telemetry.get_logger("linepad.ui").debug(line),
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        if self._view is not None:
            self._view.focus()

    def action_discard(self) -> None:
        self.route_key("ctrl+q", None)

    def route_key(self, key: str, character: Optional[str]) -> bool:
        if self.adapter is None:
            return False
        try:
            result = self.adapter.handle_textual_key(key, text=character)
        except OSError as exc:
            self.error = exc
            self.exit(return_code=1)
            return True
        return result is not None

    def redraw(self) -> None:
        if self._view is None or self._mirror is None:
            return
        height = max(self._view.content_size.height, 1)
        self._top = scroll_top(
            self._top, self._mirror.selected, height, len(self._mirror.lines)
        )
        self._view.update(
            render_lines(
                self._mirror,
                gutter_width=self.config.gutter_width,
                top=self._top,
                height=height,
            )
        )

    def _update_view(self, mirror: EditorMirror) -> None:
        self._mirror = mirror
        self.redraw()

    def _update_status(self, status: str) -> None:
        if self._status is not None:
            self._status.update(status)

    def _request_exit(self, result: CommandResult) -> None:
        self.exit(result=0, message=result.message)


def target_error(path: Path) -> Optional[str]:
    """Reason the editor must not open ``path``, or ``None`` when it may."""

    if path.exists() and not path.is_file():
        return f"{path} exists and is not a file."
    return None


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="linepad", description="Edit a text file one line at a time."
    )
    parser.add_argument("path", help="File to edit; created on save if missing")
    parser.add_argument(
        "--tab-width",
        type=int,
        default=None,
        help="Spaces inserted by Tab (default: LINEPAD_TAB_WIDTH or 4)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset (default: LINEPAD_LOG_PRESET or quiet)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    path = Path(args.path)
    problem = target_error(path)
    if problem:
        print(problem, file=sys.stderr)
        return 1

    config = EditorConfig.from_env().override(
        tab_width=args.tab_width, log_preset=args.log_preset
    )
    telemetry.configure(preset=config.log_preset or "quiet")

    session = EditorSession.open(path, config=config)
    app = LinepadApp(session, config=config)
    app.run()
    if app.error is not None:
        raise app.error
    return app.return_code or 0


if __name__ == "__main__":  # pragma: no cover - manual run
    sys.exit(main())
