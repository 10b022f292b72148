"""Executable Textual app that hosts the line editor."""

from __future__ import annotations

from typing import Any, Optional

try:  # pragma: no cover - imported only when the TUI is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Input, Log, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use lined.adapters.textual.app"
    ) from exc

from lined.config import EditorConfig
from lined.modes import ModeManager
from lined.session import create_default_manager

from .controller import TextualEditorAdapter, TextualUIHooks


class LinedApp(App[int]):
    """Output log, status line, and a single input box feeding the editor."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#output-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "close_session", "Quit"),
        ("ctrl+d", "close_session", "End input"),
    ]

    def __init__(
        self,
        *,
        config: Optional[EditorConfig] = None,
        manager: Optional[ModeManager] = None,
    ) -> None:
        super().__init__()
        self.manager = manager or create_default_manager(config=config)
        self.adapter: TextualEditorAdapter | None = None
        self._output_widget: Log | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._output_widget = Log(id="output-view")
        yield self._output_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Input(placeholder="text, or .command", id="command-input")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            show_output=self._show_output,
            update_status=self._update_status,
            handle_event=self._handle_event,
            request_exit=self._request_exit,
        )
        self.adapter = TextualEditorAdapter(self.manager, hooks)
        self.query_one(Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if self.adapter is None:
            return
        self.adapter.submit_line(event.value)
        event.input.value = ""

    def action_close_session(self) -> None:
        if self.adapter is not None and not self.manager.finished:
            self.adapter.close()
        else:
            self.exit(0)

    def _show_output(self, line: str) -> None:
        if self._output_widget:
            self._output_widget.write_line(line)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "buffer.write" and isinstance(payload, str):
            self.notify(f"wrote {payload}")

    def _request_exit(self) -> None:
        self.exit(0)


def run_tui(manager: ModeManager) -> int:
    result = LinedApp(manager=manager).run()
    return result or 0


__all__ = ["LinedApp", "run_tui"]
