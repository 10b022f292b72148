"""UI-agnostic controller that wires a ModeManager into Textual callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from lined.modes import ModeManager, ModeResult


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    show_output: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    log: Callable[[str], None] = _noop


FORWARDED_EVENTS = (
    "command.submit",
    "command.error",
    "buffer.append",
    "buffer.replace",
    "buffer.write",
    "mode.switch",
    "editor.quit",
)


class TextualEditorAdapter:
    """Bridges ModeManager output and bus events to a Textual surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        manager.context.output = hooks.show_output
        self._subscribe_events()
        self.hooks.update_status(self.status_line())

    def submit_line(self, line: str) -> ModeResult:
        """Run one line exactly as the console loop would."""

        self._log_state("line ->", line=line)
        result = self.manager.handle_line(line)
        self._after_result(result)
        return result

    def close(self) -> ModeResult:
        """Finish the session as if input had ended."""

        result = self.manager.handle_eof()
        self._after_result(result)
        return result

    def status_line(self) -> str:
        state = self.manager.state
        parts = [state.mode.value.upper(), f"{state.buffer.line_count} lines"]
        if state.filename:
            parts.append(state.filename)
        if state.changed:
            parts.append("[+]")
        if state.line_numbers:
            parts.append("nu")
        return " | ".join(parts)

    def _after_result(self, result: ModeResult) -> None:
        if result.status == "error" and result.message:
            self.hooks.show_output(f"? {result.message}")
        if result.status == "quit" and result.message:
            self.hooks.show_output(result.message)
        self.hooks.update_status(self.status_line())
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
        )
        if self.manager.finished:
            self.hooks.request_exit()

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in FORWARDED_EVENTS:
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.manager.state
        return {
            "mode": state.mode.value,
            "lines": state.buffer.line_count,
            "changed": state.changed,
            "filename": state.filename,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
