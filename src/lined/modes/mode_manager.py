"""Mode manager coordinating append/command handling and dispatch."""

from __future__ import annotations

from typing import Dict, Optional, Type

from lined.buffer import EditorMode, EditorState
from lined.commands.models import Command
from lined.commands.parser import is_command_line
from lined.errors import EditorError
from lined.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult


def _describe_os_error(exc: OSError) -> str:
    if exc.filename and exc.strerror:
        return f"{exc.filename}: {exc.strerror}"
    return str(exc)


class ModeManager:
    """Owns the registered modes and routes each input line.

    Lines starting with the sentinel are parsed and dispatched whatever the
    current mode is; everything else goes to the active mode. The active mode
    always follows ``state.mode``, which only handlers change.
    """

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[EditorMode, Mode] = {}
        self._active: Optional[EditorMode] = None
        self.logger = telemetry.get_logger("lined.modes")

    @property
    def state(self) -> EditorState:
        return self.context.state

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    @property
    def finished(self) -> bool:
        return self.state.mode is EditorMode.QUIT

    def register_mode(self, mode_cls: Type[Mode], /, **mode_kwargs: object) -> Mode:
        mode = mode_cls(self.context, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        if self._active is None and mode.name is self.state.mode:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def handle_line(self, line: str) -> ModeResult:
        """Handle one input line; embedded line breaks split it into several."""

        result = ModeResult(consumed=False)
        for part in line.splitlines() or [""]:
            result = self._handle_single(part)
            if self.finished:
                break
        return result

    def _handle_single(self, line: str) -> ModeResult:
        if is_command_line(line, self.context.config.sentinel):
            result = self.execute(line)
        else:
            mode = self.active_mode
            if mode is None:
                raise RuntimeError(f"No mode registered for '{self.state.mode.value}'")
            result = mode.handle_line(line)
        self._sync_mode()
        return result

    def execute(self, line: str) -> ModeResult:
        """Parse and run one command line, reporting failures as results."""

        self.context.bus.emit("command.submit", line)
        try:
            command = self.context.parser.parse_line(
                line, self.state.buffer.line_count
            )
        except EditorError as exc:
            return self._error_result(line, str(exc))
        return self.execute_command(command, source=line)

    def execute_command(self, command: Command, *, source: str = "") -> ModeResult:
        """Run an already-built command, reporting failures as results."""

        bus = self.context.bus
        try:
            result = self.dispatch(command)
        except EditorError as exc:
            return self._error_result(source or command.letter, str(exc))
        except OSError as exc:
            return self._error_result(
                source or command.letter, _describe_os_error(exc)
            )

        if self.state.mode is EditorMode.QUIT:
            bus.emit("editor.quit", None)
            return ModeResult(
                consumed=True,
                switch_to=EditorMode.QUIT,
                status="quit",
                message=self.context.config.farewell,
            )
        return result

    def dispatch(self, command: Command) -> ModeResult:
        with telemetry.span(
            "commands::dispatch",
            component=True,
            metadata={"letter": command.letter, "args": command.args},
        ):
            outcome = command.ref(self.context, list(command.args))
        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)

    def handle_eof(self) -> ModeResult:
        """Treat end of input as leaving append mode and quitting."""

        if self.state.mode is EditorMode.APPEND:
            self.execute(self.context.config.sentinel)
            self._sync_mode()
        telemetry.record_event(
            "editor.eof", data={"lines": self.state.buffer.line_count}
        )
        result = self.execute(f"{self.context.config.sentinel}q")
        if result.status != "quit":
            self.state.set_mode(EditorMode.QUIT)
            result = ModeResult(
                consumed=True,
                switch_to=EditorMode.QUIT,
                status="quit",
                message=self.context.config.farewell,
            )
        self._sync_mode()
        return result

    def _error_result(self, line: str, message: str) -> ModeResult:
        self.context.bus.emit("command.error", message)
        telemetry.record_event(
            "command.error", level="warning", data={"line": line, "error": message}
        )
        return ModeResult(consumed=True, status="error", message=message)

    def _sync_mode(self) -> None:
        target = self.state.mode
        if target is self._active:
            return
        previous = self.active_mode
        if previous is not None:
            previous.on_exit(target)
        prior_name = self._active
        self._active = target
        incoming = self._modes.get(target)
        if incoming is not None:
            incoming.on_enter(prior_name)
        self.context.bus.emit("mode.switch", target)
        telemetry.record_event("mode.switch", data={"mode": target.value})


__all__ = ["ModeManager"]
