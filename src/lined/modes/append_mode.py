"""Append mode: every non-command line is stored in the buffer."""

from __future__ import annotations

from typing import Optional

from lined.buffer import EditorMode
from lined.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult


class AppendMode(Mode):
    name = EditorMode.APPEND

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("lined.modes.append")
        self.appended = 0

    def on_enter(self, previous: Optional[EditorMode]) -> None:
        del previous
        self.appended = 0

    def on_exit(self, next_mode: Optional[EditorMode]) -> None:
        telemetry.record_event(
            "append.finish",
            level="debug",
            data={"lines": self.appended, "next": next_mode},
        )

    def handle_line(self, line: str) -> ModeResult:
        buffer = self.context.state.buffer
        buffer.append_line(line)
        self.appended += 1
        self.context.bus.emit("buffer.append", buffer.line_count)
        return ModeResult(consumed=True, status="appended")
