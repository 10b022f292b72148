"""Command mode: plain text lines carry no meaning and are skipped."""

from __future__ import annotations

from lined.buffer import EditorMode
from lined.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult


class CommandMode(Mode):
    name = EditorMode.COMMAND

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("lined.modes.command")

    def handle_line(self, line: str) -> ModeResult:
        self.logger.debug(f"ignoring text outside append mode: {line!r}")
        return ModeResult(consumed=False, status="ignored")
