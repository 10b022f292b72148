"""Command registry mapping single letters to handlers."""

from __future__ import annotations

from typing import Dict, Optional

from lined.errors import CommandConflictError, UnknownCommandError
from lined.runtime.telemetry import span

from .models import CommandRef


class CommandRegistry:
    """Owns the letter -> handler table used by the parser."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, CommandRef] = {}
        self._logger_name = logger_name

    def register(self, ref: CommandRef, *, replace: bool = False) -> CommandRef:
        with span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            metadata={"letter": ref.letter},
        ) as handle:
            existing = self._commands.get(ref.letter)
            if existing is not None and not replace:
                handle.add_metadata("conflict", existing.telemetry_name)
                raise CommandConflictError(ref.letter, str(existing.telemetry_name))
            self._commands[ref.letter] = ref
            return ref

    def get(self, letter: str) -> Optional[CommandRef]:
        return self._commands.get(letter)

    def lookup(self, letter: str) -> CommandRef:
        ref = self._commands.get(letter)
        if ref is None:
            raise UnknownCommandError(letter)
        return ref


__all__ = ["CommandRegistry"]
