"""Classification and parsing of raw command lines."""

from __future__ import annotations

from lined.buffer.state import LineRange
from lined.config import DEFAULT_SENTINEL
from lined.errors import CommandSyntaxError
from lined.runtime.telemetry import span

from .address import ANCHOR_FIRST, RANGE_SEPARATOR, ScanCursor, resolve_range
from .models import Command
from .registry import CommandRegistry

LEAVE_APPEND_LETTER = "."


def strip_sentinel(line: str, sentinel: str = DEFAULT_SENTINEL) -> str:
    """Drop the leading sentinel unless it is the whole line."""

    if len(line) > 1 and line.startswith(sentinel):
        return line[1:]
    return line


def is_command_line(line: str, sentinel: str = DEFAULT_SENTINEL) -> bool:
    return line.startswith(sentinel)


def _starts_address(char: str) -> bool:
    return char.isdigit() or char in (ANCHOR_FIRST, RANGE_SEPARATOR)


class CommandParser:
    """Turns the text after the sentinel into a ``Command``.

    Forms are tried in order: the bare sentinel, a letter with no address,
    and an address or range followed by a letter. Anything else is a syntax
    error.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        sentinel: str = DEFAULT_SENTINEL,
        logger_name: str | None = None,
    ) -> None:
        self.registry = registry
        self.sentinel = sentinel
        self._logger_name = logger_name

    def parse_line(self, line: str, buffer_length: int) -> Command:
        """Parse a full input line that still carries its sentinel."""

        return self.parse(strip_sentinel(line, self.sentinel), buffer_length)

    def parse(self, text: str, buffer_length: int) -> Command:
        with span(
            "commands::parse",
            logger_name=self._logger_name,
            component="commands",
            metadata={"text": text, "lines": buffer_length},
        ) as handle:
            command = self._classify(text, buffer_length)
            handle.add_metadata("letter", command.letter)
            return command

    def _classify(self, text: str, buffer_length: int) -> Command:
        if text == self.sentinel:
            ref = self.registry.lookup(LEAVE_APPEND_LETTER)
            return Command.build(ref, LineRange.whole(buffer_length))

        head = text[:1]
        if head.isalpha():
            ref = self.registry.lookup(head)
            return Command.build(
                ref, LineRange.whole(buffer_length), text[1:].split()
            )

        if head and _starts_address(head):
            cursor = ScanCursor(text)
            line_range = resolve_range(cursor, buffer_length)
            letter = cursor.peek()
            if not letter.isalpha():
                raise CommandSyntaxError()
            ref = self.registry.lookup(letter)
            cursor.advance()
            return Command.build(ref, line_range, cursor.rest().split())

        raise CommandSyntaxError()


__all__ = ["CommandParser", "is_command_line", "strip_sentinel"]
