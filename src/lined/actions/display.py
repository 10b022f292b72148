"""Printing lines of the buffer."""

from __future__ import annotations

from typing import List

from lined.commands.models import decode_range
from lined.errors import EmptyBufferError
from lined.modes.base_mode import ModeContext, ModeResult


def format_line(number: int, text: str, *, width: int) -> str:
    """Left-justify ``number`` in a ``width``-wide field before ``text``."""

    return f"{number:<{width}}{text}"


def print_range(context: ModeContext, args: List[str]) -> ModeResult:
    buffer = context.state.buffer
    if buffer.is_empty:
        raise EmptyBufferError()

    line_range = decode_range(args)
    width = context.config.number_width
    for index in line_range.indices():
        text = buffer.get_line(index)
        if context.state.line_numbers:
            text = format_line(index + 1, text, width=width)
        context.emit_line(text)
    return ModeResult(consumed=True, status="printed", message=str(len(line_range)))


__all__ = ["format_line", "print_range"]
