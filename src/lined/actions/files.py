"""Reading files into the buffer and writing the buffer back out."""

from __future__ import annotations

from typing import List, Sequence

from lined.buffer import load_lines, save_lines
from lined.commands.models import RANGE_ARG_COUNT
from lined.errors import MissingFilenameError
from lined.modes.base_mode import ModeContext, ModeResult


def _target_filename(context: ModeContext, args: Sequence[str]) -> str:
    tokens = args[RANGE_ARG_COUNT:]
    if tokens:
        return tokens[0].strip()
    if context.state.filename:
        return context.state.filename
    raise MissingFilenameError()


def read_file(context: ModeContext, args: List[str]) -> ModeResult:
    """Replace the buffer with the contents of a file.

    A failed read raises before anything is touched, so the buffer and the
    remembered file name survive I/O errors.
    """

    filename = _target_filename(context, args)
    lines = load_lines(filename)
    state = context.state
    state.buffer.replace(lines, changed=True)
    state.filename = filename
    context.bus.emit("buffer.replace", len(lines))
    return ModeResult(consumed=True, status="read", message=f"{filename}: {len(lines)}")


def write_file(context: ModeContext, args: List[str]) -> ModeResult:
    filename = _target_filename(context, args)
    state = context.state
    count = save_lines(
        filename,
        state.buffer.snapshot(),
        swap_suffix=context.config.swap_suffix,
    )
    state.buffer.mark_saved()
    state.filename = filename
    context.bus.emit("buffer.write", filename)
    return ModeResult(consumed=True, status="written", message=f"{filename}: {count}")


__all__ = ["read_file", "write_file"]
