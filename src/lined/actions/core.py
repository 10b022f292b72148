"""Mode and flag handlers that ignore their range arguments."""

from __future__ import annotations

from typing import List

from lined.buffer import EditorMode
from lined.modes.base_mode import ModeContext, ModeResult


def quit_editor(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.state.set_mode(EditorMode.QUIT)
    return ModeResult(consumed=True, switch_to=EditorMode.QUIT, status="quit")


def enter_append(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.state.set_mode(EditorMode.APPEND)
    return ModeResult(
        consumed=True, switch_to=EditorMode.APPEND, message="enter_append"
    )


def leave_append(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    context.state.set_mode(EditorMode.COMMAND)
    return ModeResult(
        consumed=True, switch_to=EditorMode.COMMAND, message="leave_append"
    )


def toggle_numbers(context: ModeContext, args: List[str]) -> ModeResult:
    del args
    state = context.state
    state.line_numbers = not state.line_numbers
    status = "numbers_on" if state.line_numbers else "numbers_off"
    return ModeResult(consumed=True, status=status)


def new_document(context: ModeContext, args: List[str]) -> ModeResult:
    """Discard the buffer without asking and forget the file name."""

    del args
    state = context.state
    state.buffer.clear()
    state.filename = ""
    context.bus.emit("buffer.replace", 0)
    return ModeResult(consumed=True, status="new_document")


__all__ = [
    "quit_editor",
    "enter_append",
    "leave_append",
    "toggle_numbers",
    "new_document",
]
