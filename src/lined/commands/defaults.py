"""Built-in command table seeded into every registry."""

from __future__ import annotations

from lined.actions import core as core_actions
from lined.actions import display as display_actions
from lined.actions import files as file_actions

from .models import CommandRef
from .registry import CommandRegistry

DEFAULT_COMMANDS: tuple[CommandRef, ...] = (
    CommandRef(
        letter="p",
        handler=display_actions.print_range,
        description="Print the addressed lines",
    ),
    CommandRef(
        letter="q",
        handler=core_actions.quit_editor,
        description="Quit immediately",
    ),
    CommandRef(
        letter="a",
        handler=core_actions.enter_append,
        description="Enter append mode",
    ),
    CommandRef(
        letter=".",
        handler=core_actions.leave_append,
        description="Leave append mode",
    ),
    CommandRef(
        letter="r",
        handler=file_actions.read_file,
        description="Replace the buffer with a file",
    ),
    CommandRef(
        letter="w",
        handler=file_actions.write_file,
        description="Write the buffer to a file",
    ),
    CommandRef(
        letter="l",
        handler=core_actions.toggle_numbers,
        description="Toggle line numbers",
    ),
    CommandRef(
        letter="n",
        handler=core_actions.new_document,
        description="Start a new empty document",
    ),
)


def load_default_commands(
    registry: CommandRegistry, *, replace: bool = False
) -> CommandRegistry:
    for ref in DEFAULT_COMMANDS:
        registry.register(ref, replace=replace)
    return registry


__all__ = ["DEFAULT_COMMANDS", "load_default_commands"]
