"""Wiring helpers that assemble a ready-to-use editing session."""

from __future__ import annotations

from typing import Optional

from lined.buffer import EditorState
from lined.commands.defaults import load_default_commands
from lined.commands.parser import CommandParser
from lined.commands.registry import CommandRegistry
from lined.config import EditorConfig
from lined.modes import AppendMode, CommandMode, ModeBus, ModeContext, ModeManager
from lined.modes.base_mode import OutputSink


def create_default_manager(
    *,
    config: Optional[EditorConfig] = None,
    output: Optional[OutputSink] = None,
    state: Optional[EditorState] = None,
) -> ModeManager:
    """Build a ModeManager with both modes and the built-in command table."""

    config = config or EditorConfig()
    registry = load_default_commands(CommandRegistry(logger_name="lined.commands"))
    parser = CommandParser(
        registry, sentinel=config.sentinel, logger_name="lined.commands"
    )
    context = ModeContext(
        state=state or EditorState(),
        registry=registry,
        parser=parser,
        config=config,
        bus=ModeBus(),
    )
    if output is not None:
        context.output = output
    manager = ModeManager(context)
    manager.register_mode(CommandMode)
    manager.register_mode(AppendMode)
    return manager


__all__ = ["create_default_manager"]
