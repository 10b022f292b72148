"""Editor modes and the line dispatch loop."""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .append_mode import AppendMode
from .command_mode import CommandMode
from .mode_manager import ModeManager

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "AppendMode",
    "CommandMode",
    "ModeManager",
]
