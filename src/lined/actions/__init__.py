"""Command handlers bound to letters by ``lined.commands.defaults``."""

from . import core, display, files

__all__ = ["core", "display", "files"]
