"""Command parsing: addresses, the letter table, and parsed commands."""

from .address import ScanCursor, resolve_address, resolve_range
from .models import Command, CommandRef, decode_range, encode_range
from .parser import CommandParser, is_command_line, strip_sentinel
from .registry import CommandRegistry

__all__ = [
    "Command",
    "CommandRef",
    "CommandParser",
    "CommandRegistry",
    "ScanCursor",
    "decode_range",
    "encode_range",
    "is_command_line",
    "resolve_address",
    "resolve_range",
    "strip_sentinel",
]
