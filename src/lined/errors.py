"""Error taxonomy surfaced to the user by the read-dispatch loop."""

from __future__ import annotations


class EditorError(RuntimeError):
    """Base class for recoverable editor failures."""

    default_message = "editor error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class CommandSyntaxError(EditorError):
    """Raised when a command line matches none of the command forms."""

    default_message = "syntax error"


class AddressError(CommandSyntaxError):
    """Raised when an address expression runs out of input mid-parse."""

    default_message = "invalid address"

    def __init__(self, message: str | None = None, *, position: int = 0) -> None:
        super().__init__(message)
        self.position = position


class UnknownCommandError(EditorError):
    """Raised for a well-formed command line naming an unregistered letter."""

    default_message = "unknown command"

    def __init__(self, letter: str, message: str | None = None) -> None:
        super().__init__(message)
        self.letter = letter


class EmptyBufferError(EditorError):
    default_message = "buffer empty"


class MissingFilenameError(EditorError):
    default_message = "file name undefined"


class FileDecodeError(EditorError):
    """Raised when a file is not text in the expected encoding."""

    def __init__(self, path: str, encoding: str) -> None:
        super().__init__(f"{path}: cannot decode as {encoding}")
        self.path = path
        self.encoding = encoding


class CommandConflictError(RuntimeError):
    """Raised when a letter is registered twice without ``replace=True``."""

    def __init__(self, letter: str, existing: str) -> None:
        super().__init__(f"Command '{letter}' is already bound to '{existing}'")
        self.letter = letter
        self.existing = existing


__all__ = [
    "EditorError",
    "CommandSyntaxError",
    "AddressError",
    "UnknownCommandError",
    "EmptyBufferError",
    "MissingFilenameError",
    "FileDecodeError",
    "CommandConflictError",
]
