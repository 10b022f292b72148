"""Editor mode, addressed ranges, and session state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .document import LineBuffer


class EditorMode(str, Enum):
    """Mutually exclusive editor modes."""

    APPEND = "append"
    COMMAND = "command"
    QUIT = "quit"


@dataclass(frozen=True, slots=True)
class LineRange:
    """Resolved half-open ``[start, end)`` pair of 0-based line indices."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end:
            raise ValueError(f"invalid line range [{self.start}, {self.end})")

    @classmethod
    def whole(cls, buffer_length: int) -> "LineRange":
        return cls(0, buffer_length)

    @classmethod
    def clamped(cls, start: int, end: int, buffer_length: int) -> "LineRange":
        start = min(max(start, 0), buffer_length)
        end = min(max(end, 0), buffer_length)
        return cls(start, max(end, start))

    def __len__(self) -> int:
        return self.end - self.start

    def indices(self) -> range:
        return range(self.start, self.end)


@dataclass(slots=True)
class EditorState:
    """Mutable state owned by a single editing session."""

    mode: EditorMode = EditorMode.COMMAND
    buffer: LineBuffer = field(default_factory=LineBuffer)
    line_numbers: bool = False
    filename: str = ""

    @property
    def changed(self) -> bool:
        return self.buffer.changed

    def set_mode(self, mode: EditorMode) -> None:
        self.mode = mode
