"""Dataclasses describing command bindings and parsed commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from lined.buffer.state import LineRange

RANGE_ARG_COUNT = 2


@dataclass(frozen=True, slots=True)
class CommandRef:
    """Handler metadata bound to a single command letter."""

    letter: str
    handler: Callable[..., object]
    description: str = ""
    telemetry_name: str | None = None
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.letter) != 1:
            raise ValueError("command letter must be a single character")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", f"command.{self.letter}")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


def encode_range(line_range: LineRange) -> list[str]:
    """Render a range as its two leading 1-based argument tokens."""

    return [str(line_range.start + 1), str(line_range.end + 1)]


def decode_range(args: Sequence[str]) -> LineRange:
    """Inverse of ``encode_range`` for the first two argument tokens."""

    if len(args) < RANGE_ARG_COUNT:
        raise ValueError("command arguments do not carry a line range")
    return LineRange(int(args[0]) - 1, int(args[1]) - 1)


@dataclass(frozen=True, slots=True)
class Command:
    """Parsed command line ready for dispatch."""

    letter: str
    args: tuple[str, ...]
    ref: CommandRef

    @classmethod
    def build(
        cls, ref: CommandRef, line_range: LineRange, tokens: Sequence[str] = ()
    ) -> "Command":
        return cls(
            letter=ref.letter,
            args=tuple(encode_range(line_range)) + tuple(tokens),
            ref=ref,
        )

    @property
    def line_range(self) -> LineRange:
        return decode_range(self.args)

    @property
    def free_args(self) -> tuple[str, ...]:
        return self.args[RANGE_ARG_COUNT:]


__all__ = [
    "Command",
    "CommandRef",
    "LineRange",
    "decode_range",
    "encode_range",
]
