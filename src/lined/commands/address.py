"""Address and address-range resolution for command prefixes.

Grammar, consumed left to right without backtracking::

    range   := address (',' address)?
    address := anchor? sign? digits?
    anchor  := '^' (first line, base 0) | '$' (base = buffer length)
    sign    := '+' | '-'
    digits  := [0-9]*

An address evaluates to ``base + direction * magnitude``. Values are user line
numbers, so ``$`` names the last line and a bare address evaluates to 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lined.buffer.state import LineRange
from lined.errors import AddressError

ANCHOR_FIRST = "^"
ANCHOR_LAST = "$"
RANGE_SEPARATOR = ","
ASCII_DIGITS = "0123456789"


@dataclass(slots=True)
class ScanCursor:
    """Read position over the remaining text of a command line."""

    text: str
    position: int = 0

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def peek(self) -> str:
        """Return the next character, or ``""`` at end of input."""

        if self.at_end:
            return ""
        return self.text[self.position]

    def advance(self, count: int = 1) -> None:
        self.position = min(self.position + count, len(self.text))

    def accept(self, char: str) -> bool:
        if self.peek() == char:
            self.advance()
            return True
        return False

    def rest(self) -> str:
        return self.text[self.position :]


def _require_input(cursor: ScanCursor, where: str) -> None:
    if cursor.at_end:
        raise AddressError(
            f"invalid address: input ends before {where}", position=cursor.position
        )


def resolve_address(cursor: ScanCursor, buffer_length: int) -> int:
    """Consume one address from ``cursor`` and return its unclamped value.

    Raises ``AddressError`` when the input is exhausted where an anchor or a
    sign could appear, e.g. for ``"$"`` with nothing after it.
    """

    _require_input(cursor, "anchor")
    if cursor.accept(ANCHOR_FIRST):
        base = 0
    elif cursor.accept(ANCHOR_LAST):
        base = buffer_length
    else:
        base = 0

    _require_input(cursor, "sign")
    if cursor.accept("-"):
        direction = -1
    else:
        cursor.accept("+")
        direction = 1

    magnitude = 0
    while not cursor.at_end and cursor.peek() in ASCII_DIGITS:
        magnitude = magnitude * 10 + ASCII_DIGITS.index(cursor.peek())
        cursor.advance()

    return base + direction * magnitude


def resolve_range(cursor: ScanCursor, buffer_length: int) -> LineRange:
    """Consume ``address (',' address)?`` and return the clamped range.

    The start value ``s`` selects index ``s - 1``; the end value is the
    inclusive last line, which is the half-open end index. A missing start
    defaults to the first line and a missing end to a one-line range.
    """

    start_value: Optional[int] = None
    end_value: Optional[int] = None

    if cursor.peek() != RANGE_SEPARATOR:
        start_value = resolve_address(cursor, buffer_length)
    if cursor.accept(RANGE_SEPARATOR):
        end_value = resolve_address(cursor, buffer_length)

    start = 0 if start_value is None else start_value - 1
    end = start + 1 if end_value is None else end_value
    return LineRange.clamped(start, end, buffer_length)


__all__ = ["ScanCursor", "resolve_address", "resolve_range"]
