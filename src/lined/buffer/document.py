"""Line storage backing the editor buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

_TERMINATORS = "\r\n"


def _clean(line: str) -> str:
    text = line.rstrip(_TERMINATORS)
    if "\n" in text or "\r" in text:
        raise ValueError("buffer lines cannot contain line terminators")
    return text


@dataclass(slots=True)
class LineBuffer:
    """Ordered list of text lines plus the dirty flag.

    Lines are stored 0-based; users address them 1-based. An empty buffer has
    no lines at all (unlike a document holding one empty line).
    """

    _lines: List[str] = field(default_factory=list)
    changed: bool = False

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, changed: bool = False) -> "LineBuffer":
        return cls(_lines=[_clean(line) for line in lines], changed=changed)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def lines_in(self, start: int, end: int) -> Sequence[str]:
        """Return the half-open slice ``[start, end)``."""

        return tuple(self._lines[start:end])

    def append_line(self, text: str) -> None:
        self._lines.append(_clean(text))
        self.changed = True

    def replace(self, lines: Iterable[str], *, changed: bool) -> None:
        self._lines = [_clean(line) for line in lines]
        self.changed = changed

    def clear(self) -> None:
        self._lines = []
        self.changed = False

    def mark_saved(self) -> None:
        self.changed = False
