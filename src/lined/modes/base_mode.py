"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from lined.buffer import EditorMode, EditorState
from lined.config import EditorConfig

if TYPE_CHECKING:
    from lined.commands.parser import CommandParser
    from lined.commands.registry import CommandRegistry

OutputSink = Callable[[str], None]


@dataclass(slots=True)
class ModeResult:
    """Result of handling one input line."""

    consumed: bool
    switch_to: Optional[EditorMode] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting handlers and hosts exchange signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


def _discard_output(line: str) -> None:
    del line


@dataclass(slots=True)
class ModeContext:
    """Everything a mode or command handler may read or mutate."""

    state: EditorState
    registry: "CommandRegistry"
    parser: "CommandParser"
    config: EditorConfig = field(default_factory=EditorConfig)
    bus: ModeBus = field(default_factory=ModeBus)
    output: OutputSink = _discard_output

    def emit_line(self, line: str) -> None:
        self.output(line)


class Mode:
    """Base class for the per-mode handling of non-command input."""

    name: EditorMode = EditorMode.COMMAND

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(
        self, previous: Optional[EditorMode]
    ) -> None:  # pragma: no cover - default no-op
        del previous

    def on_exit(
        self, next_mode: Optional[EditorMode]
    ) -> None:  # pragma: no cover - default no-op
        del next_mode

    def handle_line(
        self, line: str
    ) -> ModeResult:  # pragma: no cover - abstract override
        raise NotImplementedError
