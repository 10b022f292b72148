"""Standard-stream host: the read-dispatch-print loop."""

from __future__ import annotations

from typing import Iterable, TextIO

from lined.modes import ModeManager, ModeResult
from lined.runtime import telemetry

EXIT_SUCCESS = 0


def report(result: ModeResult, out: TextIO) -> None:
    """Show the parts of a result the user needs to see."""

    if result.status in ("error", "quit") and result.message:
        out.write(f"{result.message}\n")
        out.flush()


def run_console(
    manager: ModeManager,
    stream: Iterable[str],
    out: TextIO,
) -> int:
    """Feed ``stream`` line by line until quit or end of input.

    Returns the process exit status.
    """

    prompt = manager.context.config.prompt
    logger = telemetry.get_logger("lined.console")
    if prompt:
        out.write(prompt)
        out.flush()
    for raw in stream:
        result = manager.handle_line(raw)
        report(result, out)
        if manager.finished:
            return EXIT_SUCCESS
        if prompt:
            out.write(prompt)
            out.flush()

    logger.debug("input exhausted, closing session")
    report(manager.handle_eof(), out)
    return EXIT_SUCCESS


__all__ = ["EXIT_SUCCESS", "report", "run_console"]
