"""Command-line entry point: ``python -m lined [FILE]``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from lined.adapters.console import report, run_console
from lined.buffer import LineRange
from lined.commands.models import Command
from lined.config import EditorConfig
from lined.modes import ModeManager
from lined.runtime import telemetry
from lined.session import create_default_manager


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lined", description="Line-oriented text editor."
    )
    parser.add_argument("file", nargs="?", help="File to read into the buffer")
    parser.add_argument(
        "--sentinel",
        default=None,
        help="Character that marks a command line (default: '.')",
    )
    parser.add_argument(
        "--numbers",
        action="store_true",
        help="Start with line numbers shown",
    )
    parser.add_argument("--prompt", default=None, help="Prompt shown before input")
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="telelog preset to use instead of the LINED_LOG_* settings",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Run the Textual front-end instead of reading stdin",
    )
    return parser.parse_args(argv)


def build_manager(args: argparse.Namespace, out: TextIO) -> ModeManager:
    config = EditorConfig.from_env().override(
        sentinel=args.sentinel, prompt=args.prompt
    )
    manager = create_default_manager(
        config=config, output=lambda line: out.write(f"{line}\n")
    )
    manager.state.line_numbers = args.numbers
    if args.file:
        # Built directly so the path is never re-tokenized.
        read = Command.build(
            manager.context.registry.lookup("r"),
            LineRange.whole(manager.state.buffer.line_count),
            [args.file],
        )
        report(manager.execute_command(read, source=f"r {args.file}"), out)
    return manager


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    out = stdout or sys.stdout
    try:
        manager = build_manager(args, out)
    except ValueError as exc:
        sys.stderr.write(f"lined: {exc}\n")
        return 2

    if args.tui:
        from lined.adapters.textual.app import run_tui

        return run_tui(manager)
    return run_console(manager, stdin or sys.stdin, out)


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
