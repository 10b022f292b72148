"""Plain-text persistence for buffers: one line per newline-terminated record."""

from __future__ import annotations

import os
from contextlib import suppress
from typing import Iterable, List

from lined.errors import FileDecodeError
from lined.runtime import telemetry

DEFAULT_ENCODING = "utf-8"


def load_lines(path: str, *, encoding: str = DEFAULT_ENCODING) -> List[str]:
    """Read ``path`` and return its lines with surrounding whitespace trimmed."""

    with telemetry.span(
        "storage::load", component="storage", metadata={"path": path}
    ) as handle:
        try:
            with open(path, "r", encoding=encoding, newline="") as stream:
                lines = [line.strip() for line in stream]
        except UnicodeDecodeError as exc:
            raise FileDecodeError(path, encoding) from exc
        handle.add_metadata("lines", len(lines))
    return lines


def save_lines(
    path: str,
    lines: Iterable[str],
    *,
    swap_suffix: str = ".swp",
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """Write trimmed ``lines`` to ``path`` through a swap file; return the count.

    The content lands in ``<path><swap_suffix>`` first and is flushed to disk;
    only then is the original removed and the swap file renamed over it, so a
    failed write leaves the previous file intact.
    """

    swap_path = f"{path}{swap_suffix}"
    count = 0
    with telemetry.span(
        "storage::save",
        component="storage",
        metadata={"path": path, "swap": swap_path},
    ) as handle:
        try:
            with open(swap_path, "w", encoding=encoding, newline="\n") as stream:
                for line in lines:
                    stream.write(f"{line.strip()}\n")
                    count += 1
                stream.flush()
                os.fsync(stream.fileno())
        except OSError:
            _discard(swap_path)
            raise

        if os.path.lexists(path):
            os.remove(path)
        os.replace(swap_path, path)
        handle.add_metadata("lines", count)
    return count


def _discard(path: str) -> None:
    with suppress(FileNotFoundError):
        os.remove(path)


__all__ = ["load_lines", "save_lines"]
