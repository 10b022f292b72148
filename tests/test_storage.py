from __future__ import annotations

import os
from pathlib import Path

import pytest

from lined.buffer import load_lines, save_lines
from lined.buffer import storage
from lined.errors import FileDecodeError


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "round.txt"
    lines = ["alpha", "", "beta", "gamma"]

    count = save_lines(str(target), lines)

    assert count == 4
    assert load_lines(str(target)) == lines


def test_whitespace_is_trimmed_on_both_sides(tmp_path: Path) -> None:
    target = tmp_path / "ws.txt"

    save_lines(str(target), ["  lead", "trail  ", "\tboth\t"])

    assert target.read_text() == "lead\ntrail\nboth\n"
    assert load_lines(str(target)) == ["lead", "trail", "both"]


def test_load_counts_final_unterminated_line(tmp_path: Path) -> None:
    target = tmp_path / "tail.txt"
    target.write_text("one\ntwo")

    assert load_lines(str(target)) == ["one", "two"]


def test_load_empty_file(tmp_path: Path) -> None:
    target = tmp_path / "empty.txt"
    target.write_text("")

    assert load_lines(str(target)) == []


def test_save_replaces_existing_file_and_drops_swap(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("previous contents\n")

    save_lines(str(target), ["fresh"], swap_suffix=".tmp")

    assert target.read_text() == "fresh\n"
    assert not (tmp_path / "doc.txt.tmp").exists()
    assert sorted(os.listdir(tmp_path)) == ["doc.txt"]


def test_failed_write_keeps_original(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("keep me\n")

    def broken_fsync(fd: int) -> None:
        raise OSError(5, "Input/output error")

    monkeypatch.setattr(storage.os, "fsync", broken_fsync)

    with pytest.raises(OSError):
        save_lines(str(target), ["never", "lands"])

    assert target.read_text() == "keep me\n"
    assert not (tmp_path / "doc.txt.swp").exists()


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_lines(str(tmp_path / "absent.txt"))


def test_load_rejects_undecodable_bytes(tmp_path: Path) -> None:
    target = tmp_path / "latin1.txt"
    target.write_bytes(b"caf\xe9\n")

    with pytest.raises(FileDecodeError) as excinfo:
        load_lines(str(target))

    assert excinfo.value.path == str(target)
    assert "cannot decode as utf-8" in str(excinfo.value)
