from __future__ import annotations

import pytest

from lined.buffer import LineRange
from lined.commands import ScanCursor, resolve_address, resolve_range
from lined.errors import AddressError, CommandSyntaxError


@pytest.mark.parametrize("text", ["p", ",p", "q 12"])
def test_bare_address_resolves_to_zero(text: str) -> None:
    cursor = ScanCursor(text)

    assert resolve_address(cursor, 5) == 0
    assert cursor.position == 0


def test_digits_are_accumulated_and_consumed() -> None:
    cursor = ScanCursor("123p")

    assert resolve_address(cursor, 3) == 123
    assert cursor.rest() == "p"


@pytest.mark.parametrize("length", [0, 1, 7, 1000])
def test_last_line_anchor_equals_buffer_length(length: int) -> None:
    assert resolve_address(ScanCursor("$p"), length) == length
    assert resolve_address(ScanCursor("$-1p"), length) == length - 1
    assert resolve_address(ScanCursor("$+2p"), length) == length + 2


def test_first_line_anchor_and_signs() -> None:
    assert resolve_address(ScanCursor("^p"), 9) == 0
    assert resolve_address(ScanCursor("^+1p"), 9) == 1
    assert resolve_address(ScanCursor("^-3p"), 9) == -3
    assert resolve_address(ScanCursor("+4p"), 9) == 4
    assert resolve_address(ScanCursor("-4p"), 9) == -4


def test_only_ascii_digits_are_consumed() -> None:
    cursor = ScanCursor("٣p")

    assert resolve_address(cursor, 3) == 0
    assert cursor.peek() == "٣"


@pytest.mark.parametrize("text", ["", "$", "^", "1,$"])
def test_exhausted_input_fails_instead_of_crashing(text: str) -> None:
    cursor = ScanCursor(text)

    with pytest.raises(AddressError) as info:
        resolve_range(cursor, 3)

    assert isinstance(info.value, CommandSyntaxError)
    assert info.value.position == len(text)


def test_single_address_is_one_line_range() -> None:
    cursor = ScanCursor("2p")

    assert resolve_range(cursor, 3) == LineRange(1, 2)
    assert cursor.peek() == "p"


def test_explicit_range_includes_end_line() -> None:
    assert resolve_range(ScanCursor("1,2p"), 3) == LineRange(0, 2)
    assert resolve_range(ScanCursor("^,$p"), 3) == LineRange(0, 3)
    assert resolve_range(ScanCursor(",$-1p"), 3) == LineRange(0, 2)


def test_missing_start_defaults_to_first_line() -> None:
    assert resolve_range(ScanCursor(",2p"), 5) == LineRange(0, 2)


def test_out_of_bounds_values_are_clamped() -> None:
    assert resolve_range(ScanCursor("5p"), 3) == LineRange(3, 3)
    assert resolve_range(ScanCursor("2,99p"), 3) == LineRange(1, 3)
    assert resolve_range(ScanCursor("0p"), 3) == LineRange(0, 0)


def test_reversed_range_collapses_to_empty() -> None:
    assert resolve_range(ScanCursor("3,1p"), 3) == LineRange(2, 2)


def test_empty_buffer_yields_empty_range() -> None:
    assert resolve_range(ScanCursor("1,5p"), 0) == LineRange(0, 0)
    assert resolve_range(ScanCursor("$p"), 0) == LineRange(0, 0)


@pytest.mark.parametrize(
    "text",
    [
        "1p",
        "0p",
        "99p",
        "^-5p",
        "$+5p",
        "-3,-1p",
        "4,2p",
        "1,99999999999999999999p",
        ",p",
        "^,$p",
        "$-10,$+10p",
    ],
)
@pytest.mark.parametrize("length", [0, 1, 3, 10])
def test_resolved_range_stays_within_buffer(text: str, length: int) -> None:
    line_range = resolve_range(ScanCursor(text), length)

    assert 0 <= line_range.start <= line_range.end <= length
