from __future__ import annotations

import pytest

from lined.buffer import LineRange
from lined.commands import (
    CommandParser,
    CommandRef,
    CommandRegistry,
    is_command_line,
    strip_sentinel,
)
from lined.commands.defaults import load_default_commands
from lined.errors import CommandSyntaxError, UnknownCommandError


def make_parser(*, sentinel: str = ".") -> CommandParser:
    registry = load_default_commands(CommandRegistry())
    return CommandParser(registry, sentinel=sentinel)


def test_strip_sentinel_keeps_lone_sentinel() -> None:
    assert strip_sentinel(".p") == "p"
    assert strip_sentinel("..") == "."
    assert strip_sentinel(".") == "."
    assert strip_sentinel(":w", ":") == "w"


def test_is_command_line() -> None:
    assert is_command_line(".p")
    assert is_command_line(".")
    assert not is_command_line("plain text")
    assert not is_command_line("")


def test_bare_sentinel_leaves_append_mode() -> None:
    parser = make_parser()

    command = parser.parse(".", 3)

    assert command.letter == "."
    assert command.line_range == LineRange(0, 3)


def test_bare_sentinel_wins_over_registered_letter() -> None:
    parser = make_parser(sentinel=":")
    parser.registry.register(CommandRef(letter=":", handler=lambda *args: None))

    command = parser.parse(":", 2)

    assert command.letter == "."


def test_parse_line_strips_the_sentinel() -> None:
    parser = make_parser()

    assert parser.parse_line(".", 0).letter == "."
    assert parser.parse_line("..", 0).letter == "."
    assert parser.parse_line(".p", 0).letter == "p"


def test_letter_only_command_addresses_whole_buffer() -> None:
    parser = make_parser()

    command = parser.parse("p", 3)

    assert command.letter == "p"
    assert command.args == ("1", "4")
    assert command.line_range == LineRange(0, 3)
    assert command.free_args == ()


def test_letter_command_collects_tokens() -> None:
    parser = make_parser()

    command = parser.parse("w   notes.txt  extra ", 0)

    assert command.args == ("1", "1", "notes.txt", "extra")
    assert command.free_args == ("notes.txt", "extra")


def test_address_prefix_is_encoded_one_based() -> None:
    parser = make_parser()

    single = parser.parse("2p", 3)
    ranged = parser.parse("1,2p trailing", 3)

    assert single.args == ("2", "3")
    assert single.line_range == LineRange(1, 2)
    assert ranged.args == ("1", "3", "trailing")
    assert ranged.line_range == LineRange(0, 2)


def test_comma_and_anchor_start_address_forms() -> None:
    parser = make_parser()

    assert parser.parse(",2p", 5).line_range == LineRange(0, 2)
    assert parser.parse("^,$p", 5).line_range == LineRange(0, 5)
    assert parser.parse("^+1,$-1p", 5).line_range == LineRange(0, 4)


def test_command_is_bound_to_registered_handler() -> None:
    parser = make_parser()

    command = parser.parse("q", 0)

    assert command.ref is parser.registry.lookup("q")


@pytest.mark.parametrize("text", ["z", "2z", "1,2Z"])
def test_unregistered_letter_is_unknown_command(text: str) -> None:
    parser = make_parser()

    with pytest.raises(UnknownCommandError) as info:
        parser.parse(text, 3)

    assert str(info.value) == "unknown command"
    assert info.value.letter == text[-1]


@pytest.mark.parametrize("text", ["", "#", "12", "1,2", "2 p", "$p", "-1p", "1,^"])
def test_malformed_lines_are_syntax_errors(text: str) -> None:
    parser = make_parser()

    with pytest.raises(CommandSyntaxError):
        parser.parse(text, 3)


def test_syntax_error_message() -> None:
    parser = make_parser()

    with pytest.raises(CommandSyntaxError, match="syntax error"):
        parser.parse("#", 3)
