from __future__ import annotations

import pytest

from ed_engine.grammar import (
    CURRENT,
    CURRENT_LINE,
    EMPTY,
    LAST,
    AbsoluteRange,
    AddressPosition,
    Append,
    Change,
    Insert,
    Move,
    ParseError,
    PositionKind,
    PrintNoLines,
    RelativeRange,
    Singular,
    SingularAddress,
    parse_command,
)


def line(number: int, offset: int = 0) -> SingularAddress:
    return SingularAddress.at_line(number, offset)


@pytest.mark.parametrize("number", [0, 1, 7, 47, 1000, 2**40])
def test_decimal_append_is_singular_line(number: int) -> None:
    assert parse_command(f"{number}a") == Append(Singular(line(number)))


def test_bare_append_uses_default_position() -> None:
    command = parse_command("a")

    assert isinstance(command, Append)
    assert isinstance(command.addr, Singular)
    assert command.addr.addr is not None
    assert command.addr.addr.position.kind is PositionKind.DEFAULT
    assert command.addr.addr.offset == 0


def test_last_line_and_negative_offset() -> None:
    assert parse_command("$a") == Append(Singular(LAST))
    assert parse_command("30-4a") == Append(Singular(line(30, -4)))


def test_chained_offsets_are_summed() -> None:
    assert parse_command("10+2+3a") == Append(Singular(line(10, 5)))
    assert parse_command(".+2-7p") == PrintNoLines(
        Singular(SingularAddress(CURRENT_LINE, -5))
    )


def test_bare_sign_means_one() -> None:
    assert parse_command(".+a") == Append(Singular(SingularAddress(CURRENT_LINE, 1)))
    assert parse_command("--p") == PrintNoLines(
        Singular(SingularAddress(offset=-2))
    )


def test_underscore_separators_are_ignored() -> None:
    assert parse_command("1_000a") == Append(Singular(line(1000)))
    assert parse_command("1__2_p") == PrintNoLines(Singular(line(12)))


def test_absolute_range_beats_singular_prefix() -> None:
    assert parse_command("10,5p") == PrintNoLines(AbsoluteRange(line(10), line(5)))
    assert parse_command("2,4c") == Change(AbsoluteRange(line(2), line(4)))


def test_range_endpoints_may_be_empty() -> None:
    assert parse_command(",p") == PrintNoLines(AbsoluteRange(EMPTY, EMPTY))
    assert parse_command("3,p") == PrintNoLines(AbsoluteRange(line(3), EMPTY))
    assert parse_command(";$a") == Append(RelativeRange(EMPTY, LAST))


def test_relative_range() -> None:
    assert parse_command(".;+5p") == PrintNoLines(
        RelativeRange(CURRENT, SingularAddress(offset=5))
    )


def test_insert_takes_a_singular_address() -> None:
    assert parse_command("3i") == Insert(line(3))
    assert parse_command("i") == Insert(EMPTY)
    with pytest.raises(ParseError):
        parse_command("1,2i")


def test_move_command() -> None:
    assert parse_command("7m$") == Move(Singular(line(7)), LAST)
    assert parse_command("2,3m0") == Move(AbsoluteRange(line(2), line(3)), line(0))
    assert parse_command("m") == Move(Singular(EMPTY), EMPTY)


def test_zero_is_a_valid_line_literal() -> None:
    command = parse_command("0a")

    assert command == Append(Singular(SingularAddress(AddressPosition.line(0))))


@pytest.mark.parametrize(
    "text",
    ["", "x", "2", "2ax", "aa", "2 ,4p", "1,2,3p", "$$a", "2.p", "+-+", "p "],
)
def test_invalid_lines_fail_completely(text: str) -> None:
    with pytest.raises(ParseError):
        parse_command(text)


def test_numeric_overflow_is_a_parse_error() -> None:
    with pytest.raises(ParseError) as info:
        parse_command("99999999999999999999a")

    assert "too large" in str(info.value)


def test_parse_error_renders_terse_marker_by_default() -> None:
    with pytest.raises(ParseError) as info:
        parse_command("2x")

    error = info.value
    assert error.render() == "?"
    assert error.render(marker="!") == "!"
    assert error.column == 1


def test_parse_error_verbose_diagnostic() -> None:
    with pytest.raises(ParseError) as info:
        parse_command("2x")

    rendered = info.value.render(verbose=True)

    assert "column 2" in rendered
    assert "\n2x\n ^" in rendered


def test_parse_error_at_end_of_line() -> None:
    with pytest.raises(ParseError) as info:
        parse_command("1,2")

    assert info.value.column == 3
    assert info.value.text == "1,2"
