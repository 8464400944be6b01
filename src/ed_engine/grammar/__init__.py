"""Command grammar: structured models, the parser and its canonical printer."""

from .models import (
    CURRENT,
    CURRENT_LINE,
    DEFAULT,
    EMPTY,
    LAST,
    LAST_LINE,
    AbsoluteRange,
    Address,
    AddressPosition,
    Append,
    Change,
    Command,
    Insert,
    Move,
    PositionKind,
    PrintNoLines,
    RelativeRange,
    Singular,
    SingularAddress,
    command_name,
)
from .parser import MAX_LINE_NUMBER, ParseError, parse_command
from .printer import format_address, format_command, format_singular

__all__ = [
    "PositionKind",
    "AddressPosition",
    "SingularAddress",
    "Singular",
    "AbsoluteRange",
    "RelativeRange",
    "Address",
    "Append",
    "Insert",
    "Change",
    "PrintNoLines",
    "Move",
    "Command",
    "DEFAULT",
    "CURRENT_LINE",
    "LAST_LINE",
    "EMPTY",
    "CURRENT",
    "LAST",
    "MAX_LINE_NUMBER",
    "ParseError",
    "parse_command",
    "command_name",
    "format_address",
    "format_command",
    "format_singular",
]
