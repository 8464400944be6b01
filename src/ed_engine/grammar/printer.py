"""Render parsed addresses and commands back to canonical ed text."""

from __future__ import annotations

from typing import Optional

from .models import (
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
)

_COMMAND_LETTERS = {
    Append: "a",
    Insert: "i",
    Change: "c",
    PrintNoLines: "p",
    Move: "m",
}


def format_position(position: AddressPosition) -> str:
    if position.kind is PositionKind.CURRENT_LINE:
        return "."
    if position.kind is PositionKind.LAST_LINE:
        return "$"
    if position.kind is PositionKind.LINE:
        return str(position.number)
    return ""


def format_singular(addr: Optional[SingularAddress]) -> str:
    if addr is None:
        return ""
    text = format_position(addr.position)
    if addr.offset:
        text += f"{addr.offset:+d}"
    return text


def format_address(addr: Address) -> str:
    if isinstance(addr, Singular):
        return format_singular(addr.addr)
    if isinstance(addr, AbsoluteRange):
        return f"{format_singular(addr.first)},{format_singular(addr.second)}"
    if isinstance(addr, RelativeRange):
        return f"{format_singular(addr.first)};{format_singular(addr.second)}"
    raise TypeError(f"not an address: {addr!r}")


def format_command(command: Command) -> str:
    letter = _COMMAND_LETTERS.get(type(command))
    if letter is None:
        raise TypeError(f"not a command: {command!r}")
    if isinstance(command, Insert):
        return format_singular(command.addr) + letter
    if isinstance(command, Move):
        return format_address(command.prev_addr) + letter + format_singular(command.addr)
    return format_address(command.addr) + letter


__all__ = ["format_position", "format_singular", "format_address", "format_command"]
