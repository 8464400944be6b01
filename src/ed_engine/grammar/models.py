"""Structured values produced by the command parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class PositionKind(str, Enum):
    DEFAULT = "default"
    CURRENT_LINE = "current_line"
    LAST_LINE = "last_line"
    LINE = "line"


@dataclass(frozen=True, slots=True)
class AddressPosition:
    """Anchor of a singular address.

    ``DEFAULT`` means nothing was typed; it is replaced by the command's
    contextual default before resolution. ``number`` is only set for ``LINE``.
    """

    kind: PositionKind
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is PositionKind.LINE:
            if self.number is None or self.number < 0:
                raise ValueError("line positions need a non-negative number")
        elif self.number is not None:
            raise ValueError(f"{self.kind.value} positions carry no number")

    @classmethod
    def line(cls, number: int) -> "AddressPosition":
        return cls(PositionKind.LINE, number)

    @property
    def is_default(self) -> bool:
        return self.kind is PositionKind.DEFAULT


DEFAULT = AddressPosition(PositionKind.DEFAULT)
CURRENT_LINE = AddressPosition(PositionKind.CURRENT_LINE)
LAST_LINE = AddressPosition(PositionKind.LAST_LINE)


@dataclass(frozen=True, slots=True)
class SingularAddress:
    """An anchor followed by a signed line offset."""

    position: AddressPosition = DEFAULT
    offset: int = 0

    @property
    def is_empty(self) -> bool:
        """True when the user typed neither an anchor nor an offset."""

        return self.position.is_default and self.offset == 0

    @classmethod
    def at_line(cls, number: int, offset: int = 0) -> "SingularAddress":
        return cls(AddressPosition.line(number), offset)


EMPTY = SingularAddress()
CURRENT = SingularAddress(CURRENT_LINE)
LAST = SingularAddress(LAST_LINE)


@dataclass(frozen=True, slots=True)
class Singular:
    addr: Optional[SingularAddress] = None


@dataclass(frozen=True, slots=True)
class AbsoluteRange:
    """``first,second``: both endpoints resolve independently."""

    first: Optional[SingularAddress] = None
    second: Optional[SingularAddress] = None


@dataclass(frozen=True, slots=True)
class RelativeRange:
    """``first;second``: ``second`` is a displacement from ``first``."""

    first: Optional[SingularAddress] = None
    second: Optional[SingularAddress] = None


Address = Union[Singular, AbsoluteRange, RelativeRange]


@dataclass(frozen=True, slots=True)
class Append:
    addr: Address


@dataclass(frozen=True, slots=True)
class Insert:
    addr: SingularAddress


@dataclass(frozen=True, slots=True)
class Change:
    addr: Address


@dataclass(frozen=True, slots=True)
class PrintNoLines:
    addr: Address


@dataclass(frozen=True, slots=True)
class Move:
    prev_addr: Address
    addr: SingularAddress


Command = Union[Append, Insert, Change, PrintNoLines, Move]


def command_name(command: Command) -> str:
    return type(command).__name__.lower()


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
    "command_name",
]
