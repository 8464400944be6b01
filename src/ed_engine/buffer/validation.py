"""Bounds checks shared by the buffer and the command executor."""

from __future__ import annotations

from typing import Optional, Tuple


class AddressOutOfRange(RuntimeError):
    """Raised when a resolved line number cannot be used for an operation."""

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        bounds: Optional[Tuple[int, int]] = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.bounds = bounds


def ensure_line(line: int, last_line: int, *, allow_zero: bool = False) -> int:
    """Check ``line`` against ``[1, last_line]`` (or ``[0, ...]``)."""

    floor = 0 if allow_zero else 1
    if line < floor or line > last_line:
        raise AddressOutOfRange(f"line {line} is out of range", line=line)
    return line


def ensure_lower_bound(lower: int, upper: int, *, allow_zero: bool = False) -> None:
    """Reject non-positive lower bounds and inverted ranges.

    Upper bounds are not checked here; callers clip them to the buffer end.
    """

    floor = 0 if allow_zero else 1
    if lower < floor:
        raise AddressOutOfRange(
            f"line {lower} is before the start of the buffer",
            line=lower,
            bounds=(lower, upper),
        )
    if lower > upper:
        raise AddressOutOfRange(
            f"range {lower},{upper} is backwards", line=lower, bounds=(lower, upper)
        )
