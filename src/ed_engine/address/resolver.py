"""Turn parsed addresses into concrete 1-indexed line numbers.

Everything here is a pure function of the address, the command's default
address and the editor state. No clamping happens at this layer: a result
may be 0, negative or past the end, and the executor decides what that
means for each command.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ed_engine.buffer import EditorState
from ed_engine.grammar.models import (
    CURRENT_LINE,
    AbsoluteRange,
    Address,
    AddressPosition,
    PositionKind,
    RelativeRange,
    Singular,
    SingularAddress,
)

LineRange = Tuple[int, int]

# Anchor for an offset-only displacement such as the ``+3`` in ``4;+3``.
ORIGIN = AddressPosition.line(0)


class UnresolvedDefaultError(ValueError):
    """A ``Default`` position reached resolution without substitution."""


def resolve_position(position: AddressPosition, state: EditorState) -> int:
    if position.kind is PositionKind.CURRENT_LINE:
        return state.current_line
    if position.kind is PositionKind.LAST_LINE:
        return state.last_line
    if position.kind is PositionKind.LINE:
        return int(position.number or 0)
    raise UnresolvedDefaultError(
        "default position must be substituted before resolution"
    )


def resolve_singular(addr: SingularAddress, state: EditorState) -> int:
    return resolve_position(addr.position, state) + addr.offset


def substitute_default(
    addr: Optional[SingularAddress],
    fallback: SingularAddress,
    *,
    anchor: AddressPosition = CURRENT_LINE,
) -> SingularAddress:
    """Replace the unspecified parts of ``addr``.

    An omitted or empty address becomes ``fallback``. An offset typed without
    an anchor (``+2``) is applied to ``anchor`` instead.
    """

    if addr is None or addr.is_empty:
        return fallback
    if addr.position.is_default:
        return SingularAddress(anchor, addr.offset)
    return addr


def default_halves(default: Address) -> Tuple[SingularAddress, SingularAddress]:
    """Split a command's default address into its two endpoints."""

    if isinstance(default, Singular):
        if default.addr is None or default.addr.position.is_default:
            raise UnresolvedDefaultError("a default address must be concrete")
        return default.addr, default.addr
    if isinstance(default, (AbsoluteRange, RelativeRange)):
        if default.first is None or default.second is None:
            raise UnresolvedDefaultError("a default range needs both endpoints")
        return default.first, default.second
    raise TypeError(f"not an address: {default!r}")


def resolve_endpoint(
    addr: Optional[SingularAddress], fallback: SingularAddress, state: EditorState
) -> int:
    return resolve_singular(substitute_default(addr, fallback), state)


def resolve_range(addr: Address, default: Address, state: EditorState) -> LineRange:
    """Resolve ``addr`` to ``(lower, upper)`` using ``default`` for gaps.

    * ``Singular``: both bounds are the one resolved line; an omitted
      address is the whole of ``default`` (bare ``p`` prints ``1,$``).
    * ``AbsoluteRange``: each endpoint against its own half of ``default``;
      the order is kept as typed.
    * ``RelativeRange``: the second endpoint is a displacement added to the
      first. When omitted it falls back to the *first* half of ``default``.
    """

    first_default, second_default = default_halves(default)

    if isinstance(addr, Singular):
        if addr.addr is None or addr.addr.is_empty:
            return (
                resolve_singular(first_default, state),
                resolve_singular(second_default, state),
            )
        line = resolve_endpoint(addr.addr, first_default, state)
        return line, line

    if isinstance(addr, AbsoluteRange):
        return (
            resolve_endpoint(addr.first, first_default, state),
            resolve_endpoint(addr.second, second_default, state),
        )

    if isinstance(addr, RelativeRange):
        first = resolve_endpoint(addr.first, first_default, state)
        delta = resolve_singular(
            substitute_default(addr.second, first_default, anchor=ORIGIN), state
        )
        return first, first + delta

    raise TypeError(f"not an address: {addr!r}")


__all__ = [
    "LineRange",
    "ORIGIN",
    "UnresolvedDefaultError",
    "default_halves",
    "resolve_endpoint",
    "resolve_position",
    "resolve_range",
    "resolve_singular",
    "substitute_default",
]
