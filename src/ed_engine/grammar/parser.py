"""LALR grammar for ed command lines and the transformer that builds models."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
    VisitError,
)

from .models import (
    CURRENT_LINE,
    DEFAULT,
    LAST_LINE,
    AbsoluteRange,
    Address,
    AddressPosition,
    Append,
    Change,
    Command,
    Insert,
    Move,
    PrintNoLines,
    RelativeRange,
    Singular,
    SingularAddress,
)

# Largest literal accepted anywhere in an address (signed 64-bit range).
MAX_LINE_NUMBER = 2**63 - 1

GRAMMAR = r"""
    start: address _APPEND               -> append
         | singular _INSERT              -> insert
         | address _CHANGE               -> change
         | address _PRINT                -> print_no_lines
         | address _MOVE singular        -> move

    address: singular                    -> singular_address
           | singular _COMMA singular     -> absolute_range
           | singular _SEMICOLON singular -> relative_range

    singular: [position] offset*

    position: _DOT                       -> current_line
            | _DOLLAR                    -> last_line
            | DECIMAL                    -> line

    offset: SIGN [DECIMAL]

    SIGN: "+" | "-"
    DECIMAL: /[0-9][0-9_]*/

    _DOT: "."
    _DOLLAR: "$"
    _COMMA: ","
    _SEMICOLON: ";"
    _APPEND: "a"
    _INSERT: "i"
    _CHANGE: "c"
    _PRINT: "p"
    _MOVE: "m"
"""

_TOKEN_LABELS = {
    "DECIMAL": "line number",
    "SIGN": "'+' or '-'",
    "_DOT": "'.'",
    "_DOLLAR": "'$'",
    "_COMMA": "','",
    "_SEMICOLON": "';'",
    "_APPEND": "'a'",
    "_INSERT": "'i'",
    "_CHANGE": "'c'",
    "_PRINT": "'p'",
    "_MOVE": "'m'",
    "$END": "end of line",
}


class ParseError(ValueError):
    """Raised when a line is not a complete, valid command."""

    def __init__(
        self,
        message: str,
        *,
        text: str,
        column: int,
        expected: Iterable[str] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.text = text
        self.column = column
        self.expected = tuple(sorted(set(expected)))

    def render(self, verbose: bool = False, *, marker: str = "?") -> str:
        """Return the terse ``marker`` or, when ``verbose``, the diagnostic."""

        if not verbose:
            return marker
        lines = [
            f"{self.message} at column {self.column + 1}:",
            self.text,
            " " * self.column + "^",
        ]
        if self.expected:
            lines.append("expected one of: " + ", ".join(self.expected))
        return "\n".join(lines)


class _LiteralOverflow(ValueError):
    def __init__(self, token: Token) -> None:
        super().__init__(f"numeric literal {token!s} is too large")
        self.token = token


def _decimal(token: Token) -> int:
    value = int(str(token).replace("_", ""))
    if value > MAX_LINE_NUMBER:
        raise _LiteralOverflow(token)
    return value


@v_args(inline=True)
class CommandBuilder(Transformer):
    """Fold the parse tree into ``grammar.models`` values."""

    def current_line(self) -> AddressPosition:
        return CURRENT_LINE

    def last_line(self) -> AddressPosition:
        return LAST_LINE

    def line(self, token: Token) -> AddressPosition:
        return AddressPosition.line(_decimal(token))

    def offset(self, sign: Token, digits: Optional[Token]) -> int:
        magnitude = 1 if digits is None else _decimal(digits)
        return -magnitude if str(sign) == "-" else magnitude

    def singular(
        self, position: Optional[AddressPosition], *offsets: int
    ) -> SingularAddress:
        total = sum(offsets)
        if abs(total) > MAX_LINE_NUMBER:
            raise _LiteralOverflow(Token("SIGN", str(total)))
        return SingularAddress(position=position or DEFAULT, offset=total)

    def singular_address(self, addr: SingularAddress) -> Address:
        return Singular(addr)

    def absolute_range(
        self, first: SingularAddress, second: SingularAddress
    ) -> Address:
        return AbsoluteRange(first, second)

    def relative_range(
        self, first: SingularAddress, second: SingularAddress
    ) -> Address:
        return RelativeRange(first, second)

    def append(self, addr: Address) -> Command:
        return Append(addr)

    def insert(self, addr: SingularAddress) -> Command:
        return Insert(addr)

    def change(self, addr: Address) -> Command:
        return Change(addr)

    def print_no_lines(self, addr: Address) -> Command:
        return PrintNoLines(addr)

    def move(self, prev_addr: Address, addr: SingularAddress) -> Command:
        return Move(prev_addr, addr)


_PARSER = Lark(GRAMMAR, parser="lalr", maybe_placeholders=True)
_BUILDER = CommandBuilder()


def _labels(names: Iterable[str]) -> Sequence[str]:
    return [_TOKEN_LABELS.get(name, name) for name in names]


def _error_from_lark(text: str, exc: UnexpectedInput) -> ParseError:
    if isinstance(exc, UnexpectedCharacters):
        return ParseError(
            f"unexpected character {exc.char!r}",
            text=text,
            column=exc.pos_in_stream,
            expected=_labels(exc.allowed or ()),
        )
    if isinstance(exc, UnexpectedToken):
        token = exc.token
        if token.type == "$END":
            message, column = "unexpected end of line", len(text)
        else:
            message = f"unexpected {str(token)!r}"
            column = token.start_pos if token.start_pos is not None else len(text)
        return ParseError(
            message, text=text, column=column, expected=_labels(exc.expected)
        )
    if isinstance(exc, UnexpectedEOF):
        return ParseError(
            "unexpected end of line",
            text=text,
            column=len(text),
            expected=_labels(exc.expected),
        )
    return ParseError(str(exc), text=text, column=len(text))


def parse_command(line: str) -> Command:
    """Parse one complete command line.

    Raises ``ParseError`` when the line does not match the grammar, leaves
    anything unconsumed after the command letter, or holds a numeric literal
    past ``MAX_LINE_NUMBER``.
    """

    try:
        tree = _PARSER.parse(line)
    except UnexpectedInput as exc:
        raise _error_from_lark(line, exc) from exc

    try:
        return _BUILDER.transform(tree)
    except VisitError as exc:
        original = exc.orig_exc
        if isinstance(original, _LiteralOverflow):
            column = original.token.start_pos
            raise ParseError(
                str(original),
                text=line,
                column=column if column is not None else 0,
            ) from original
        raise


__all__ = ["GRAMMAR", "MAX_LINE_NUMBER", "CommandBuilder", "ParseError", "parse_command"]
