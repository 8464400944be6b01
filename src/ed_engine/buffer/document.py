"""Line storage with 1-indexed addressing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence

from .validation import AddressOutOfRange, ensure_line


@dataclass(slots=True)
class LineBuffer:
    """Ordered, mutable sequence of text lines.

    Callers always speak in 1-indexed line numbers; ``_lines`` is a plain
    0-indexed list and every method does the translation itself.
    """

    _lines: List[str] = field(default_factory=list)
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineBuffer":
        return cls(_lines=list(lines))

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        return cls(_lines=text.splitlines())

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))

    @property
    def last_line(self) -> int:
        return len(self._lines)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def line(self, number: int) -> str:
        ensure_line(number, self.last_line)
        return self._lines[number - 1]

    def lines(self, lower: int, upper: int) -> Sequence[str]:
        """Lines ``lower..upper`` inclusive, silently clipped at the end."""

        if lower < 1:
            raise AddressOutOfRange(f"line {lower} is out of range", line=lower)
        return tuple(self._lines[lower - 1 : upper])

    def insert(self, number: int, text: str) -> None:
        """Insert ``text`` so that it becomes line ``number``."""

        if number < 1 or number > self.last_line + 1:
            raise AddressOutOfRange(f"cannot insert at line {number}", line=number)
        self._lines.insert(number - 1, text)
        self._touch()

    def delete(self, lower: int, upper: int) -> int:
        """Delete lines ``lower..upper``; indices past the end are skipped.

        Returns the number of lines removed.
        """

        if lower < 1:
            raise AddressOutOfRange(f"line {lower} is out of range", line=lower)
        removed = len(self._lines[lower - 1 : upper])
        if removed:
            del self._lines[lower - 1 : upper]
            self._touch()
        return removed

    def extract(self, lower: int, upper: int) -> List[str]:
        ensure_line(lower, self.last_line)
        ensure_line(upper, self.last_line)
        taken = self._lines[lower - 1 : upper]
        del self._lines[lower - 1 : upper]
        self._touch()
        return taken

    def splice(self, after: int, lines: Sequence[str]) -> None:
        """Place ``lines`` after line ``after`` (0 means the top)."""

        ensure_line(after, self.last_line, allow_zero=True)
        self._lines[after:after] = list(lines)
        self._touch()

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True
