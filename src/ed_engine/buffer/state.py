"""Cursor and mode state owned by the command executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from .document import LineBuffer


class EditorMode(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"


@dataclass(slots=True)
class EditorState:
    """Mutable editor state: buffer, 1-indexed current line and mode.

    While in ``INSERT`` mode ``current_line`` is the insertion point: the
    next typed line becomes that line number.
    """

    buffer: LineBuffer = field(default_factory=LineBuffer)
    current_line: int = 1
    mode: EditorMode = EditorMode.NORMAL
    name: str = "default"

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], *, current_line: int = 1, name: str = "default"
    ) -> "EditorState":
        return cls(
            buffer=LineBuffer.from_lines(lines), current_line=current_line, name=name
        )

    @property
    def last_line(self) -> int:
        return self.buffer.last_line

    def set_current_line(self, line: int) -> None:
        """Store ``line`` clamped to ``[1, last_line + 1]``."""

        self.current_line = min(max(line, 1), self.last_line + 1)
