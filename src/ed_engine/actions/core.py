"""Outcome types and insert-mode line feeding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ed_engine.buffer import EditorMode, EditorState
from ed_engine.runtime import telemetry

INSERT_TERMINATOR = "."


@dataclass(frozen=True, slots=True)
class ExecutionOutcome:
    """What a command did: emitted lines plus the mode the driver is now in."""

    mode: EditorMode
    current_line: int
    output: Tuple[str, ...] = ()
    status: str = "ok"


@dataclass(frozen=True, slots=True)
class ModeOutcome:
    mode: EditorMode
    current_line: int
    inserted: bool


def enter_insert_mode(state: EditorState, insertion_point: int) -> None:
    state.set_current_line(insertion_point)
    state.mode = EditorMode.INSERT


def feed_insert_line(
    text: str, state: EditorState, *, terminator: str = INSERT_TERMINATOR
) -> ModeOutcome:
    """Consume one raw line while in insert mode.

    A line equal to ``terminator`` returns to normal mode and is not stored;
    anything else becomes line ``current_line`` and the insertion point moves
    down by one.
    """

    if state.mode is not EditorMode.INSERT:
        raise RuntimeError("feed_insert_line called outside insert mode")

    if text == terminator:
        state.mode = EditorMode.NORMAL
        telemetry.record_event(
            "insert.end",
            level="debug",
            data={"buffer": state.name, "current_line": state.current_line},
        )
        return ModeOutcome(
            mode=state.mode, current_line=state.current_line, inserted=False
        )

    state.buffer.insert(state.current_line, text)
    state.current_line += 1
    return ModeOutcome(mode=state.mode, current_line=state.current_line, inserted=True)


__all__ = [
    "INSERT_TERMINATOR",
    "ExecutionOutcome",
    "ModeOutcome",
    "enter_insert_mode",
    "feed_insert_line",
]
