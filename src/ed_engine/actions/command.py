"""Command executor: per-command defaults, bounds policy and buffer effects."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Type

from ed_engine.address import resolve_endpoint, resolve_range
from ed_engine.buffer import (
    AddressOutOfRange,
    EditorMode,
    EditorState,
    ensure_line,
    ensure_lower_bound,
)
from ed_engine.grammar.models import (
    CURRENT,
    LAST,
    AbsoluteRange,
    Address,
    Append,
    Change,
    Command,
    Insert,
    Move,
    PrintNoLines,
    SingularAddress,
    command_name,
)
from ed_engine.runtime import telemetry

from .core import ExecutionOutcome, enter_insert_mode

CommandHandler = Callable[[Any, EditorState], ExecutionOutcome]

CURRENT_LINE_DEFAULT: Address = AbsoluteRange(CURRENT, CURRENT)
WHOLE_BUFFER_DEFAULT: Address = AbsoluteRange(SingularAddress.at_line(1), LAST)


class UnsupportedCommandError(NotImplementedError):
    """The executor has no handler for a parsed command."""

    def __init__(self, command: object) -> None:
        super().__init__(f"command not supported: {command!r}")
        self.command = command


def execute(command: Command, state: EditorState) -> ExecutionOutcome:
    """Run ``command`` against ``state``.

    On ``AddressOutOfRange`` nothing has been changed yet: every handler
    validates its bounds before touching the buffer or the cursor.
    """

    if state.mode is not EditorMode.NORMAL:
        raise RuntimeError("commands can only run in normal mode")

    handler = _COMMAND_HANDLERS.get(type(command))
    if handler is None:
        raise UnsupportedCommandError(command)

    name = command_name(command)
    with telemetry.span(
        f"command::{name}",
        component="executor",
        metadata={"buffer": state.name, "cursor": state.current_line},
    ) as handle:
        outcome = handler(command, state)
        handle.add_metadata("status", outcome.status)
    return outcome


def _outcome(
    state: EditorState, status: str, output: Iterable[str] = ()
) -> ExecutionOutcome:
    return ExecutionOutcome(
        mode=state.mode,
        current_line=state.current_line,
        output=tuple(output),
        status=status,
    )


def _handle_append(command: Append, state: EditorState) -> ExecutionOutcome:
    lower, upper = resolve_range(command.addr, CURRENT_LINE_DEFAULT, state)
    # Line 0 is the slot before the first line ("0a" adds at the top).
    ensure_lower_bound(lower, upper, allow_zero=True)
    enter_insert_mode(state, min(upper, state.last_line) + 1)
    return _outcome(state, "append")


def _handle_insert(command: Insert, state: EditorState) -> ExecutionOutcome:
    line = resolve_endpoint(command.addr, CURRENT, state)
    if line < 0:
        raise AddressOutOfRange(f"line {line} is out of range", line=line)
    enter_insert_mode(state, max(line, 1))
    return _outcome(state, "insert")


def _handle_change(command: Change, state: EditorState) -> ExecutionOutcome:
    lower, upper = resolve_range(command.addr, CURRENT_LINE_DEFAULT, state)
    ensure_lower_bound(lower, upper)
    state.buffer.delete(lower, upper)
    enter_insert_mode(state, lower)
    return _outcome(state, "change")


def _handle_print(command: PrintNoLines, state: EditorState) -> ExecutionOutcome:
    lower, upper = resolve_range(command.addr, WHOLE_BUFFER_DEFAULT, state)
    ensure_lower_bound(lower, upper)
    lines = state.buffer.lines(lower, upper)
    state.set_current_line(min(upper, state.last_line))
    return _outcome(state, "print", output=lines)


def _handle_move(command: Move, state: EditorState) -> ExecutionOutcome:
    lower, upper = resolve_range(command.prev_addr, CURRENT_LINE_DEFAULT, state)
    ensure_lower_bound(lower, upper)
    upper = min(upper, state.last_line)
    if lower > upper:
        raise AddressOutOfRange(
            f"line {lower} is past the end of the buffer",
            line=lower,
            bounds=(lower, upper),
        )
    target = ensure_line(
        resolve_endpoint(command.addr, CURRENT, state),
        state.last_line,
        allow_zero=True,
    )
    if lower <= target < upper:
        raise AddressOutOfRange(
            f"cannot move lines {lower},{upper} after line {target}",
            line=target,
            bounds=(lower, upper),
        )

    moved = state.buffer.extract(lower, upper)
    if target >= upper:
        target -= len(moved)
    state.buffer.splice(target, moved)
    state.set_current_line(target + len(moved))
    return _outcome(state, "move")


_COMMAND_HANDLERS: Dict[Type[object], CommandHandler] = {
    Append: _handle_append,
    Insert: _handle_insert,
    Change: _handle_change,
    PrintNoLines: _handle_print,
    Move: _handle_move,
}


__all__ = [
    "CURRENT_LINE_DEFAULT",
    "WHOLE_BUFFER_DEFAULT",
    "UnsupportedCommandError",
    "execute",
]
