from __future__ import annotations

from typing import Iterable, cast

import pytest

from ed_engine.actions import (
    UnsupportedCommandError,
    execute,
    feed_insert_line,
)
from ed_engine.buffer import AddressOutOfRange, EditorMode, EditorState
from ed_engine.grammar import Command, parse_command

ORIGINAL = ("L1", "L2", "L3", "L4", "L5")


def make_state(
    *, current_line: int = 1, lines: Iterable[str] = ORIGINAL
) -> EditorState:
    return EditorState.from_lines(lines, current_line=current_line)


def run(state: EditorState, text: str):
    return execute(parse_command(text), state)


def type_lines(state: EditorState, *lines: str) -> None:
    for text in lines:
        feed_insert_line(text, state)


def assert_cursor_in_range(state: EditorState) -> None:
    assert 1 <= state.current_line <= state.last_line + 1


def test_print_range_emits_lines_and_moves_cursor() -> None:
    state = make_state()

    outcome = run(state, "2,4p")

    assert outcome.output == ("L2", "L3", "L4")
    assert outcome.mode is EditorMode.NORMAL
    assert state.current_line == 4
    assert state.buffer.snapshot() == ORIGINAL


def test_print_defaults_to_whole_buffer() -> None:
    state = make_state(current_line=2)

    outcome = run(state, "p")

    assert outcome.output == ORIGINAL
    assert state.current_line == 5


def test_print_clips_at_buffer_end() -> None:
    state = make_state()

    assert run(state, "3,9p").output == ("L3", "L4", "L5")
    assert state.current_line == 5
    assert run(state, "7,8p").output == ()
    assert_cursor_in_range(state)


@pytest.mark.parametrize("text", ["0p", "-3,2p", "4,2p"])
def test_print_rejects_bad_lower_bounds(text: str) -> None:
    state = make_state(current_line=3)

    with pytest.raises(AddressOutOfRange):
        run(state, text)

    assert state.current_line == 3
    assert state.mode is EditorMode.NORMAL


def test_print_on_empty_buffer_is_rejected() -> None:
    with pytest.raises(AddressOutOfRange):
        run(make_state(lines=()), "p")


def test_append_collects_lines_after_current() -> None:
    state = make_state(current_line=1)

    outcome = run(state, "a")
    assert outcome.mode is EditorMode.INSERT
    assert state.current_line == 2

    type_lines(state, "X", "Y", ".")

    assert state.buffer.snapshot() == ("L1", "X", "Y", "L2", "L3", "L4", "L5")
    assert state.mode is EditorMode.NORMAL
    assert state.current_line == 4
    assert state.buffer.line(state.current_line - 1) == "Y"


def test_append_at_line_zero_adds_at_top() -> None:
    state = make_state(current_line=4)

    run(state, "0a")
    type_lines(state, "T", ".")

    assert state.buffer.snapshot()[:2] == ("T", "L1")


def test_append_to_empty_buffer() -> None:
    state = make_state(lines=())

    run(state, "$a")
    type_lines(state, "one", "two", ".")

    assert state.buffer.snapshot() == ("one", "two")
    assert_cursor_in_range(state)


def test_append_past_end_is_clipped() -> None:
    state = make_state()

    run(state, "9a")

    assert state.current_line == 6
    type_lines(state, "tail", ".")
    assert state.buffer.line(6) == "tail"


def test_append_uses_upper_bound_of_range() -> None:
    state = make_state()

    run(state, "1,3a")

    assert state.current_line == 4


def test_append_rejects_negative_address() -> None:
    state = make_state(current_line=1)

    with pytest.raises(AddressOutOfRange):
        run(state, ".-3a")

    assert state.mode is EditorMode.NORMAL


def test_change_replaces_range() -> None:
    state = make_state()

    outcome = run(state, "2,3c")
    assert outcome.mode is EditorMode.INSERT
    type_lines(state, "Z", ".")

    assert state.buffer.snapshot() == ("L1", "Z", "L4", "L5")
    assert len(state.buffer) == 4


def test_change_defaults_to_current_line() -> None:
    state = make_state(current_line=3)

    run(state, "c")
    type_lines(state, "new3", ".")

    assert state.buffer.snapshot() == ("L1", "L2", "new3", "L4", "L5")


def test_change_skips_lines_past_end() -> None:
    state = make_state()

    run(state, "4,9c")
    type_lines(state, "N", ".")

    assert state.buffer.snapshot() == ("L1", "L2", "L3", "N")


def test_change_rejects_line_zero_without_touching_buffer() -> None:
    state = make_state(current_line=2)

    with pytest.raises(AddressOutOfRange):
        run(state, "0c")

    assert state.buffer.snapshot() == ORIGINAL
    assert state.current_line == 2
    assert state.mode is EditorMode.NORMAL


def test_insert_goes_before_addressed_line() -> None:
    state = make_state()

    run(state, "2i")
    type_lines(state, "A", ".")

    assert state.buffer.snapshot() == ("L1", "A", "L2", "L3", "L4", "L5")


def test_insert_at_zero_behaves_like_one() -> None:
    state = make_state(current_line=3)

    run(state, "0i")
    type_lines(state, "first", ".")

    assert state.buffer.line(1) == "first"


def test_move_line_after_target() -> None:
    state = make_state()

    run(state, "2m4")

    assert state.buffer.snapshot() == ("L1", "L3", "L4", "L2", "L5")
    assert state.current_line == 4


def test_move_range_to_top() -> None:
    state = make_state()

    run(state, "4,5m0")

    assert state.buffer.snapshot() == ("L4", "L5", "L1", "L2", "L3")
    assert state.current_line == 2


def test_move_onto_itself_is_a_no_op() -> None:
    state = make_state()

    run(state, "2m2")

    assert state.buffer.snapshot() == ORIGINAL
    assert state.current_line == 2


@pytest.mark.parametrize("text", ["2,4m3", "2m9", "0m1", "7m1"])
def test_move_rejects_bad_addresses(text: str) -> None:
    state = make_state()

    with pytest.raises(AddressOutOfRange):
        run(state, text)

    assert state.buffer.snapshot() == ORIGINAL


def test_unknown_command_is_reported() -> None:
    with pytest.raises(UnsupportedCommandError):
        execute(cast(Command, "2d"), make_state())


def test_execute_requires_normal_mode() -> None:
    state = make_state()
    run(state, "a")

    with pytest.raises(RuntimeError):
        run(state, "p")


def test_feed_insert_line_requires_insert_mode() -> None:
    with pytest.raises(RuntimeError):
        feed_insert_line("text", make_state())


def test_terminator_is_not_inserted() -> None:
    state = make_state()
    run(state, "$a")

    outcome = feed_insert_line(".", state)

    assert outcome.inserted is False
    assert outcome.mode is EditorMode.NORMAL
    assert state.buffer.snapshot() == ORIGINAL


@pytest.mark.parametrize(
    "script",
    [
        ["a", "x", "."],
        ["$a", "."],
        ["2,3c", "."],
        ["1,5c", "."],
        ["p"],
        ["3,9p"],
        ["$i", "y", "."],
        ["1,5m5"],
    ],
)
def test_cursor_invariant_holds_after_each_command(script: list[str]) -> None:
    state = make_state(current_line=3)

    for line in script:
        if state.mode is EditorMode.INSERT:
            feed_insert_line(line, state)
        else:
            run(state, line)
        assert_cursor_in_range(state)
