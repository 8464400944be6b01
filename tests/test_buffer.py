from __future__ import annotations

import pytest

from ed_engine.buffer import (
    AddressOutOfRange,
    EditorMode,
    EditorState,
    LineBuffer,
    ensure_line,
    ensure_lower_bound,
)


def make_buffer(count: int = 5) -> LineBuffer:
    return LineBuffer.from_lines(f"L{n}" for n in range(1, count + 1))


def test_one_indexed_access() -> None:
    buffer = make_buffer()

    assert len(buffer) == 5
    assert buffer.line(1) == "L1"
    assert buffer.line(5) == "L5"
    with pytest.raises(AddressOutOfRange):
        buffer.line(0)
    with pytest.raises(AddressOutOfRange):
        buffer.line(6)


def test_lines_clip_silently_at_end() -> None:
    buffer = make_buffer()

    assert buffer.lines(2, 4) == ("L2", "L3", "L4")
    assert buffer.lines(4, 99) == ("L4", "L5")
    assert buffer.lines(7, 9) == ()
    with pytest.raises(AddressOutOfRange):
        buffer.lines(0, 2)


def test_insert_makes_text_the_given_line() -> None:
    buffer = make_buffer(2)

    buffer.insert(1, "top")
    buffer.insert(4, "bottom")

    assert buffer.snapshot() == ("top", "L1", "L2", "bottom")
    assert buffer.version == 2
    assert buffer.dirty is True
    with pytest.raises(AddressOutOfRange):
        buffer.insert(6, "gap")


def test_delete_skips_indices_past_end() -> None:
    buffer = make_buffer()

    assert buffer.delete(4, 9) == 2
    assert buffer.snapshot() == ("L1", "L2", "L3")
    assert buffer.delete(7, 8) == 0
    assert buffer.version == 1


def test_extract_and_splice() -> None:
    buffer = make_buffer()

    moved = buffer.extract(2, 3)
    buffer.splice(0, moved)

    assert buffer.snapshot() == ("L2", "L3", "L1", "L4", "L5")
    with pytest.raises(AddressOutOfRange):
        buffer.splice(9, ["x"])


def test_from_text_and_iteration() -> None:
    buffer = LineBuffer.from_text("one\ntwo\n")

    assert list(buffer) == ["one", "two"]
    assert LineBuffer.from_text("").last_line == 0


def test_state_clamps_current_line() -> None:
    state = EditorState.from_lines(["a", "b"])

    state.set_current_line(0)
    assert state.current_line == 1
    state.set_current_line(10)
    assert state.current_line == 3
    assert state.mode is EditorMode.NORMAL


def test_validation_helpers() -> None:
    assert ensure_line(0, 3, allow_zero=True) == 0
    with pytest.raises(AddressOutOfRange):
        ensure_line(0, 3)
    with pytest.raises(AddressOutOfRange) as info:
        ensure_lower_bound(4, 2)
    assert info.value.bounds == (4, 2)
    ensure_lower_bound(0, 0, allow_zero=True)
