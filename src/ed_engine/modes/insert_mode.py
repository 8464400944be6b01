"""Insert mode: collect raw lines until the lone terminator."""

from __future__ import annotations

from ed_engine.actions import feed_insert_line
from ed_engine.buffer import EditorMode

from .base_mode import Mode, ModeContext, ModeResult


class InsertMode(Mode):
    name = EditorMode.INSERT.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._inserted = 0

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._inserted = 0

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.context.bus.emit("insert.end", self._inserted)

    def handle_line(self, line: str) -> ModeResult:
        outcome = feed_insert_line(
            line,
            self.context.state,
            terminator=self.context.settings.insert_terminator,
        )
        if not outcome.inserted:
            return ModeResult(
                consumed=True,
                switch_to=EditorMode.NORMAL.value,
                status="insert_end",
                message=f"{self._inserted} line(s)",
            )

        self._inserted += 1
        self.context.bus.emit("insert.line", line)
        return ModeResult(consumed=True, status="insert_line")
