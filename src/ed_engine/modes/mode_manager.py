"""Mode manager routing input lines to the Normal or Insert pipeline."""

from __future__ import annotations

from typing import Dict, Optional, Type

from ed_engine.buffer import EditorMode
from ed_engine.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult


class ModeManager:
    """Owns the registered modes and dispatches one line at a time.

    The active mode is always the one named by ``context.state.mode``; the
    executor flips that field and the manager runs the exit/enter hooks.
    """

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self.context.extras.setdefault("mode_manager", self)

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._modes.get(self.context.state.mode.value)

    @property
    def prompting_for_text(self) -> bool:
        return self.context.state.mode is EditorMode.INSERT

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if mode.name == self.context.state.mode.value:
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        self.context.state.mode = EditorMode(name)
        self._transition(previous)

    def handle_line(self, line: str) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError(
                f"No mode registered for '{self.context.state.mode.value}'"
            )
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={
                "mode": mode.name,
                "current_line": self.context.state.current_line,
            },
        ):
            result = mode.handle_line(line)
        self._transition(mode)
        return result

    def _transition(self, previous: Optional[Mode]) -> None:
        current = self.active_mode
        if current is None:
            raise RuntimeError(
                f"No mode registered for '{self.context.state.mode.value}'"
            )
        if previous is current:
            return
        if previous is not None:
            previous.on_exit(current.name)
        current.on_enter(previous.name if previous else None)
        self.context.bus.emit("mode.switch", current.name)
        telemetry.record_event("mode.switch", data={"mode": current.name})
