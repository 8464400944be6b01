"""Textual adapter that wires ModeManager results into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable

from ed_engine.modes import ModeResult
from ed_engine.modes.mode_manager import ModeManager


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    write_output: Callable[[Iterable[str]], None]
    update_status: Callable[[str], None] = _noop
    update_prompt: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEdAdapter:
    """Bridges submitted input lines and bus events to a Textual surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_prompt()

    @property
    def prompt(self) -> str:
        # Insert mode reads raw text with no prompt.
        if self.manager.prompting_for_text:
            return ""
        return self.manager.context.settings.prompt

    def submit_line(self, line: str) -> ModeResult:
        """Dispatch one line typed by the user and push results to the UI."""

        self._log_state("line ->", line=line)
        result = self.manager.handle_line(line)
        if result.output:
            self.hooks.write_output(result.output)
        self.hooks.update_status(result.message or result.status)
        self._refresh_prompt()
        self._log_state(
            "result <-",
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "command.submit",
            "command.output",
            "command.error",
            "insert.line",
            "insert.end",
            "mode.switch",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_prompt(self) -> None:
        self.hooks.update_prompt(self.prompt)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        state = self.manager.context.state
        return {
            "mode": state.mode.value,
            "current_line": state.current_line,
            "lines": state.last_line,
            "buffer": state.name,
            "buffer_version": state.buffer.version,
        }


__all__ = ["TextualEdAdapter", "TextualUIHooks"]
