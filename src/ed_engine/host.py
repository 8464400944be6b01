"""Wiring helpers for hosts that embed the engine."""

from __future__ import annotations

from typing import Iterable, Optional

from ed_engine.buffer import EditorState
from ed_engine.modes import CommandMode, InsertMode, ModeBus, ModeContext, ModeManager
from ed_engine.runtime import EngineSettings


def create_default_manager(
    lines: Iterable[str] = (),
    *,
    settings: Optional[EngineSettings] = None,
    name: str = "default",
    current_line: int = 1,
) -> ModeManager:
    """Build a ModeManager with Normal and Insert modes over ``lines``."""

    state = EditorState.from_lines(lines, current_line=current_line, name=name)
    context = ModeContext(
        state=state,
        bus=ModeBus(),
        settings=settings or EngineSettings.from_env(),
    )
    manager = ModeManager(context)
    manager.register_mode(CommandMode)
    manager.register_mode(InsertMode)
    return manager


__all__ = ["create_default_manager"]
