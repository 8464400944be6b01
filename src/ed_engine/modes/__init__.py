"""Interpreter modes and the manager that dispatches between them."""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .command_mode import CommandMode
from .insert_mode import InsertMode
from .mode_manager import ModeManager

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "CommandMode",
    "InsertMode",
    "ModeManager",
]
