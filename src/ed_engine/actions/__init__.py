"""Command execution and insert-mode feeding."""

from .core import (
    INSERT_TERMINATOR,
    ExecutionOutcome,
    ModeOutcome,
    enter_insert_mode,
    feed_insert_line,
)
from .command import (
    CURRENT_LINE_DEFAULT,
    WHOLE_BUFFER_DEFAULT,
    UnsupportedCommandError,
    execute,
)

__all__ = [
    "INSERT_TERMINATOR",
    "ExecutionOutcome",
    "ModeOutcome",
    "enter_insert_mode",
    "feed_insert_line",
    "CURRENT_LINE_DEFAULT",
    "WHOLE_BUFFER_DEFAULT",
    "UnsupportedCommandError",
    "execute",
]
