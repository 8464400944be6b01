"""Environment-driven settings shared by the engine and its hosts."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

ENV_PREFIX = "ED_ENGINE_"


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True)
class EngineSettings:
    """Driver-facing knobs.

    ``prompt`` is shown while reading commands (never while collecting insert
    text). ``verbose_errors`` swaps the terse ``?`` marker for the full parse
    diagnostic.
    """

    prompt: str = ""
    verbose_errors: bool = False
    error_marker: str = "?"
    insert_terminator: str = "."

    @classmethod
    def from_env(cls) -> "EngineSettings":
        return cls(
            prompt=env("PROMPT", "") or "",
            verbose_errors=env_flag("VERBOSE_ERRORS", False),
        )


@dataclass(frozen=True, slots=True)
class LogSettings:
    """What the editor session hands to telelog.

    The REPL owns the terminal, so the default level is ``WARNING``: only
    rejected commands reach the console unless more is asked for.
    """

    level: str = "WARNING"
    console: bool = True
    color: bool = True
    json: bool = False
    log_file: str = ""

    @classmethod
    def from_env(cls) -> "LogSettings":
        return cls(
            level=(env("LOG_LEVEL") or "WARNING").upper(),
            console=not env_flag("DISABLE_CONSOLE", False),
            color=not env_flag("NO_COLOR", False),
            json=env_flag("LOG_JSON", False),
            log_file=env("LOG_FILE", "") or "",
        )

    @classmethod
    def preset(cls, name: str) -> "LogSettings":
        base = cls.from_env()
        key = name.lower()
        if key == "development":
            return replace(base, level="DEBUG", console=True, json=False)
        if key == "production":
            return replace(
                base,
                level="INFO",
                console=False,
                log_file=base.log_file or "ed_engine.log",
            )
        raise ValueError(f"Unknown preset '{name}'.")


LOG_PRESETS = ("development", "production")

__all__ = [
    "ENV_PREFIX",
    "LOG_PRESETS",
    "EngineSettings",
    "LogSettings",
    "env",
    "env_flag",
]
