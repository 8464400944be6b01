"""telelog wiring for the editor session.

Commands and mode dispatch run inside :func:`span`; a command that is
refused (bad syntax, unusable address) is reported through
:meth:`SpanHandle.reject` so it lands on the same profiled operation.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, cast

import telelog  # type: ignore[import]

from .settings import LogSettings, env

tl = cast(Any, telelog)

ENGINE_LOGGER = env("LOGGER", "ed_engine") or "ed_engine"

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _pairs(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(key, _text(value)) for key, value in data.items()]


def build_config(settings: LogSettings) -> Any:
    """Translate :class:`LogSettings` into a ``telelog.Config``."""

    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.color)
    config.with_json_format(settings.json)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    # Spans rely on profile() being live.
    config.with_profiling(True)
    return config


def configure(
    settings: Optional[LogSettings] = None, *, preset: Optional[str] = None
) -> None:
    """Rebuild the telelog config; cached loggers are dropped."""

    global _config
    if settings is not None and preset:
        raise ValueError("Provide either settings or a preset, not both.")
    if preset:
        settings = LogSettings.preset(preset)
    _config = build_config(settings or LogSettings.from_env())
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    if _config is None:
        configure()
    key = name or ENGINE_LOGGER
    if key not in _loggers:
        _loggers[key] = tl.Logger.with_config(key, _config)
    return _loggers[key]


def _emit(log: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    # telelog exposes ``<level>_with`` for structured pairs on most levels.
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, _pairs(data))
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(
        get_logger(logger_name),
        level.lower(),
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@dataclass
class SpanHandle:
    logger: Any
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)
    outcome: str = "ok"

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def reject(self, status: str, reason: str) -> None:
        """Record a refused command: the user sees ``?``, the log sees why."""

        self.outcome = status
        _emit(
            self.logger,
            "warning",
            f"{self.name}::{status}",
            {**self.metadata, "reason": reason},
        )

    def fail(self, reason: str) -> None:
        self.outcome = "failed"
        _emit(
            self.logger,
            "error",
            f"{self.name}::fail",
            {**self.metadata, "reason": reason},
        )


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``name``.

    ``metadata`` is pushed as logger context for the duration of the block.
    ``component=True`` tracks the block as a component named ``name``.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(log, name)
    context = dict(metadata or {})
    for key, value in context.items():
        handle.add_metadata(key, value)
        log.add_context(key, handle.metadata[key])

    tracked = name if component is True else component or None
    with ExitStack() as stack:
        if tracked:
            stack.enter_context(log.track_component(tracked))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context:
                log.remove_context(key)


__all__ = [
    "ENGINE_LOGGER",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
