"""Runtime services: telemetry and environment settings."""

from .settings import LOG_PRESETS, EngineSettings, LogSettings

__all__ = ["EngineSettings", "LOG_PRESETS", "LogSettings", "telemetry", "settings"]
