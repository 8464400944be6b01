"""Address resolution against editor state."""

from .resolver import (
    LineRange,
    UnresolvedDefaultError,
    default_halves,
    resolve_endpoint,
    resolve_range,
    resolve_singular,
    substitute_default,
)

__all__ = [
    "LineRange",
    "UnresolvedDefaultError",
    "default_halves",
    "resolve_endpoint",
    "resolve_range",
    "resolve_singular",
    "substitute_default",
]
