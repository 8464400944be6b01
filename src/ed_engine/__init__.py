"""UI-agnostic ed line-editing engine."""

__all__ = [
    "actions",
    "address",
    "adapters",
    "buffer",
    "grammar",
    "host",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
