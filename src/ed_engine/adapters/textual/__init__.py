"""Textual host for the ed engine."""

from .controller import TextualEdAdapter, TextualUIHooks

__all__ = ["TextualEdAdapter", "TextualUIHooks"]
