"""Line buffer, editor state and bounds validation."""

from .document import LineBuffer
from .state import EditorMode, EditorState
from .validation import AddressOutOfRange, ensure_line, ensure_lower_bound

__all__ = [
    "LineBuffer",
    "EditorMode",
    "EditorState",
    "AddressOutOfRange",
    "ensure_line",
    "ensure_lower_bound",
]
