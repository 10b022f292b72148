"""Buffer, session state, and file persistence."""

from .document import LineBuffer
from .state import EditorMode, EditorState, LineRange
from .storage import load_lines, save_lines

__all__ = [
    "LineBuffer",
    "EditorMode",
    "EditorState",
    "LineRange",
    "load_lines",
    "save_lines",
]
