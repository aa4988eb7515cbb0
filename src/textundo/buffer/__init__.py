"""Editable text buffer and its snapshot history."""

from .errors import EmptyHistoryError, IndexOutOfRangeError, TextUndoError
from .history import HistoryStack, PopResult, Snapshot
from .text import MutableText
from .validation import ensure_offset, ensure_range, ensure_text

__all__ = [
    "MutableText",
    "HistoryStack",
    "Snapshot",
    "PopResult",
    "TextUndoError",
    "IndexOutOfRangeError",
    "EmptyHistoryError",
    "ensure_offset",
    "ensure_range",
    "ensure_text",
]
