"""Mutable text with snapshot-based undo."""

from textundo.buffer import (
    EmptyHistoryError,
    HistoryStack,
    IndexOutOfRangeError,
    MutableText,
    Snapshot,
    TextUndoError,
)

__all__ = [
    "MutableText",
    "HistoryStack",
    "Snapshot",
    "TextUndoError",
    "IndexOutOfRangeError",
    "EmptyHistoryError",
]

__version__ = "0.1.0"
