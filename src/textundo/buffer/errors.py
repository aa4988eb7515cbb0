"""Exception types raised by the editing buffer and its history."""

from __future__ import annotations

from typing import Optional


class TextUndoError(Exception):
    """Base class for every error raised by ``textundo``."""


class IndexOutOfRangeError(TextUndoError, IndexError):
    """Raised when an edit offset or range falls outside the buffer."""

    def __init__(
        self,
        message: str,
        *,
        length: int,
        offset: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.length = length
        self.offset = offset
        self.start = start
        self.end = end


class EmptyHistoryError(TextUndoError, LookupError):
    """Raised by ``HistoryStack.pop`` when there is nothing left to pop."""


__all__ = ["TextUndoError", "IndexOutOfRangeError", "EmptyHistoryError"]
