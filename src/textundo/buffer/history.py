"""Snapshot history backing ``MutableText.undo``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .errors import EmptyHistoryError


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Full copy of the buffer text taken right before an edit."""

    state: str


@dataclass(frozen=True, slots=True)
class PopResult:
    """Outcome of ``HistoryStack.try_pop``; ``snapshot`` is ``None`` when empty."""

    snapshot: Optional[Snapshot] = None

    @property
    def ok(self) -> bool:
        return self.snapshot is not None


class HistoryStack:
    """LIFO store of snapshots. Only the tail is ever touched."""

    def __init__(self) -> None:
        self._entries: List[Snapshot] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, snapshot: Snapshot) -> None:
        self._entries.append(snapshot)

    def pop(self) -> Snapshot:
        if not self._entries:
            raise EmptyHistoryError("history is empty")
        return self._entries.pop()

    def try_pop(self) -> PopResult:
        if not self._entries:
            return PopResult()
        return PopResult(snapshot=self._entries.pop())

    def is_empty(self) -> bool:
        return not self._entries

    def clear(self) -> int:
        """Drop every snapshot and return how many were held."""

        dropped = len(self._entries)
        self._entries.clear()
        return dropped


__all__ = ["Snapshot", "PopResult", "HistoryStack"]
