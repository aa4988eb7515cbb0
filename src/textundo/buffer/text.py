"""Mutable text buffer with snapshot-based undo."""

from __future__ import annotations

from typing import List

from textundo.runtime import telemetry

from .history import HistoryStack, Snapshot
from .validation import ensure_offset, ensure_range, ensure_text


class MutableText:
    """Growable character sequence whose edits can be undone one at a time.

    Every mutating call pushes a :class:`Snapshot` of the pre-edit text before
    touching the buffer, including edits that change nothing (``append("")``,
    ``delete(i, i)``). Arguments are validated first, so a rejected edit
    leaves both the text and the history as they were.

    Mutating calls return ``self``::

        text = MutableText().append("Привет").append(", мир!")
    """

    def __init__(self, *, name: str = "default") -> None:
        self.name = name
        self._chars: List[str] = []
        self._history = HistoryStack()

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "MutableText":
        """Build an editor holding ``text`` with nothing to undo."""

        editor = cls(name=name)
        editor._chars = list(ensure_text(text))
        return editor

    def __str__(self) -> str:
        return self.current_text()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"text={self.current_text()!r}, history_depth={self.history_depth})"
        )

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def history_depth(self) -> int:
        return len(self._history)

    def current_text(self) -> str:
        return "".join(self._chars)

    def append(self, text: str) -> "MutableText":
        text = ensure_text(text)
        end = len(self._chars)
        return self._splice(end, end, text, label="append")

    def insert(self, offset: int, text: str) -> "MutableText":
        offset = ensure_offset(len(self._chars), offset)
        text = ensure_text(text)
        return self._splice(offset, offset, text, label="insert")

    def delete(self, start: int, end: int) -> "MutableText":
        start, end = ensure_range(len(self._chars), start, end)
        return self._splice(start, end, "", label="delete")

    def replace(self, start: int, end: int, text: str) -> "MutableText":
        start, end = ensure_range(len(self._chars), start, end)
        text = ensure_text(text)
        return self._splice(start, end, text, label="replace")

    def can_undo(self) -> bool:
        return not self._history.is_empty()

    def undo(self) -> bool:
        """Restore the text as it was before the latest edit.

        Returns ``False`` and leaves the text alone when there is nothing to
        undo.
        """

        snapshot = self._history.try_pop().snapshot
        if snapshot is None:
            telemetry.record_event(
                "undo.empty",
                level="warning",
                data={"buffer": self.name, "message": "nothing to undo"},
            )
            return False
        self._restore(snapshot)
        return True

    def clear_history(self) -> int:
        """Forget every snapshot; the current text is kept."""

        dropped = self._history.clear()
        telemetry.record_event(
            "history.clear",
            level="debug",
            data={"buffer": self.name, "dropped": dropped},
        )
        return dropped

    def _splice(self, start: int, end: int, text: str, *, label: str) -> "MutableText":
        with telemetry.span(
            name=f"text::{label}",
            component=True,
            metadata={"buffer": self.name, "start": start, "end": end},
        ) as handle:
            self._history.push(Snapshot(self.current_text()))
            self._chars[start:end] = text
            handle.add_metadata("length", len(self._chars))
        return self

    def _restore(self, snapshot: Snapshot) -> None:
        self._chars = list(snapshot.state)


__all__ = ["MutableText"]
