"""Argument checks run before an edit touches history."""

from __future__ import annotations

from .errors import IndexOutOfRangeError


def _ensure_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def ensure_text(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    return text


def ensure_offset(length: int, offset: int) -> int:
    offset = _ensure_int("offset", offset)
    if offset < 0 or offset > length:
        raise IndexOutOfRangeError(
            f"offset {offset} out of range for length {length}",
            length=length,
            offset=offset,
        )
    return offset


def ensure_range(length: int, start: int, end: int) -> tuple[int, int]:
    start = _ensure_int("start", start)
    end = _ensure_int("end", end)
    if start < 0 or start > end or end > length:
        raise IndexOutOfRangeError(
            f"range [{start}, {end}) out of range for length {length}",
            length=length,
            start=start,
            end=end,
        )
    return start, end


__all__ = ["ensure_text", "ensure_offset", "ensure_range"]
