"""Scripted walk through append/undo, printing the text after each step."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from textundo.buffer import MutableText


def run_demo(first: str, second: str, extra: str) -> List[str]:
    """Return the text observed after each step of the demo."""

    editor = MutableText(name="demo")
    seen: List[str] = []

    editor.append(first).append(second)
    seen.append(editor.current_text())

    editor.undo()
    seen.append(editor.current_text())

    editor.append(extra)
    seen.append(editor.current_text())

    editor.undo()
    seen.append(editor.current_text())
    return seen


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the textundo append/undo demo.")
    parser.add_argument(
        "--text",
        nargs=3,
        metavar=("FIRST", "SECOND", "EXTRA"),
        default=["Привет", ", мир!", " Java!"],
        help="Fragments to append (default: 'Привет' ', мир!' ' Java!')",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    for line in run_demo(*args.text):
        print(line)


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
