"""Executable Textual app for editing a MutableText interactively."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use textundo.adapters.textual.app"
    ) from exc

from textundo.buffer import MutableText
from textundo.runtime import telemetry

from .controller import EditorController, EditorUIHooks


@dataclass
class UIState:
    status_text: str = ""


class TextUndoApp(App[None]):
    """Text view, status line and a command input driving one editor."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#text-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+z", "undo", "Undo"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, initial_text: str = "", name: str = "default") -> None:
        super().__init__()
        self._state = UIState()
        self._editor = MutableText.from_text(initial_text, name=name)
        self.controller: EditorController | None = None
        self._text_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="text-area"):
            self._text_widget = Static("", id="text-view", markup=False)
            yield self._text_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Input(placeholder="append <text> | insert <i> <text> | undo", id="command")
        yield Footer()

    def on_mount(self) -> None:
        hooks = EditorUIHooks(
            update_text=self._update_text,
            update_status=self._update_status,
        )
        self.controller = EditorController(self._editor, hooks)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.controller:
            return
        self.controller.submit(event.value)
        event.input.value = ""

    def action_undo(self) -> None:
        if self.controller:
            self.controller.undo()

    def _update_text(self, text: str) -> None:
        if self._text_widget:
            self._text_widget.update(text)

    def _update_status(self, status: str) -> None:
        depth = self._editor.history_depth
        self._state.status_text = f"{status} | history: {depth}"
        if self._status_widget:
            self._status_widget.update(self._state.status_text)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the textundo Textual demo.")
    parser.add_argument(
        "--text",
        default=os.environ.get("TEXTUNDO_INITIAL_TEXT", ""),
        help="Initial buffer content (not undoable)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default="production",
        help="Telemetry preset (default: production, logs to a file)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    app = TextUndoApp(initial_text=args.text)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
