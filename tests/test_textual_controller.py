from __future__ import annotations

from typing import List

import pytest

from textundo.adapters.textual import EditorController, EditorUIHooks
from textundo.buffer import MutableText


def make_controller(text: str = ""):
    texts: List[str] = []
    statuses: List[str] = []
    logs: List[str] = []
    hooks = EditorUIHooks(
        update_text=texts.append,
        update_status=statuses.append,
        log=logs.append,
    )
    controller = EditorController(MutableText.from_text(text), hooks)
    return controller, texts, statuses, logs


def test_controller_publishes_initial_text() -> None:
    _, texts, _, _ = make_controller("seed")

    assert texts == ["seed"]


def test_append_keeps_leading_spaces_and_undo_restores() -> None:
    controller, texts, statuses, _ = make_controller()

    controller.submit("append Привет")
    controller.submit("append  Java!")
    assert texts[-1] == "Привет Java!"

    result = controller.undo()
    assert result.status == "ok"
    assert texts[-1] == "Привет"
    assert statuses[-1] == "undo"


def test_insert_delete_replace_commands() -> None:
    controller, texts, _, _ = make_controller("hello")

    controller.submit("insert 0 >> ")
    assert texts[-1] == ">> hello"

    controller.submit("delete 0 3")
    assert texts[-1] == "hello"

    controller.submit("replace 0 5 bye")
    assert texts[-1] == "bye"
    assert controller.editor.history_depth == 3


def test_out_of_range_edit_reports_error_without_change() -> None:
    controller, texts, statuses, _ = make_controller("abc")

    result = controller.submit("insert 9 x")

    assert result.status == "error"
    assert "out of range" in (result.message or "")
    assert texts[-1] == "abc"
    assert controller.editor.history_depth == 0
    assert statuses[-1] == result.message


def test_malformed_and_unknown_commands_are_reported() -> None:
    controller, _, _, _ = make_controller("abc")

    assert controller.submit("delete 1").status == "error"
    assert controller.submit("replace one 2 x").status == "error"
    assert controller.submit("insert").status == "error"
    unknown = controller.submit("redo")
    assert unknown.status == "error"
    assert unknown.message == "unknown command: redo"
    assert controller.editor.history_depth == 0


def test_undo_on_empty_history_is_reported_not_raised() -> None:
    controller, texts, statuses, _ = make_controller("keep")

    result = controller.submit("undo")

    assert result.status == "empty"
    assert statuses[-1] == "nothing to undo"
    assert texts[-1] == "keep"


def test_clear_command_drops_history() -> None:
    controller, _, statuses, _ = make_controller()
    controller.submit("a x")
    controller.submit("a y")

    controller.submit("clear")

    assert statuses[-1] == "cleared 2 snapshot(s)"
    assert controller.submit("u").status == "empty"
    assert controller.editor.current_text() == "xy"


def test_controller_emits_log_lines() -> None:
    controller, _, _, logs = make_controller()

    controller.submit("append z")

    assert any(line.startswith("command ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)


@pytest.mark.parametrize("offset", ["1_0", "+1", "１", "0x1", "-"])
def test_offsets_must_be_plain_ascii_integers(offset: str) -> None:
    controller, texts, _, _ = make_controller("abc")

    result = controller.submit(f"insert {offset} x")

    assert result.status == "error"
    assert texts[-1] == "abc"
    assert controller.editor.history_depth == 0


def test_negative_offset_parses_then_fails_range_check() -> None:
    controller, _, _, _ = make_controller("abc")

    result = controller.submit("insert -1 x")

    assert result.status == "error"
    assert "out of range" in (result.message or "")
