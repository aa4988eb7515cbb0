"""Command-line controller that wires a MutableText into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from textundo.buffer import IndexOutOfRangeError, MutableText
from textundo.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorUIHooks:
    """Callbacks invoked by the controller to refresh host widgets."""

    update_text: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


@dataclass(slots=True)
class CommandResult:
    status: str = "ok"
    message: Optional[str] = None


class CommandError(ValueError):
    """Raised for command lines that cannot be parsed."""


CommandHandler = Callable[["EditorController", str], CommandResult]


class EditorController:
    """Runs ``append``/``insert``/``delete``/``replace``/``undo``/``clear`` commands.

    Text arguments are everything after the single space that follows the
    last numeric argument, so leading spaces survive: ``append  Java!``
    appends ``" Java!"``.
    """

    def __init__(self, editor: MutableText, hooks: EditorUIHooks) -> None:
        self.editor = editor
        self.hooks = hooks
        self._refresh_text()

    def submit(self, line: str) -> CommandResult:
        command, _, rest = line.lstrip().partition(" ")
        self._log("command ->", command=command, args=rest)
        handler = _COMMAND_HANDLERS.get(command)
        if handler is None:
            result = CommandResult(status="error", message=f"unknown command: {command}")
        else:
            try:
                result = handler(self, rest)
            except (CommandError, IndexOutOfRangeError) as exc:
                result = CommandResult(status="error", message=str(exc))
        self._after_result(result)
        return result

    def undo(self) -> CommandResult:
        return self.submit("undo")

    def _after_result(self, result: CommandResult) -> None:
        status = result.message or result.status
        self.hooks.update_status(status)
        self._refresh_text()
        self._log(
            "result <-",
            status=result.status,
            message=result.message,
            depth=self.editor.history_depth,
        )

    def _refresh_text(self) -> None:
        self.hooks.update_text(self.editor.current_text())

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(f"{key}={value!r}" for key, value in fields.items() if value is not None)
        line = " ".join(parts)
        self.hooks.log(line)
        telemetry.get_logger().debug(line)


def _parse_int(raw: str, name: str) -> int:
    digits = raw[1:] if raw.startswith("-") else raw
    if not (digits.isascii() and digits.isdigit()):
        raise CommandError(f"{name} must be an integer, got {raw!r}")
    return int(raw)


def _split_args(rest: str, count: int, usage: str) -> List[str]:
    parts = rest.split(" ", count)
    numbers = parts[:count]
    if len(numbers) < count or any(not part for part in numbers):
        raise CommandError(f"usage: {usage}")
    return parts


def _handle_append(controller: EditorController, rest: str) -> CommandResult:
    controller.editor.append(rest)
    return CommandResult(message="append")


def _handle_insert(controller: EditorController, rest: str) -> CommandResult:
    parts = _split_args(rest, 1, "insert <offset> <text>")
    offset = _parse_int(parts[0], "offset")
    controller.editor.insert(offset, parts[1] if len(parts) > 1 else "")
    return CommandResult(message="insert")


def _handle_delete(controller: EditorController, rest: str) -> CommandResult:
    parts = rest.split()
    if len(parts) != 2:
        raise CommandError("usage: delete <start> <end>")
    start, end = (_parse_int(parts[0], "start"), _parse_int(parts[1], "end"))
    controller.editor.delete(start, end)
    return CommandResult(message="delete")


def _handle_replace(controller: EditorController, rest: str) -> CommandResult:
    parts = _split_args(rest, 2, "replace <start> <end> <text>")
    start, end = (_parse_int(parts[0], "start"), _parse_int(parts[1], "end"))
    controller.editor.replace(start, end, parts[2] if len(parts) > 2 else "")
    return CommandResult(message="replace")


def _handle_undo(controller: EditorController, rest: str) -> CommandResult:
    del rest
    if controller.editor.undo():
        return CommandResult(message="undo")
    return CommandResult(status="empty", message="nothing to undo")


def _handle_clear(controller: EditorController, rest: str) -> CommandResult:
    del rest
    dropped = controller.editor.clear_history()
    return CommandResult(message=f"cleared {dropped} snapshot(s)")


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "append": _handle_append,
    "a": _handle_append,
    "insert": _handle_insert,
    "i": _handle_insert,
    "delete": _handle_delete,
    "d": _handle_delete,
    "replace": _handle_replace,
    "r": _handle_replace,
    "undo": _handle_undo,
    "u": _handle_undo,
    "clear": _handle_clear,
}


__all__ = ["EditorController", "EditorUIHooks", "CommandResult", "CommandError"]
