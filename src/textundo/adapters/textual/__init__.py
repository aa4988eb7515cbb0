"""Textual host for ``MutableText``."""

from .controller import CommandError, CommandResult, EditorController, EditorUIHooks

__all__ = ["EditorController", "EditorUIHooks", "CommandResult", "CommandError"]
