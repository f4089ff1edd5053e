"""
Error hierarchy. Every failure is fatal: the CLI prints one message and exits non-zero.
"""

from __future__ import annotations


class TaskdepError(Exception):
    """Base class for all taskdep failures."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.message = message
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)


class InputNotFound(TaskdepError):
    """The root Taskfile or an included Taskfile cannot be opened."""


class SchemaError(TaskdepError):
    """A Taskfile is not structurally valid (wrong type or missing key)."""


class RenderEngineError(TaskdepError):
    """The layout engine is missing, fails to start, or exits with non-zero status."""


class IOWriteError(TaskdepError):
    """The rendered image cannot be written."""
