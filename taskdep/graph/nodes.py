"""Node types for the task dependency graph."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskNode:
    """A fully-qualified task name; declared=False for dangling dependency targets."""

    name: str
    declared: bool = True
