"""Edge types for the task dependency graph."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DependencyEdge:
    """A directed edge dependency -> task: source must run before target."""

    source: str
    target: str
    label: str = ""
