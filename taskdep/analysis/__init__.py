"""Cycle analysis over the task dependency graph."""

from taskdep.analysis.cycles import (
    detect_cycles,
    find_cyclic_groups,
    strongly_connected_components,
)
from taskdep.analysis.digraph import DirectedGraph, build_digraph

__all__ = [
    "DirectedGraph",
    "build_digraph",
    "detect_cycles",
    "find_cyclic_groups",
    "strongly_connected_components",
]
