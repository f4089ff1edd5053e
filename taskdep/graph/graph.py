"""
Task dependency graph data model and deterministic JSON serialization.
"""

from __future__ import annotations

from dataclasses import dataclass

from taskdep.graph.edges import DependencyEdge
from taskdep.graph.nodes import TaskNode


def edge_label(source: str, target: str) -> str:
    """Bookkeeping label for an edge; never rendered."""
    return f"{source}-{target}"


@dataclass(frozen=True)
class TaskGraph:
    """Nodes and directed edges in insertion order. Parallel edges are kept."""

    nodes: tuple[TaskNode, ...]
    edges: tuple[DependencyEdge, ...]

    def node_names(self) -> tuple[str, ...]:
        return tuple(n.name for n in self.nodes)

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)


def build_task_graph(
    nodes: list[TaskNode],
    edges: list[DependencyEdge],
) -> TaskGraph:
    """Build a TaskGraph; node names must be unique."""
    seen: set[str] = set()
    for n in nodes:
        if n.name in seen:
            raise ValueError(f"duplicate node: {n.name}")
        seen.add(n.name)
    return TaskGraph(nodes=tuple(nodes), edges=tuple(edges))


def task_graph_to_dict(
    g: TaskGraph,
    cyclic_groups: list[tuple[str, ...]] | tuple[tuple[str, ...], ...] = (),
) -> dict:
    """
    Return a JSON-serializable dict with deterministic ordering.
    Same TaskGraph -> same dict (and same JSON with sort_keys=True).
    """
    nodes_sorted = sorted(g.nodes, key=lambda n: n.name)
    edges_sorted = sorted(g.edges, key=lambda e: (e.source, e.target))
    return {
        "nodes": [
            {"name": n.name, "declared": n.declared} for n in nodes_sorted
        ],
        "edges": [
            {"source": e.source, "target": e.target} for e in edges_sorted
        ],
        "cyclic_groups": [list(group) for group in sorted(cyclic_groups)],
    }
