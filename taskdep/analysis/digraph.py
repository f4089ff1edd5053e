"""
Build an adjacency-list directed graph from a TaskGraph for cycle analysis.
Nodes = every TaskNode (dangling dependency targets included). Edges = dependency -> task.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from taskdep.graph.graph import TaskGraph


@dataclass
class DirectedGraph:
    """
    Adjacency-list directed graph. Parallel edges are kept as repeated entries.
    """

    _successors: dict[str, list[str]] = field(default_factory=dict)

    def nodes(self) -> list[str]:
        """All node names in insertion order."""
        return list(self._successors.keys())

    def successors(self, node: str) -> list[str]:
        """List of targets of edges from node (order preserved)."""
        return list(self._successors.get(node, []))

    def add_node(self, node: str) -> None:
        self._successors.setdefault(node, [])

    def add_edge(self, source: str, target: str) -> None:
        self.add_node(source)
        self.add_node(target)
        self._successors[source].append(target)


def build_digraph(g: TaskGraph) -> DirectedGraph:
    """Build a DirectedGraph from a TaskGraph, preserving node and edge order."""
    dg = DirectedGraph()
    for n in g.nodes:
        dg.add_node(n.name)
    for e in g.edges:
        dg.add_edge(e.source, e.target)
    return dg
