"""
Generate a Graphviz DOT description from a TaskGraph, with cyclic nodes flagged.
"""

from __future__ import annotations

from collections.abc import Collection

from taskdep.graph.graph import TaskGraph

CYCLE_COLOR = "red"
INDENT = "    "


def _dot_quote(text: str) -> str:
    """Quote a string as a DOT ID (backslashes and double quotes escaped)."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _attrs(pairs: list[tuple[str, str]]) -> str:
    if not pairs:
        return ""
    return " [" + ", ".join(f"{k}={_dot_quote(v)}" for k, v in pairs) + "]"


def task_graph_to_dot(g: TaskGraph, cyclic_nodes: Collection[str]) -> str:
    """
    Produce a DOT digraph from a TaskGraph.

    Nodes are emitted in insertion order with ids n0, n1, ... and labeled by
    their fully-qualified names; edges follow in insertion order, one line per
    registered edge. A node is colored red when it is in cyclic_nodes; an edge
    is colored red when both of its endpoints are. Edge labels are omitted.

    Args:
        g: Graph to serialize.
        cyclic_nodes: Names of nodes that belong to a cyclic group.

    Returns:
        DOT text ending with a newline.
    """
    ids = {n.name: f"n{i}" for i, n in enumerate(g.nodes)}
    lines = ["digraph {"]
    for n in g.nodes:
        pairs = [("label", n.name)]
        if n.name in cyclic_nodes:
            pairs.append(("color", CYCLE_COLOR))
        lines.append(f"{INDENT}{ids[n.name]}{_attrs(pairs)};")
    for e in g.edges:
        pairs = []
        if e.source in cyclic_nodes and e.target in cyclic_nodes:
            pairs.append(("color", CYCLE_COLOR))
        lines.append(f"{INDENT}{ids[e.source]} -> {ids[e.target]}{_attrs(pairs)};")
    lines.append("}")
    return "\n".join(lines) + "\n"
