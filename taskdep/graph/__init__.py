"""Task dependency graph model and DOT serialization."""

from taskdep.graph.dot import task_graph_to_dot
from taskdep.graph.edges import DependencyEdge
from taskdep.graph.graph import (
    TaskGraph,
    build_task_graph,
    edge_label,
    task_graph_to_dict,
)
from taskdep.graph.nodes import TaskNode

__all__ = [
    "DependencyEdge",
    "TaskGraph",
    "TaskNode",
    "build_task_graph",
    "edge_label",
    "task_graph_to_dict",
    "task_graph_to_dot",
]
