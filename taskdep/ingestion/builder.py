"""
Graph builder: walk a root Taskfile and its includes into a single TaskGraph.

Names are qualified as ":".join(prefix + (name,)), where prefix is the chain of
include namespaces leading to the document. Dependency names are qualified with
the prefix of the document that declares them, so inside an included document
`deps: [build]` refers to `<namespace>:build`, while at the root a literal
`inc1:task1` refers to the task `task1` of the `inc1` include.
"""

from __future__ import annotations

import logging

from taskdep.config import NAMESPACE_SEPARATOR
from taskdep.errors import SchemaError
from taskdep.graph.edges import DependencyEdge
from taskdep.graph.graph import TaskGraph, build_task_graph, edge_label
from taskdep.graph.nodes import TaskNode
from taskdep.ingestion.document import TaskDocument, load_document
from taskdep.ingestion.sources import FileSourceOpener, SourceOpener

logger = logging.getLogger(__name__)


class _NodeRegistry:
    """Name -> node bookkeeping for a single build call."""

    def __init__(self) -> None:
        self._order: dict[str, int] = {}
        self._declared: set[str] = set()
        self.edges: list[DependencyEdge] = []

    def register(self, name: str, declared: bool) -> None:
        if name not in self._order:
            self._order[name] = len(self._order)
        if declared:
            self._declared.add(name)

    def add_edge(self, source: str, target: str) -> None:
        self.edges.append(DependencyEdge(source, target, edge_label(source, target)))

    def nodes(self) -> list[TaskNode]:
        return [TaskNode(name, name in self._declared) for name in self._order]


class GraphBuilder:
    """Build a TaskGraph from a root Taskfile, following includes through a SourceOpener."""

    def __init__(
        self,
        opener: SourceOpener | None = None,
        separator: str = NAMESPACE_SEPARATOR,
    ) -> None:
        self.opener = opener if opener is not None else FileSourceOpener()
        self.separator = separator

    def build(self, root: str) -> TaskGraph:
        """Build the graph for the Taskfile at root."""
        location = self.opener.resolve(root, None)
        return self._build(self._load(location), location)

    def build_text(self, text: str, source: str | None = None) -> TaskGraph:
        """
        Build the graph for Taskfile text that has already been read.
        Includes are resolved relative to source, when given.
        """
        return self._build(load_document(text, source), source)

    def _build(self, document: TaskDocument, location: str | None) -> TaskGraph:
        registry = _NodeRegistry()
        stack = (location,) if location is not None else ()
        self._walk(document, location, (), registry, stack)
        graph = build_task_graph(registry.nodes(), registry.edges)
        logger.info(
            "Built graph: %d node(s), %d edge(s)", graph.node_count(), graph.edge_count()
        )
        return graph

    def _load(self, location: str) -> TaskDocument:
        return load_document(self.opener.read(location), location)

    def qualify(self, prefix: tuple[str, ...], name: str) -> str:
        return self.separator.join(prefix + (name,))

    def _walk(
        self,
        document: TaskDocument,
        location: str | None,
        prefix: tuple[str, ...],
        registry: _NodeRegistry,
        stack: tuple[str, ...],
    ) -> None:
        for include in document.includes:
            child = self.opener.resolve(include.taskfile, location)
            if child in stack:
                chain = " -> ".join(stack + (child,))
                raise SchemaError(f"include cycle: {chain}", location)
            logger.debug(
                "Including %s as %s", child, self.qualify(prefix, include.namespace)
            )
            self._walk(
                self._load(child),
                child,
                prefix + (include.namespace,),
                registry,
                stack + (child,),
            )

        for task in document.tasks:
            name = self.qualify(prefix, task.name)
            registry.register(name, declared=True)
            for dep in task.deps:
                dep_name = self.qualify(prefix, dep.task)
                registry.register(dep_name, declared=False)
                registry.add_edge(dep_name, name)


def build_graph(root: str, opener: SourceOpener | None = None) -> TaskGraph:
    """Convenience: GraphBuilder(opener).build(root)."""
    return GraphBuilder(opener).build(root)
