"""
Cycle detection: strongly connected components of the dependency graph.
A component is cyclic when it has more than one member; self-loops alone are not cycles.
"""

from __future__ import annotations

import logging

from taskdep.analysis.digraph import DirectedGraph, build_digraph
from taskdep.graph.graph import TaskGraph

logger = logging.getLogger(__name__)


def strongly_connected_components(dg: DirectedGraph) -> list[set[str]]:
    """
    Tarjan's algorithm, iterative: return the strongly connected components
    (each a set of node names). Uses an explicit stack of (node, successors)
    frames so deep dependency chains do not hit the recursion limit.
    """
    order: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    on_stack: set[str] = set()
    pending: list[str] = []
    sccs: list[set[str]] = []

    for root in dg.nodes():
        if root in order:
            continue
        order[root] = lowlink[root] = len(order)
        pending.append(root)
        on_stack.add(root)
        frames = [(root, iter(dg.successors(root)))]

        while frames:
            node, successors = frames[-1]
            for succ in successors:
                if succ not in order:
                    order[succ] = lowlink[succ] = len(order)
                    pending.append(succ)
                    on_stack.add(succ)
                    frames.append((succ, iter(dg.successors(succ))))
                    break
                if succ in on_stack:
                    lowlink[node] = min(lowlink[node], order[succ])
            else:
                frames.pop()
                if frames:
                    parent = frames[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[node])
                if lowlink[node] == order[node]:
                    component: set[str] = set()
                    while True:
                        member = pending.pop()
                        on_stack.discard(member)
                        component.add(member)
                        if member == node:
                            break
                    sccs.append(component)

    return sccs


def find_cyclic_groups(g: TaskGraph) -> list[tuple[str, ...]]:
    """
    Return every strongly connected component with more than one node.
    Each group is a sorted tuple of names; groups are sorted for determinism.
    """
    sccs = strongly_connected_components(build_digraph(g))
    groups = sorted(tuple(sorted(scc)) for scc in sccs if len(scc) > 1)
    if groups:
        logger.info("Found %d cyclic group(s): %s", len(groups), groups)
    else:
        logger.debug("No cyclic groups in graph of %d node(s)", g.node_count())
    return groups


def detect_cycles(g: TaskGraph) -> set[str]:
    """Union of all nodes that belong to a cyclic group. Empty graph -> empty set."""
    cyclic: set[str] = set()
    for group in find_cyclic_groups(g):
        cyclic.update(group)
    return cyclic
