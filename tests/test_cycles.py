"""Tests for cycle analysis: digraph construction, SCCs, cyclic groups and cyclic nodes."""

from taskdep.analysis import (
    build_digraph,
    detect_cycles,
    find_cyclic_groups,
    strongly_connected_components,
)
from taskdep.graph import DependencyEdge, TaskGraph, TaskNode, build_task_graph
from taskdep.ingestion import GraphBuilder


def _graph(names, pairs) -> TaskGraph:
    return build_task_graph(
        [TaskNode(n) for n in names],
        [DependencyEdge(s, t, f"{s}-{t}") for s, t in pairs],
    )


def test_digraph_keeps_isolated_nodes_and_parallel_edges():
    dg = build_digraph(_graph(["a", "b", "c"], [("a", "b"), ("a", "b")]))
    assert dg.nodes() == ["a", "b", "c"]
    assert dg.successors("a") == ["b", "b"]


def test_three_node_cycle():
    g = _graph(["a", "b", "c"], [("a", "b"), ("b", "c"), ("c", "a")])
    assert find_cyclic_groups(g) == [("a", "b", "c")]
    assert detect_cycles(g) == {"a", "b", "c"}


def test_chain_has_no_cycles():
    g = _graph(["a", "b", "c"], [("a", "b"), ("b", "c")])
    assert find_cyclic_groups(g) == []
    assert detect_cycles(g) == set()


def test_empty_graph():
    assert detect_cycles(_graph([], [])) == set()


def test_self_loop_is_not_a_cycle():
    g = _graph(["a"], [("a", "a")])
    assert detect_cycles(g) == set()


def test_two_separate_cycles():
    """Two disjoint cycles are reported as two sorted groups; union of members."""
    g = _graph(
        ["x", "y", "p", "q", "r", "free"],
        [("y", "x"), ("x", "y"), ("p", "q"), ("q", "r"), ("r", "p"), ("free", "p")],
    )
    assert find_cyclic_groups(g) == [("p", "q", "r"), ("x", "y")]
    assert detect_cycles(g) == {"p", "q", "r", "x", "y"}


def test_scc_partition_covers_all_nodes():
    g = _graph(["a", "b", "c", "d"], [("a", "b"), ("b", "a"), ("c", "d")])
    sccs = strongly_connected_components(build_digraph(g))
    assert sorted(sorted(s) for s in sccs) == [["a", "b"], ["c"], ["d"]]


def test_cycle_through_namespaced_nodes():
    g = _graph(
        ["inc:a", "b"],
        [("inc:a", "b"), ("b", "inc:a")],
    )
    assert detect_cycles(g) == {"inc:a", "b"}


def _chain_taskfile(length: int, close_loop: bool = False) -> str:
    lines = ["tasks:", "  t0: {deps: [t%d]}" % (length - 1) if close_loop else "  t0: {}"]
    for i in range(1, length):
        lines.append(f"  t{i}: {{deps: [t{i - 1}]}}")
    return "\n".join(lines) + "\n"


def test_deep_dependency_chain():
    """A 5000-task chain is analysed without exhausting the recursion limit."""
    g = GraphBuilder().build_text(_chain_taskfile(5000))
    assert g.node_count() == 5000
    assert detect_cycles(g) == set()
    assert len(strongly_connected_components(build_digraph(g))) == 5000


def test_deep_cycle():
    """Closing the 5000-task chain yields one group holding every task."""
    g = GraphBuilder().build_text(_chain_taskfile(5000, close_loop=True))
    groups = find_cyclic_groups(g)
    assert len(groups) == 1
    assert len(groups[0]) == 5000
