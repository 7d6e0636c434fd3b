"""Tests for deterministic build ordering."""

from __future__ import annotations

import pytest

from slngraph.graph import UNSORTED, CyclicGraphError, ProjectDependencyGraph


def test_diamond_order(diamond: ProjectDependencyGraph) -> None:
    """D first, then B and C in arrival order, then A."""
    ordered = diamond.topologically_sorted

    assert [node.label for node in ordered] == ["D", "B", "C", "A"]
    assert [node.topo_order for node in ordered] == [0, 1, 2, 3]


def test_dependencies_precede_dependents(build_graph) -> None:
    """Every edge A -> B places B strictly before A."""
    graph = build_graph(
        {
            "App": ["Web", "Core"],
            "Tests": ["App", "Util"],
            "Web": ["Core", "Http"],
            "Http": ["Util"],
            "Core": ["Util", "Model"],
            "Model": [],
            "Util": [],
        }
    )

    ordered = graph.topologically_sorted
    assert len(ordered) == len(graph)
    assert len({node.identity for node in ordered}) == len(graph)
    for node in graph.nodes:
        for dependency in node.depends_on:
            assert dependency.topo_order < node.topo_order


def test_edgeless_graph_keeps_input_order(build_graph) -> None:
    """Without edges, the only wave is the input order."""
    graph = build_graph({"C": [], "A": [], "B": []})
    assert [node.label for node in graph.topologically_sorted] == ["C", "A", "B"]


def test_order_is_cached(diamond: ProjectDependencyGraph) -> None:
    """The order is computed once per graph version."""
    assert diamond.topologically_sorted is diamond.topologically_sorted


def test_two_cycle_is_detected(build_graph) -> None:
    """A <-> B cannot be ordered."""
    graph = build_graph({"A": ["B"], "B": ["A"], "C": []})

    with pytest.raises(CyclicGraphError) as excinfo:
        _ = graph.topologically_sorted

    assert excinfo.value.stranded == 2
    assert excinfo.value.stranded_nodes == ["A", "B"]
    assert all(node.topo_order == UNSORTED for node in graph.nodes)


def test_nodes_behind_cycle_are_stranded(build_graph) -> None:
    """Projects depending on a cycle are stranded too."""
    graph = build_graph({"E": ["A"], "A": ["B"], "B": ["A"], "Leaf": []})

    with pytest.raises(CyclicGraphError) as excinfo:
        _ = graph.topologically_sorted
    assert excinfo.value.stranded == 3


def test_self_reference_is_a_cycle(build_graph) -> None:
    """A project referencing itself forms a one-node cycle."""
    graph = build_graph({"Self": ["Self"]})

    with pytest.raises(CyclicGraphError):
        _ = graph.topologically_sorted
