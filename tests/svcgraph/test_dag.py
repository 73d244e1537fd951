"""Tests for DependencyGraph - dependency validation and ordering."""

import sys

import pytest

from svcgraph import CircularDependencyError, MissingDependencyError
from svcgraph.dag import DependencyGraph


def assert_path_is_cycle(path: tuple[str, ...], graph: dict[str, list[str]]) -> None:
    """Every step follows a declared edge and the last key repeats an earlier one."""
    assert path[-1] in path[:-1]
    for service, dependency in zip(path, path[1:], strict=False):
        assert dependency in graph[service]


class TestDependencyGraphQueries:
    """Tests for dependency and dependent lookups."""

    def test_linear_chain_dependencies(self) -> None:
        """Linear chain C → B → A: each key reports its direct dependency."""
        dag = DependencyGraph({"A": [], "B": ["A"], "C": ["B"]})

        assert dag.get_dependencies("A") == []
        assert dag.get_dependencies("B") == ["A"]
        assert dag.get_dependencies("C") == ["B"]

    def test_dependencies_keep_declared_order(self) -> None:
        """Dependencies are positional arguments, so their order is preserved."""
        dag = DependencyGraph({"A": [], "B": [], "C": ["B", "A"]})

        assert dag.get_dependencies("C") == ["B", "A"]

    def test_fan_out_dependents(self) -> None:
        """B and C both depend on A, so A's dependents are {B, C}."""
        dag = DependencyGraph({"A": [], "B": ["A"], "C": ["A"]})

        assert dag.get_dependents("A") == {"B", "C"}
        assert dag.get_dependents("B") == set()

    def test_unknown_key_returns_empty(self) -> None:
        dag = DependencyGraph({"A": []})

        assert dag.get_dependencies("missing") == []
        assert dag.get_dependents("missing") == set()

    def test_len_counts_services(self) -> None:
        assert len(DependencyGraph({"A": [], "B": ["A"]})) == 2
        assert len(DependencyGraph({})) == 0


class TestDependencyGraphValidation:
    """Tests for existence validation and cycle detection."""

    def test_missing_dependency_identifies_pair(self) -> None:
        dag = DependencyGraph({"B": ["A"]})

        with pytest.raises(MissingDependencyError) as exc_info:
            dag.validate_dependencies_exist()

        assert exc_info.value.service == "B"
        assert exc_info.value.dependency == "A"
        assert "B depends on A" in str(exc_info.value)

    def test_complete_graph_passes_existence_check(self) -> None:
        DependencyGraph({"A": [], "B": ["A"]}).validate_dependencies_exist()

    def test_three_node_cycle_reports_full_path(self) -> None:
        """X → Y → Z → X is reported with every key in traversal order."""
        graph = {"X": ["Y"], "Y": ["Z"], "Z": ["X"]}

        with pytest.raises(CircularDependencyError) as exc_info:
            DependencyGraph(graph).detect_cycles()

        assert exc_info.value.path == ("X", "Y", "Z", "X")
        assert "X -> Y -> Z -> X" in str(exc_info.value)

    def test_self_dependency_is_a_cycle(self) -> None:
        with pytest.raises(CircularDependencyError) as exc_info:
            DependencyGraph({"A": ["A"]}).detect_cycles()

        assert exc_info.value.path == ("A", "A")

    def test_cycle_reached_from_acyclic_prefix(self) -> None:
        """The path starts at the entry point, the cycle closes on an inner key."""
        graph = {"entry": ["B"], "B": ["C"], "C": ["B"]}

        with pytest.raises(CircularDependencyError) as exc_info:
            DependencyGraph(graph).detect_cycles()

        assert exc_info.value.path == ("entry", "B", "C", "B")
        assert_path_is_cycle(exc_info.value.path, graph)

    def test_diamond_is_not_a_cycle(self) -> None:
        """Shared dependencies visited twice are not mistaken for cycles."""
        DependencyGraph(
            {"A": [], "B": ["A"], "C": ["A"], "D": ["B", "C"]}
        ).detect_cycles()

    def test_chain_deeper_than_recursion_limit(self) -> None:
        """Cycle detection handles chains longer than the recursion limit."""
        depth = sys.getrecursionlimit() * 2
        graph = {f"s{i}": [f"s{i + 1}"] for i in range(depth)}
        graph[f"s{depth}"] = []

        DependencyGraph(graph).detect_cycles()

        graph[f"s{depth}"] = ["s0"]
        with pytest.raises(CircularDependencyError) as exc_info:
            DependencyGraph(graph).detect_cycles()

        assert len(exc_info.value.path) == depth + 2
        assert exc_info.value.path[0] == exc_info.value.path[-1] == "s0"


class TestDependencyGraphOrdering:
    """Tests for topological ordering."""

    def test_every_key_follows_its_dependencies(self) -> None:
        graph = {
            "D": ["B", "C"],
            "C": ["A"],
            "B": ["A"],
            "A": [],
            "E": [],
        }

        order = DependencyGraph(graph).topological_order()

        assert sorted(order) == sorted(graph)
        for key, deps in graph.items():
            for dep in deps:
                assert order.index(dep) < order.index(key)

    def test_empty_graph_has_empty_order(self) -> None:
        assert DependencyGraph({}).topological_order() == []

    def test_ordering_a_cyclic_graph_raises(self) -> None:
        graph = {"A": ["B"], "B": ["A"]}

        with pytest.raises(CircularDependencyError) as exc_info:
            DependencyGraph(graph).topological_order()

        assert_path_is_cycle(exc_info.value.path, graph)
