"""Tests for reachability closure and the keep/remove partition."""

import pytest

from typeprune.analysis import closure
from typeprune.analysis.closure import compute_plan, find_reachable_types
from typeprune.errors import ConfigurationError, InternalConsistencyError
from typeprune.models.graph import DependencyGraph, TypeModel
from typeprune.tree.nodes import SourceUnit

UNIT = SourceUnit(path="Test.java")


def make_graph(edges: dict[str, list[str]], external: tuple[str, ...] = ()) -> DependencyGraph:
    """Helper to create a graph of in-tree types (plus optional out-of-tree ones)."""
    graph = DependencyGraph()
    for name, targets in edges.items():
        graph.models[name] = TypeModel(name, owning_unit=UNIT, dependencies=set(targets))
    for name in external:
        graph.models[name] = TypeModel(name)
    return graph


def reference_reachable(edges: dict[str, list[str]], start: set[str]) -> set[str]:
    """Naive fixed-point reachability used to cross-check the closure."""
    reachable = set(start)
    while True:
        grown = reachable | {t for s in reachable for t in edges.get(s, []) if t in edges}
        if grown == reachable:
            return reachable
        reachable = grown


class TestComputePlan:
    """Tests for the keep/remove partition."""

    def test_cycle_with_isolated_type(self):
        """A->B->C->A with D isolated keeps A, B, C and removes D."""
        graph = make_graph({"A": ["B"], "B": ["C"], "C": ["A"], "D": []})

        plan = compute_plan(graph, ["A"])

        assert set(plan.keep) == {"A", "B", "C"}
        assert plan.remove == ("D",)

    def test_missing_entrypoint_is_fatal(self):
        graph = make_graph({"A": []})

        with pytest.raises(ConfigurationError, match="Didn't find type Z"):
            compute_plan(graph, ["Z"])

    def test_missing_entrypoint_after_valid_one_is_fatal(self):
        graph = make_graph({"A": []})

        with pytest.raises(ConfigurationError):
            compute_plan(graph, ["A", "Z"])

    def test_keep_contains_entrypoints_and_is_disjoint_from_remove(self):
        graph = make_graph({"A": ["B"], "B": [], "C": ["A"], "D": ["C"]})

        plan = compute_plan(graph, ["A", "C"])

        assert {"A", "C"} <= set(plan.keep)
        assert not set(plan.keep) & set(plan.remove)
        assert set(plan.keep) | set(plan.remove) == {"A", "B", "C", "D"}
        assert plan.remove == ("D",)

    def test_out_of_tree_dependencies_are_neither_kept_nor_removed(self):
        graph = make_graph({"A": ["java.util.List"]}, external=("java.util.List",))

        plan = compute_plan(graph, ["A"])

        assert plan.keep == ("A",)
        assert plan.remove == ()

    def test_out_of_tree_entrypoint_is_kept(self):
        graph = make_graph({"A": []}, external=("java.lang.Runnable",))

        plan = compute_plan(graph, ["java.lang.Runnable"])

        assert plan.keeps("java.lang.Runnable")
        assert plan.removes("A")

    def test_dependencies_missing_from_graph_end_the_branch(self):
        graph = make_graph({"A": ["ghost.Type", "B"], "B": []})

        plan = compute_plan(graph, ["A"])

        assert set(plan.keep) == {"A", "B"}

    def test_duplicate_entrypoints_tolerated(self):
        graph = make_graph({"A": [], "B": []})

        plan = compute_plan(graph, ["A", "A"])

        assert plan.keep == ("A",)
        assert plan.remove == ("B",)

    def test_entrypoint_missing_from_its_closure_is_internal_error(self, monkeypatch):
        """Guard against a closure that fails to include its own root."""
        graph = make_graph({"A": []})
        monkeypatch.setattr(closure, "find_reachable_types", lambda graph, roots, keep: None)

        with pytest.raises(InternalConsistencyError, match="Didn't actually keep A"):
            compute_plan(graph, ["A"])

    @pytest.mark.parametrize(
        "edges,entrypoints",
        [
            ({"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": [], "E": ["A"]}, {"A"}),
            ({"A": ["A"], "B": ["C"], "C": ["B"]}, {"B"}),
            ({"A": ["B"], "B": ["C"], "C": ["D"], "D": ["B"], "X": ["Y"], "Y": []}, {"A", "Y"}),
        ],
    )
    def test_closure_matches_naive_reachability(self, edges, entrypoints):
        """The keep set is exactly what is reachable along recorded edges."""
        plan = compute_plan(make_graph(edges), sorted(entrypoints))

        expected = reference_reachable(edges, entrypoints)
        assert set(plan.keep) == expected
        assert set(plan.remove) == set(edges) - expected


class TestFindReachableTypes:
    """Tests for the shared keep/visited set."""

    def test_keep_is_shared_across_roots(self):
        graph = make_graph({"A": ["C"], "B": ["C"], "C": []})
        keep: dict[str, None] = {}

        find_reachable_types(graph, ["A"], keep)
        find_reachable_types(graph, ["B"], keep)

        assert list(keep) == ["A", "C", "B"]

    def test_unknown_root_is_ignored(self):
        keep: dict[str, None] = {}

        find_reachable_types(make_graph({"A": []}), ["nope"], keep)

        assert keep == {}
