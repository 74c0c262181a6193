"""Tests for the dependency graph model."""

from typeprune.models.graph import DependencyGraph, TypeModel
from typeprune.tree.nodes import SourceUnit

UNIT_A = SourceUnit(path="a/A.java")
UNIT_B = SourceUnit(path="b/B.java")


class TestDependencyGraph:
    """Tests for declaring, referencing and merging types."""

    def test_reference_records_out_of_tree_placeholder(self):
        graph = DependencyGraph()

        model = graph.reference("java.lang.String")

        assert model.is_external
        assert graph.external_names() == ["java.lang.String"]
        assert graph.in_tree_names() == []

    def test_declare_upgrades_placeholder(self):
        """A type used before its declaration keeps its model and dependencies."""
        graph = DependencyGraph()
        placeholder = graph.reference("a.A")
        placeholder.add_dependency("a.B")

        model = graph.declare("a.A", UNIT_A)

        assert model is placeholder
        assert model.owning_unit is UNIT_A
        assert model.dependencies == {"a.B"}
        assert graph.in_tree_names() == ["a.A"]

    def test_declare_new_type(self):
        graph = DependencyGraph()

        graph.declare("a.A", UNIT_A)

        assert "a.A" in graph
        assert len(graph) == 1

    def test_self_dependency_is_ignored(self):
        model = TypeModel("a.A", UNIT_A)

        model.add_dependency("a.A")

        assert model.dependencies == set()

    def test_merge_unions_and_reports_duplicates(self):
        first = DependencyGraph()
        first.declare("a.A", UNIT_A).add_dependency("a.B")
        second = DependencyGraph()
        second.declare("a.A", UNIT_B).add_dependency("a.C")

        duplicates = first.merge(second)

        assert duplicates == ["a.A"]
        assert first.get("a.A").dependencies == {"a.B", "a.C"}
        assert first.get("a.A").owning_unit is UNIT_B

    def test_merge_declaration_into_placeholder(self):
        first = DependencyGraph()
        first.reference("b.B")
        second = DependencyGraph()
        second.declare("b.B", UNIT_B)

        assert first.merge(second) == []
        assert first.get("b.B").owning_unit is UNIT_B

    def test_merge_placeholder_keeps_declaration(self):
        first = DependencyGraph()
        first.declare("a.A", UNIT_A)
        second = DependencyGraph()
        second.reference("a.A")

        assert first.merge(second) == []
        assert first.get("a.A").owning_unit is UNIT_A
