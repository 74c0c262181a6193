"""Generic visit-and-replace traversal over syntax trees."""

from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Iterable

from typeprune.tree.nodes import Forest, Node, SourceUnit
from typeprune.tree.types import TypeRef


class TreeVisitor:
    """
    Walks a tree and rebuilds it from the values returned by each visit.

    Works like :class:`ast.NodeTransformer`: ``visit`` dispatches to
    ``visit_<ClassName>`` and falls back to :meth:`generic_visit`. A visit
    method returns the node to put in place of the one it was given; returning
    ``None`` deletes the node from its parent. Type attributions are passed to
    :meth:`visit_type`.

    A node whose children all come back unchanged is returned as the very
    same object, so untouched subtrees keep their identity across a rewrite.
    """

    def visit(self, node: Node) -> Any:
        method = getattr(self, f"visit_{type(node).__name__}", self.generic_visit)
        return method(node)

    def visit_type(self, type_ref: TypeRef) -> TypeRef:
        return type_ref

    def generic_visit(self, node: Node) -> Any:
        changes: dict[str, Any] = {}
        for f in fields(node):
            value = getattr(node, f.name)
            new_value = self._visit_value(value)
            if new_value is not value:
                changes[f.name] = new_value
        return replace(node, **changes) if changes else node

    def visit_forest(self, forest: Iterable[SourceUnit]) -> Forest:
        """Visit every unit, dropping those whose visit returns ``None``."""
        result = []
        for unit in forest:
            new_unit = self.visit(unit)
            if new_unit is not None:
                result.append(new_unit)
        return tuple(result)

    def _visit_value(self, value: Any) -> Any:
        if isinstance(value, Node):
            return self.visit(value)
        if isinstance(value, TypeRef):
            return self.visit_type(value)
        if isinstance(value, tuple):
            items = []
            changed = False
            for item in value:
                new_item = self._visit_value(item)
                if new_item is not item:
                    changed = True
                if new_item is not None:
                    items.append(new_item)
            return tuple(items) if changed else value
        return value
