"""Tree visitor that records type-to-type dependencies."""

import logging
from typing import Iterable

from typeprune.analysis.raw import referenced_raw_types
from typeprune.models.graph import DependencyGraph, TypeModel
from typeprune.tree.nodes import DocComment, Import, Package, SourceUnit, TypeDeclaration
from typeprune.tree.types import TypeRef
from typeprune.tree.visitor import TreeVisitor

logger = logging.getLogger(__name__)


class DependencyScanner(TreeVisitor):
    """
    Visitor that builds the dependency graph of a single source unit.

    Every type attribution met inside a type declaration (supertypes, fields,
    signatures, locals, annotations, generic arguments and bounds) becomes a
    dependency of the innermost enclosing declaration. Imports and the package
    declaration are never entered: an import alone must not keep a type alive.
    Doc comments are only entered when ``check_documentation`` is set.
    """

    def __init__(self, check_documentation: bool = False) -> None:
        self.check_documentation = check_documentation
        self.graph = DependencyGraph()

        self._current: TypeModel | None = None
        # Declarations of the unit being scanned, bound to it once the unit is done
        self._in_unit: list[TypeModel] = []

    def visit_SourceUnit(self, unit: SourceUnit) -> SourceUnit:
        self.generic_visit(unit)
        for model in self._in_unit:
            self.graph.declare(model.qualified_name, unit)
        self._in_unit.clear()
        return unit

    def visit_Package(self, node: Package) -> Package:
        return node

    def visit_Import(self, node: Import) -> Import:
        return node

    def visit_DocComment(self, node: DocComment) -> DocComment:
        if self.check_documentation:
            self.generic_visit(node)
        return node

    def visit_TypeDeclaration(self, decl: TypeDeclaration) -> TypeDeclaration:
        enclosing = self._current
        model = self.graph.reference(decl.qualified_name)
        if model in self._in_unit:
            logger.warning("Type %s is declared twice in the same unit", decl.qualified_name)
        else:
            self._in_unit.append(model)

        # A nested type cannot outlive the type that contains it
        if enclosing is not None:
            model.add_dependency(enclosing.qualified_name)

        self._current = model
        try:
            self.generic_visit(decl)
        finally:
            self._current = enclosing
        return decl

    def visit_type(self, type_ref: TypeRef) -> TypeRef:
        if self._current is not None:
            for class_type in referenced_raw_types(type_ref):
                name = class_type.fully_qualified_name
                self.graph.reference(name)
                self._current.add_dependency(name)
        return type_ref


def scan_unit(unit: SourceUnit, check_documentation: bool = False) -> DependencyGraph:
    """Build the dependency graph of one unit."""
    scanner = DependencyScanner(check_documentation=check_documentation)
    scanner.visit(unit)
    return scanner.graph


def scan_forest(
    forest: Iterable[SourceUnit],
    check_documentation: bool = False,
) -> DependencyGraph:
    """
    Build the dependency graph of a whole forest.

    Units are scanned independently and folded into one graph, so the result
    does not depend on which unit declares a type and which only uses it.
    """
    graph = DependencyGraph()
    units = 0
    for unit in forest:
        units += 1
        for name in graph.merge(scan_unit(unit, check_documentation)):
            logger.warning(
                "Type %s is declared in more than one unit; using the declaration in %s",
                name,
                unit.path,
            )

    logger.debug(
        "Scanned %d units: %d types in tree, %d out of tree",
        units,
        len(graph.in_tree_names()),
        len(graph.external_names()),
    )
    return graph
