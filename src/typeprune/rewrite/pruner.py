"""Tree visitor that deletes unreachable type declarations."""

import logging

from typeprune.models.results import DroppedFile, PrunePlan, RemovedType
from typeprune.rewrite.docrefs import DocReferenceSanitizer
from typeprune.tree.nodes import DocComment, SourceUnit, TypeDeclaration
from typeprune.tree.visitor import TreeVisitor

logger = logging.getLogger(__name__)


class UnreachableTypePruner(TreeVisitor):
    """
    Deletes every declaration in the plan's remove set.

    Top-level and nested declarations are removed alike. A unit left without
    top-level declarations is dropped from the forest. Everything else,
    imports included, is kept as the identical objects the parser produced.

    When a ``sanitizer`` is given, doc comments in the kept tree are passed
    through it.
    """

    def __init__(
        self,
        plan: PrunePlan,
        sanitizer: DocReferenceSanitizer | None = None,
    ) -> None:
        self.plan = plan
        self.sanitizer = sanitizer
        self.removed_types: list[RemovedType] = []
        self.dropped_files: list[DroppedFile] = []

        self._current_file = ""
        self._depth = 0

    def visit_SourceUnit(self, unit: SourceUnit) -> SourceUnit | None:
        self._current_file = unit.path
        if self.sanitizer is not None:
            self.sanitizer.current_file = unit.path
        removed_before = len(self.removed_types)

        new_unit = self.generic_visit(unit)
        if new_unit.types:
            return new_unit

        removed = [item.qualified_name for item in self.removed_types[removed_before:]]
        logger.debug("Dropping %s: no type declarations left", unit.path)
        self.dropped_files.append(DroppedFile(file=unit.path, removed_types=removed))
        return None

    def visit_TypeDeclaration(self, decl: TypeDeclaration) -> TypeDeclaration | None:
        if self.plan.removes(decl.qualified_name):
            self.removed_types.append(
                RemovedType(
                    qualified_name=decl.qualified_name,
                    kind=decl.kind,
                    file=self._current_file,
                    nested=self._depth > 0,
                )
            )
            return None

        self._depth += 1
        try:
            return self.generic_visit(decl)
        finally:
            self._depth -= 1

    def visit_DocComment(self, doc: DocComment) -> DocComment:
        if self.sanitizer is None:
            return doc
        return self.sanitizer.visit(doc)
