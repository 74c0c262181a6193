"""The unreachable type elimination pass."""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from typeprune.analysis.closure import compute_plan
from typeprune.analysis.scanner import scan_forest
from typeprune.errors import ConfigurationError
from typeprune.models.graph import DependencyGraph
from typeprune.models.results import (
    DroppedFile,
    PrunePlan,
    RemovedType,
    SanitizedReference,
)
from typeprune.rewrite.docrefs import DocReferenceSanitizer
from typeprune.rewrite.pruner import UnreachableTypePruner
from typeprune.tree.nodes import Forest, SourceUnit

logger = logging.getLogger(__name__)


@dataclass
class PassResult:
    """Output of one application of the pass."""

    forest: Forest
    graph: DependencyGraph
    plan: PrunePlan
    removed_types: list[RemovedType] = field(default_factory=list)
    dropped_files: list[DroppedFile] = field(default_factory=list)
    sanitized_references: list[SanitizedReference] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.removed_types or self.dropped_files or self.sanitized_references)


class EliminateUnreachableTypes:
    """
    Given a set of entrypoint types, eliminate all types that are not
    reachable from those entrypoints.

    Each application scans the whole forest, decides the keep and remove sets,
    and only then rewrites. A fatal error in the first two phases propagates
    before any unit is touched.

    With ``check_documentation`` set, types referenced from doc comments are
    kept alive. Otherwise doc references do not count as uses, and references
    to removed types are unlinked into plain text.
    """

    display_name = "Eliminate unreachable types"
    description = (
        "Given a set of entrypoint types, eliminate all types that are not "
        "reachable from those entrypoints."
    )

    def __init__(
        self,
        entrypoint_types: Iterable[str],
        check_documentation: bool | None = False,
    ) -> None:
        if isinstance(entrypoint_types, str):
            raise ConfigurationError(
                f"Entrypoint types must be a list of type names, got {entrypoint_types!r}"
            )
        self.entrypoint_types: tuple[str, ...] = tuple(dict.fromkeys(entrypoint_types))
        if not self.entrypoint_types:
            raise ConfigurationError("At least one entrypoint type is required")
        self.check_documentation = bool(check_documentation)

    def causes_another_cycle(self) -> bool:
        # The graph is always built from the tree before this pass's removals
        return True

    def scan(self, forest: Iterable[SourceUnit]) -> DependencyGraph:
        return scan_forest(forest, check_documentation=self.check_documentation)

    def plan(self, graph: DependencyGraph) -> PrunePlan:
        return compute_plan(graph, self.entrypoint_types)

    def apply(self, forest: Iterable[SourceUnit]) -> PassResult:
        forest = tuple(forest)
        graph = self.scan(forest)
        plan = self.plan(graph)

        sanitizer = None if self.check_documentation else DocReferenceSanitizer(plan)
        pruner = UnreachableTypePruner(plan, sanitizer=sanitizer)
        pruned = pruner.visit_forest(forest)

        return PassResult(
            forest=pruned,
            graph=graph,
            plan=plan,
            removed_types=pruner.removed_types,
            dropped_files=pruner.dropped_files,
            sanitized_references=sanitizer.sanitized if sanitizer else [],
        )
