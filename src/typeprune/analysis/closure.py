"""Reachability closure over the type dependency graph."""

import logging
from typing import Iterable

from typeprune.errors import ConfigurationError, InternalConsistencyError
from typeprune.models.graph import DependencyGraph
from typeprune.models.results import PrunePlan

logger = logging.getLogger(__name__)


def find_reachable_types(
    graph: DependencyGraph,
    roots: Iterable[str],
    keep: dict[str, None],
) -> None:
    """
    Add ``roots`` and every in-tree type reachable from them to ``keep``.

    ``keep`` is an insertion-ordered set shared across entrypoints and doubles
    as the visited set, so cycles are walked exactly once. Out-of-tree types
    are never expanded.
    """
    to_visit: list[str] = []
    for root in roots:
        if root in graph and root not in keep:
            keep[root] = None
            to_visit.append(root)

    while to_visit:
        current = to_visit.pop()
        model = graph.get(current)
        if model is None or model.is_external:
            continue
        for dependency in sorted(model.dependencies):
            target = graph.get(dependency)
            if target is None or target.is_external or dependency in keep:
                continue
            keep[dependency] = None
            to_visit.append(dependency)


def compute_plan(graph: DependencyGraph, entrypoint_types: Iterable[str]) -> PrunePlan:
    """
    Partition the in-tree types of ``graph`` into kept and removed.

    Raises:
        ConfigurationError: an entrypoint is not among the scanned types.
        InternalConsistencyError: an entrypoint did not survive its own closure.
    """
    keep: dict[str, None] = {}
    for entrypoint in dict.fromkeys(entrypoint_types):
        if entrypoint not in graph:
            raise ConfigurationError(f"Didn't find type {entrypoint} in the sources")
        find_reachable_types(graph, [entrypoint], keep)
        if entrypoint not in keep:
            raise InternalConsistencyError(f"Didn't actually keep {entrypoint}")

    remove = tuple(name for name in graph.in_tree_names() if name not in keep)
    logger.debug("Keeping %d types, removing %d", len(keep), len(remove))
    return PrunePlan(keep=tuple(keep), remove=remove)
