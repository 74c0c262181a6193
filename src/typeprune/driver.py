"""Rerun a pass until the forest stops changing."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Protocol, runtime_checkable

from typeprune.errors import ConfigurationError
from typeprune.models.results import DroppedFile, RemovedType, SanitizedReference
from typeprune.recipe import PassResult
from typeprune.tree.nodes import Forest, SourceUnit

logger = logging.getLogger(__name__)

DEFAULT_MAX_CYCLES = 3


@runtime_checkable
class Recipe(Protocol):
    """A pass the driver can apply repeatedly."""

    def apply(self, forest: Iterable[SourceUnit]) -> PassResult:
        """Apply the pass to a forest and return the rewritten forest."""
        ...

    def causes_another_cycle(self) -> bool:
        """Whether the pass must be applied again after it changed something."""
        ...


@dataclass
class PruneRun:
    """All passes applied by :func:`run_to_fixed_point`."""

    forest: Forest
    passes: list[PassResult] = field(default_factory=list)
    converged: bool = False

    @property
    def cycles(self) -> int:
        return len(self.passes)

    @property
    def removed_types(self) -> list[RemovedType]:
        return [item for result in self.passes for item in result.removed_types]

    @property
    def dropped_files(self) -> list[DroppedFile]:
        return [item for result in self.passes for item in result.dropped_files]

    @property
    def sanitized_references(self) -> list[SanitizedReference]:
        return [item for result in self.passes for item in result.sanitized_references]


def run_to_fixed_point(
    forest: Iterable[SourceUnit],
    recipe: Recipe,
    max_cycles: int = DEFAULT_MAX_CYCLES,
) -> PruneRun:
    """
    Apply ``recipe`` until a pass changes nothing or ``max_cycles`` is reached.

    Passes share no state: each one sees only the forest the previous pass
    produced. An exception from any pass propagates and no forest is returned.
    """
    if max_cycles < 1:
        raise ConfigurationError(f"max_cycles must be at least 1, got {max_cycles}")

    run = PruneRun(forest=tuple(forest))
    for cycle in range(1, max_cycles + 1):
        result = recipe.apply(run.forest)
        run.passes.append(result)
        logger.info(
            "Cycle %d: removed %d types, dropped %d files, unlinked %d doc references",
            cycle,
            len(result.removed_types),
            len(result.dropped_files),
            len(result.sanitized_references),
        )

        if not result.changed:
            run.converged = True
            return run
        run.forest = result.forest
        if not recipe.causes_another_cycle():
            return run

    logger.warning("No fixed point reached after %d cycles", max_cycles)
    return run
