"""Data models for typeprune."""

from typeprune.models.graph import DependencyGraph, TypeModel
from typeprune.models.results import (
    DroppedFile,
    PruneMetadata,
    PrunePlan,
    PruneResults,
    PruneSummary,
    RemovedType,
    SanitizedReference,
)

__all__ = [
    # Graph models
    "DependencyGraph",
    "TypeModel",
    # Results models
    "DroppedFile",
    "PruneMetadata",
    "PrunePlan",
    "PruneResults",
    "PruneSummary",
    "RemovedType",
    "SanitizedReference",
]
