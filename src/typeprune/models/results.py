"""Data models for pruning results."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class PrunePlan:
    """Partition of the in-tree types into kept and removed, for one pass."""

    keep: tuple[str, ...] = ()
    remove: tuple[str, ...] = ()
    _keep_set: frozenset[str] = field(init=False, repr=False, compare=False)
    _remove_set: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._keep_set = frozenset(self.keep)
        self._remove_set = frozenset(self.remove)

    def keeps(self, qualified_name: str) -> bool:
        return qualified_name in self._keep_set

    def removes(self, qualified_name: str) -> bool:
        return qualified_name in self._remove_set


@dataclass
class RemovedType:
    """A type declaration deleted by a pass."""

    qualified_name: str
    kind: str
    file: str
    nested: bool = False

    def to_dict(self) -> dict:
        return {
            "qualified_name": self.qualified_name,
            "kind": self.kind,
            "file": self.file,
            "nested": self.nested,
        }


@dataclass
class DroppedFile:
    """A source unit dropped because no type declarations remained in it."""

    file: str
    removed_types: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"file": self.file, "removed_types": self.removed_types}


@dataclass
class SanitizedReference:
    """A doc cross-reference to a removed type that was turned into plain text."""

    file: str
    tag: str
    text: str
    removed_types: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "tag": self.tag,
            "text": self.text,
            "removed_types": self.removed_types,
        }


@dataclass
class PruneMetadata:
    """Metadata about the pruning run."""

    forest: str
    pruned_at: datetime
    typeprune_version: str
    entrypoint_types: list[str]
    check_documentation: bool
    cycles: int
    converged: bool
    duration_ms: int

    def to_dict(self) -> dict:
        return {
            "forest": self.forest,
            "pruned_at": self.pruned_at.isoformat(),
            "typeprune_version": self.typeprune_version,
            "entrypoint_types": self.entrypoint_types,
            "check_documentation": self.check_documentation,
            "cycles": self.cycles,
            "converged": self.converged,
            "duration_ms": self.duration_ms,
        }


@dataclass
class PruneSummary:
    """Summary of pruning results."""

    files_before: int
    files_after: int
    types_before: int
    types_kept: int
    types_removed: int
    references_sanitized: int
    by_kind: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "files_before": self.files_before,
            "files_after": self.files_after,
            "types_before": self.types_before,
            "types_kept": self.types_kept,
            "types_removed": self.types_removed,
            "references_sanitized": self.references_sanitized,
            "by_kind": self.by_kind,
        }


@dataclass
class PruneResults:
    """Complete pruning results."""

    version: str = "1.0"
    metadata: PruneMetadata | None = None
    summary: PruneSummary | None = None
    removed_types: list[RemovedType] = field(default_factory=list)
    dropped_files: list[DroppedFile] = field(default_factory=list)
    sanitized_references: list[SanitizedReference] = field(default_factory=list)

    def to_dict(self) -> dict:
        result: dict = {"version": self.version}

        if self.metadata:
            result["metadata"] = self.metadata.to_dict()

        if self.summary:
            result["summary"] = self.summary.to_dict()

        result["removed_types"] = [item.to_dict() for item in self.removed_types]
        result["dropped_files"] = [item.to_dict() for item in self.dropped_files]
        result["sanitized_references"] = [
            item.to_dict() for item in self.sanitized_references
        ]

        return result
