"""Analysis modules for type reachability."""

from typeprune.analysis.closure import compute_plan, find_reachable_types
from typeprune.analysis.raw import TypeKind, classify, raw, referenced_raw_types
from typeprune.analysis.scanner import DependencyScanner, scan_forest, scan_unit

__all__ = [
    "DependencyScanner",
    "TypeKind",
    "classify",
    "compute_plan",
    "find_reachable_types",
    "raw",
    "referenced_raw_types",
    "scan_forest",
    "scan_unit",
]
