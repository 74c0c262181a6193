"""Tree rewrites applied once the keep/remove decision is final."""

from typeprune.rewrite.docrefs import DocReferenceSanitizer
from typeprune.rewrite.pruner import UnreachableTypePruner

__all__ = ["DocReferenceSanitizer", "UnreachableTypePruner"]
