"""typeprune - eliminate types unreachable from a set of entrypoints."""

__version__ = "0.1.0"
