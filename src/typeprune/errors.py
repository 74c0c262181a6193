"""Exceptions raised by a pruning pass."""


class TypePruneError(Exception):
    """Base class for errors that abort a pruning pass."""


class ConfigurationError(TypePruneError, ValueError):
    """The pass was configured with entrypoints it cannot honour."""


class InternalConsistencyError(TypePruneError, RuntimeError):
    """An invariant of the dependency graph was violated; this is a bug, not bad input."""
