"""Data models for the type dependency graph."""

from dataclasses import dataclass, field

from typeprune.tree.nodes import SourceUnit


@dataclass(eq=False)
class TypeModel:
    """A type seen while scanning, keyed by its qualified name."""

    qualified_name: str  # e.g., "com.acme.Outer$Inner"
    # The unit declaring the type; None for out-of-tree types, which can never be removed
    owning_unit: SourceUnit | None = None
    dependencies: set[str] = field(default_factory=set)

    @property
    def is_external(self) -> bool:
        return self.owning_unit is None

    def add_dependency(self, qualified_name: str) -> None:
        if qualified_name != self.qualified_name:
            self.dependencies.add(qualified_name)


@dataclass
class DependencyGraph:
    """Every scanned type, keyed by qualified name, in first-seen order."""

    models: dict[str, TypeModel] = field(default_factory=dict)

    def __contains__(self, qualified_name: str) -> bool:
        return qualified_name in self.models

    def __len__(self) -> int:
        return len(self.models)

    def __iter__(self):
        return iter(self.models.values())

    def get(self, qualified_name: str) -> TypeModel | None:
        return self.models.get(qualified_name)

    def reference(self, qualified_name: str) -> TypeModel:
        """Get the model for a referenced type, recording it as out-of-tree if unseen."""
        model = self.models.get(qualified_name)
        if model is None:
            model = TypeModel(qualified_name)
            self.models[qualified_name] = model
        return model

    def declare(self, qualified_name: str, unit: SourceUnit) -> TypeModel:
        """Record that ``unit`` declares the type, upgrading an out-of-tree placeholder."""
        model = self.reference(qualified_name)
        model.owning_unit = unit
        return model

    def in_tree_names(self) -> list[str]:
        """Qualified names of types declared in the scanned forest."""
        return [name for name, model in self.models.items() if not model.is_external]

    def external_names(self) -> list[str]:
        return [name for name, model in self.models.items() if model.is_external]

    def merge(self, other: "DependencyGraph") -> list[str]:
        """
        Fold another graph into this one.

        An in-tree model replaces an out-of-tree placeholder of the same name.
        Returns the names declared in-tree by both graphs; their dependencies
        are unioned and the later unit wins ownership.
        """
        duplicates: list[str] = []
        for name, incoming in other.models.items():
            existing = self.models.get(name)
            if existing is None:
                self.models[name] = incoming
                continue
            if not existing.is_external and not incoming.is_external:
                duplicates.append(name)
            if not incoming.is_external:
                self.declare(name, incoming.owning_unit)
            existing.dependencies |= incoming.dependencies
        return duplicates
