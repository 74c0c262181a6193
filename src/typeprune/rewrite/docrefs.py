"""Rewrite doc cross-references that point at removed types into plain text."""

import logging

from typeprune.analysis.raw import TypeKind, classify, raw
from typeprune.models.results import PrunePlan, SanitizedReference
from typeprune.tree.nodes import DocLink, DocReference, DocText
from typeprune.tree.types import AnyType
from typeprune.tree.visitor import TreeVisitor

logger = logging.getLogger(__name__)


class DocReferenceSanitizer(TreeVisitor):
    """
    Visitor over doc comments that unlinks references to removed types.

    Every structured cross-reference (``{@link}``, ``{@linkplain}``, ``@see``,
    ``@throws`` and so on) is resolved through the same raw type rules as the
    dependency scan. Class, parameterized, type variable and array targets are
    tested by their raw type; a method or field target is tested through its
    signature. The replacement is a text node holding exactly the reference as
    written.
    """

    def __init__(self, plan: PrunePlan) -> None:
        self.plan = plan
        self.current_file = ""
        self.sanitized: list[SanitizedReference] = []

    def visit_DocLink(self, link: DocLink) -> DocLink | DocText:
        link = self.generic_visit(link)
        removed = self.removed_targets(link.reference)
        if not removed:
            return link

        self.sanitized.append(
            SanitizedReference(
                file=self.current_file,
                tag=link.tag,
                text=link.reference.text,
                removed_types=removed,
            )
        )
        return DocText(text=link.reference.text, prefix=link.prefix)

    def removed_targets(self, reference: DocReference) -> list[str]:
        """Names of removed types the reference points at, in first-seen order."""
        removed: dict[str, None] = {}
        resolved = False
        for type_ref in reference.types:
            for name in self._target_names(type_ref):
                resolved = True
                if self.plan.removes(name):
                    removed[name] = None

        if not resolved:
            logger.debug(
                "Leaving doc reference %r in %s: no resolvable type",
                reference.text,
                self.current_file,
            )
        return list(removed)

    def _target_names(self, type_ref: AnyType | None) -> list[str]:
        if type_ref is None:
            return []
        kind = classify(type_ref)
        if kind is TypeKind.METHOD:
            names = self._target_names(type_ref.return_type)
            for parameter in type_ref.parameter_types:
                names.extend(self._target_names(parameter))
            return names
        if kind is TypeKind.VARIABLE:
            return self._target_names(type_ref.type)

        target = raw(type_ref)
        return [target.fully_qualified_name] if target is not None else []
