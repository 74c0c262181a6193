"""Immutable syntax tree nodes produced by the external parser.

Nodes never change after construction. A rewrite produces new nodes with
:func:`dataclasses.replace` and leaves untouched subtrees shared, so the
printer sees exactly the same objects (and whitespace) for anything a pass
did not modify.

``prefix`` holds the whitespace and non-doc comments the printer emits before
a node.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from typeprune.tree.types import AnyType, ClassType, MethodType, VariableType


class Node:
    """Base class for all syntax tree nodes."""

    __slots__ = ()


# === Documentation comments ===


@dataclass(frozen=True)
class DocText(Node):
    text: str
    prefix: str = ""


@dataclass(frozen=True)
class DocReference(Node):
    """The target of a structured doc cross-reference, e.g. ``Foo#bar(Baz)``.

    ``text`` is the reference exactly as written in the comment. ``types``
    holds every type attribution found inside the reference, such as the
    ``ClassType`` of ``Foo`` and the ``MethodType`` of ``bar``.
    """

    text: str
    types: tuple[AnyType, ...] = ()
    prefix: str = ""


@dataclass(frozen=True)
class DocLink(Node):
    """A structured cross-reference: ``{@link ...}``, ``@see ...``, ``@throws ...``."""

    tag: str
    reference: DocReference
    label: tuple[DocNode, ...] = ()
    inline: bool = True
    prefix: str = ""


@dataclass(frozen=True)
class DocBlockTag(Node):
    """A block tag without a structured target, e.g. ``@param`` or ``@return``."""

    tag: str
    body: tuple[DocNode, ...] = ()
    prefix: str = ""


@dataclass(frozen=True)
class DocComment(Node):
    body: tuple[DocNode, ...] = ()
    prefix: str = ""


DocNode = Union[DocText, DocLink, DocBlockTag]


# === Expressions ===


@dataclass(frozen=True)
class Identifier(Node):
    name: str
    type: AnyType | None = None
    variable: VariableType | None = None
    prefix: str = ""


@dataclass(frozen=True)
class Literal(Node):
    value: str
    type: AnyType | None = None
    prefix: str = ""


@dataclass(frozen=True)
class FieldAccess(Node):
    target: Expression
    name: str
    type: AnyType | None = None
    variable: VariableType | None = None
    prefix: str = ""


@dataclass(frozen=True)
class MethodInvocation(Node):
    name: str
    target: Expression | None = None
    arguments: tuple[Expression, ...] = ()
    method: MethodType | None = None
    type_arguments: tuple[AnyType, ...] = ()
    type: AnyType | None = None
    prefix: str = ""


@dataclass(frozen=True)
class NewInstance(Node):
    type: AnyType | None = None
    arguments: tuple[Expression, ...] = ()
    constructor: MethodType | None = None
    body: tuple[Member, ...] | None = None
    prefix: str = ""


@dataclass(frozen=True)
class Cast(Node):
    type: AnyType
    expression: Expression
    prefix: str = ""


@dataclass(frozen=True)
class InstanceOf(Node):
    expression: Expression
    type: AnyType
    prefix: str = ""


@dataclass(frozen=True)
class ClassLiteral(Node):
    """``Foo.class``"""

    type: AnyType
    prefix: str = ""


Expression = Union[
    Identifier,
    Literal,
    FieldAccess,
    MethodInvocation,
    NewInstance,
    Cast,
    InstanceOf,
    ClassLiteral,
]


# === Statements ===


@dataclass(frozen=True)
class LocalVariable(Node):
    name: str
    type: AnyType | None = None
    initializer: Expression | None = None
    prefix: str = ""


@dataclass(frozen=True)
class ExpressionStatement(Node):
    expression: Expression
    prefix: str = ""


@dataclass(frozen=True)
class Return(Node):
    expression: Expression | None = None
    prefix: str = ""


@dataclass(frozen=True)
class Throw(Node):
    expression: Expression
    prefix: str = ""


Statement = Union[LocalVariable, ExpressionStatement, Return, Throw]


# === Declarations ===


@dataclass(frozen=True)
class Annotation(Node):
    type: AnyType
    arguments: tuple[Expression, ...] = ()
    prefix: str = ""


@dataclass(frozen=True)
class TypeParameter(Node):
    name: str
    bounds: tuple[AnyType, ...] = ()
    annotations: tuple[Annotation, ...] = ()
    prefix: str = ""


@dataclass(frozen=True)
class Parameter(Node):
    name: str
    type: AnyType | None = None
    annotations: tuple[Annotation, ...] = ()
    prefix: str = ""


@dataclass(frozen=True)
class Field(Node):
    name: str
    type: AnyType | None = None
    modifiers: tuple[str, ...] = ()
    annotations: tuple[Annotation, ...] = ()
    initializer: Expression | None = None
    doc: DocComment | None = None
    prefix: str = ""


@dataclass(frozen=True)
class Method(Node):
    name: str
    signature: MethodType | None = None
    return_type: AnyType | None = None
    parameters: tuple[Parameter, ...] = ()
    type_parameters: tuple[TypeParameter, ...] = ()
    throws: tuple[AnyType, ...] = ()
    modifiers: tuple[str, ...] = ()
    annotations: tuple[Annotation, ...] = ()
    body: tuple[Statement, ...] | None = None
    doc: DocComment | None = None
    prefix: str = ""


@dataclass(frozen=True)
class TypeDeclaration(Node):
    """A class, interface, enum, record or annotation type declaration."""

    name: str
    type: ClassType
    kind: str = "class"
    modifiers: tuple[str, ...] = ()
    annotations: tuple[Annotation, ...] = ()
    type_parameters: tuple[TypeParameter, ...] = ()
    extends: AnyType | None = None
    implements: tuple[AnyType, ...] = ()
    members: tuple[Member, ...] = ()
    doc: DocComment | None = None
    prefix: str = ""

    @property
    def qualified_name(self) -> str:
        return self.type.fully_qualified_name


Member = Union[Field, Method, TypeDeclaration]


# === Source units ===


@dataclass(frozen=True)
class Package(Node):
    name: str
    prefix: str = ""


@dataclass(frozen=True)
class Import(Node):
    name: str
    type: AnyType | None = None
    static: bool = False
    prefix: str = ""


@dataclass(frozen=True)
class SourceUnit(Node):
    """One source file. Identity is its path."""

    path: str
    package: Package | None = None
    imports: tuple[Import, ...] = ()
    types: tuple[TypeDeclaration, ...] = ()
    eof: str = ""
    prefix: str = ""


Forest = tuple[SourceUnit, ...]

NODE_CLASSES: tuple[type[Node], ...] = (
    DocText,
    DocReference,
    DocLink,
    DocBlockTag,
    DocComment,
    Identifier,
    Literal,
    FieldAccess,
    MethodInvocation,
    NewInstance,
    Cast,
    InstanceOf,
    ClassLiteral,
    LocalVariable,
    ExpressionStatement,
    Return,
    Throw,
    Annotation,
    TypeParameter,
    Parameter,
    Field,
    Method,
    TypeDeclaration,
    Package,
    Import,
    SourceUnit,
)
