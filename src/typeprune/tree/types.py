"""Type attributions attached to syntax tree nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class TypeRef:
    """Base class for every resolved type attribution."""

    __slots__ = ()


@dataclass(frozen=True)
class ClassType(TypeRef):
    """A declared nominal type (class, interface, enum, record, annotation)."""

    fully_qualified_name: str
    kind: str = "class"

    @property
    def simple_name(self) -> str:
        return self.fully_qualified_name.rsplit(".", 1)[-1].rsplit("$", 1)[-1]


@dataclass(frozen=True)
class ParameterizedType(TypeRef):
    """A generic instantiation such as ``Box<Foo>``."""

    type: ClassType
    type_parameters: tuple[AnyType, ...] = ()


@dataclass(frozen=True)
class TypeVariable(TypeRef):
    """A type variable; ``bounds`` are its upper bounds in declaration order."""

    name: str
    bounds: tuple[AnyType, ...] = ()


@dataclass(frozen=True)
class ArrayType(TypeRef):
    element_type: AnyType


@dataclass(frozen=True)
class MethodType(TypeRef):
    """A method signature, as attached to invocations and member references."""

    name: str
    return_type: AnyType | None = None
    parameter_types: tuple[AnyType, ...] = ()
    declaring_type: ClassType | None = None


@dataclass(frozen=True)
class VariableType(TypeRef):
    """A field, parameter or local variable, as attached to references to it."""

    name: str
    type: AnyType | None = None
    owner: ClassType | None = None


@dataclass(frozen=True)
class PrimitiveType(TypeRef):
    keyword: str


@dataclass(frozen=True)
class UnknownType(TypeRef):
    """A reference the parser could not resolve."""


AnyType = Union[
    ClassType,
    ParameterizedType,
    TypeVariable,
    ArrayType,
    MethodType,
    VariableType,
    PrimitiveType,
    UnknownType,
]

TYPE_CLASSES: tuple[type[TypeRef], ...] = (
    ClassType,
    ParameterizedType,
    TypeVariable,
    ArrayType,
    MethodType,
    VariableType,
    PrimitiveType,
    UnknownType,
)
