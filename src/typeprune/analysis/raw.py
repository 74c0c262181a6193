"""Raw type resolution: the nominal declared type behind a type attribution."""

from enum import Enum, auto
from typing import Iterator, assert_never

from typeprune.tree.types import (
    AnyType,
    ArrayType,
    ClassType,
    MethodType,
    ParameterizedType,
    PrimitiveType,
    TypeVariable,
    UnknownType,
    VariableType,
)


class TypeKind(Enum):
    """The closed set of type attribution forms."""

    CLASS = auto()
    PARAMETERIZED = auto()
    TYPE_VARIABLE = auto()
    ARRAY = auto()
    METHOD = auto()
    VARIABLE = auto()
    PRIMITIVE = auto()
    UNKNOWN = auto()


def classify(type_ref: AnyType) -> TypeKind:
    match type_ref:
        case ClassType():
            return TypeKind.CLASS
        case ParameterizedType():
            return TypeKind.PARAMETERIZED
        case TypeVariable():
            return TypeKind.TYPE_VARIABLE
        case ArrayType():
            return TypeKind.ARRAY
        case MethodType():
            return TypeKind.METHOD
        case VariableType():
            return TypeKind.VARIABLE
        case PrimitiveType():
            return TypeKind.PRIMITIVE
        case UnknownType():
            return TypeKind.UNKNOWN
        case _:
            assert_never(type_ref)


def raw(type_ref: AnyType | None) -> ClassType | None:
    """
    Resolve a single type attribution to its raw declared type.

    ``Box<Foo>`` resolves to ``Box``, ``T extends Bar`` to ``Bar`` and
    ``Baz[]`` to ``Baz``. Methods and variables have no single raw type (see
    :func:`referenced_raw_types`); primitives, unknown types and unbounded
    type variables have none at all.
    """
    match type_ref:
        case None:
            return None
        case ClassType():
            return type_ref
        case ParameterizedType(type=base):
            return raw(base)
        case TypeVariable(bounds=bounds):
            return raw(bounds[0]) if bounds else None
        case ArrayType(element_type=element_type):
            return raw(element_type)
        case MethodType() | VariableType() | PrimitiveType() | UnknownType():
            return None
        case _:
            assert_never(type_ref)


def referenced_raw_types(
    type_ref: AnyType | None,
    _expanding: frozenset[str] = frozenset(),
) -> Iterator[ClassType]:
    """
    Yield every raw declared type a type attribution refers to.

    Type arguments, all bounds of a type variable, array elements, method
    return and parameter types, and variable types are followed recursively.
    A type variable already being expanded (``T extends Comparable<T>``) is
    not entered again.
    """
    match type_ref:
        case None:
            return
        case ClassType():
            yield type_ref
        case ParameterizedType(type=base, type_parameters=type_parameters):
            yield from referenced_raw_types(base, _expanding)
            for argument in type_parameters:
                yield from referenced_raw_types(argument, _expanding)
        case TypeVariable(name=name, bounds=bounds):
            if name in _expanding:
                return
            for bound in bounds:
                yield from referenced_raw_types(bound, _expanding | {name})
        case ArrayType(element_type=element_type):
            yield from referenced_raw_types(element_type, _expanding)
        case MethodType(return_type=return_type, parameter_types=parameter_types):
            yield from referenced_raw_types(return_type, _expanding)
            for parameter in parameter_types:
                yield from referenced_raw_types(parameter, _expanding)
        case VariableType(type=declared):
            yield from referenced_raw_types(declared, _expanding)
        case PrimitiveType() | UnknownType():
            return
        case _:
            assert_never(type_ref)
