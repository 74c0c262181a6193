"""Syntax tree interface shared with the external parser and printer."""

from typeprune.tree.codec import dump_forest, forest_from_json, forest_to_json, load_forest
from typeprune.tree.nodes import (
    Annotation,
    Cast,
    ClassLiteral,
    DocBlockTag,
    DocComment,
    DocLink,
    DocReference,
    DocText,
    ExpressionStatement,
    Field,
    FieldAccess,
    Forest,
    Identifier,
    Import,
    InstanceOf,
    Literal,
    LocalVariable,
    Method,
    MethodInvocation,
    NewInstance,
    Node,
    Package,
    Parameter,
    Return,
    SourceUnit,
    Throw,
    TypeDeclaration,
    TypeParameter,
)
from typeprune.tree.types import (
    AnyType,
    ArrayType,
    ClassType,
    MethodType,
    ParameterizedType,
    PrimitiveType,
    TypeRef,
    TypeVariable,
    UnknownType,
    VariableType,
)
from typeprune.tree.visitor import TreeVisitor

__all__ = [
    # Nodes
    "Annotation",
    "Cast",
    "ClassLiteral",
    "DocBlockTag",
    "DocComment",
    "DocLink",
    "DocReference",
    "DocText",
    "ExpressionStatement",
    "Field",
    "FieldAccess",
    "Forest",
    "Identifier",
    "Import",
    "InstanceOf",
    "Literal",
    "LocalVariable",
    "Method",
    "MethodInvocation",
    "NewInstance",
    "Node",
    "Package",
    "Parameter",
    "Return",
    "SourceUnit",
    "Throw",
    "TypeDeclaration",
    "TypeParameter",
    # Types
    "AnyType",
    "ArrayType",
    "ClassType",
    "MethodType",
    "ParameterizedType",
    "PrimitiveType",
    "TypeRef",
    "TypeVariable",
    "UnknownType",
    "VariableType",
    # Traversal and interchange
    "TreeVisitor",
    "dump_forest",
    "forest_from_json",
    "forest_to_json",
    "load_forest",
]
