"""
Type references.

TypeRef wraps a TypeScript type expression string and composes it with the
TypeScript type operators (unions, arrays, ``keyof`` ...). ``from_python``
maps Python type annotations onto their usual TypeScript counterparts.
"""

from __future__ import annotations

import collections.abc
import datetime
import decimal
import types
import typing
import uuid
from dataclasses import dataclass
from typing import Any

from ..utils.exceptions import BuilderError
from ..utils.string_utils import require_text
from .expression_ref import ExpressionRef, _args

_NONE_TYPE = type(None)

_PRIMITIVES = {
    bool: "boolean",
    int: "number",
    float: "number",
    complex: "number",
    decimal.Decimal: "number",
    datetime.timedelta: "number",
    str: "string",
    uuid.UUID: "string",
    bytes: "Uint8Array",
    bytearray: "Uint8Array",
    datetime.datetime: "Date",
    datetime.date: "Date",
    object: "unknown",
}

_SEQUENCE_ORIGINS = (
    list,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Iterable,
    collections.abc.Collection,
    collections.abc.Iterator,
)
_SET_ORIGINS = (set, frozenset, collections.abc.Set, collections.abc.MutableSet)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)
_AWAITABLE_ORIGINS = (collections.abc.Awaitable, collections.abc.Coroutine)


@dataclass(frozen=True)
class TypeRef:
    """A TypeScript type such as ``Record<string, number[]>``."""
    value: str

    @classmethod
    def from_(cls, type_name) -> "TypeRef":
        return cls(require_text(type_name, "Type name cannot be empty or whitespace.", "type_name"))

    def __str__(self) -> str:
        return self.value

    # -------------------------------------------------------------------------
    # Composite Types
    # -------------------------------------------------------------------------

    def of(self, *type_arguments) -> "TypeRef":
        """Apply type arguments: ``Name<A, B>``."""
        if not type_arguments:
            raise BuilderError("At least one type argument is required.", "type_arguments")
        return TypeRef(f"{self.value}<{_args(type_arguments)}>")

    @classmethod
    def union(cls, *types) -> "TypeRef":
        if len(types) < 2:
            raise BuilderError("Union requires at least two types.", "types")
        return cls(" | ".join(str(t) for t in types))

    @classmethod
    def intersection(cls, *types) -> "TypeRef":
        if len(types) < 2:
            raise BuilderError("Intersection requires at least two types.", "types")
        return cls(" & ".join(str(t) for t in types))

    @classmethod
    def tuple_(cls, *elements) -> "TypeRef":
        if not elements:
            raise BuilderError("Tuple requires at least one element.", "elements")
        return cls(f"[{_args(elements)}]")

    @classmethod
    def named_tuple(cls, *elements) -> "TypeRef":
        """Build ``[name: T, ...]`` from ``(type, name)`` pairs."""
        if not elements:
            raise BuilderError("Named tuple requires at least one element.", "elements")
        parts = ", ".join(f"{name}: {type_}" for type_, name in elements)
        return cls(f"[{parts}]")

    @classmethod
    def literal(cls, value: str) -> "TypeRef":
        """String literal type, rendered with double quotes."""
        return cls(f'"{value}"')

    @classmethod
    def numeric_literal(cls, value) -> "TypeRef":
        return cls(str(value))

    @classmethod
    def template_literal(cls, template: str) -> "TypeRef":
        return cls(template)

    # -------------------------------------------------------------------------
    # Modifiers
    # -------------------------------------------------------------------------

    def array(self) -> "TypeRef":
        return TypeRef(f"{self.value}[]")

    def nullable(self) -> "TypeRef":
        return TypeRef(f"{self.value} | null")

    def optional(self) -> "TypeRef":
        return TypeRef(f"{self.value} | undefined")

    def nullable_optional(self) -> "TypeRef":
        return TypeRef(f"{self.value} | null | undefined")

    def readonly(self) -> "TypeRef":
        return TypeRef(f"readonly {self.value}")

    def parenthesize(self) -> "TypeRef":
        return TypeRef(f"({self.value})")

    def key_of(self) -> "TypeRef":
        return TypeRef(f"keyof {self.value}")

    def type_of(self) -> "TypeRef":
        return TypeRef(f"typeof {self.value}")

    # -------------------------------------------------------------------------
    # Expression Gateways
    # -------------------------------------------------------------------------

    def new(self, *arguments) -> ExpressionRef:
        return ExpressionRef(f"new {self.value}({_args(arguments)})")

    def member(self, name: str) -> ExpressionRef:
        return ExpressionRef(f"{self.value}.{name}")

    def call(self, method: str, *arguments) -> ExpressionRef:
        return ExpressionRef(f"{self.value}.{method}({_args(arguments)})")

    # -------------------------------------------------------------------------
    # Python Type Mapping
    # -------------------------------------------------------------------------

    @classmethod
    def from_python(cls, annotation: Any) -> "TypeRef":
        """
        Map a Python type annotation to a TypeScript type.

        Numbers map to ``number``, strings and UUIDs to ``string``, dates to
        ``Date``, bytes to ``Uint8Array``. Sequences become ``T[]``, sets
        ``Set<T>``, mappings ``Record<K, V>``, fixed tuples ``[A, B]``,
        awaitables ``Promise<T>``, and ``Optional[T]`` becomes ``T | null``.
        Unknown classes map to their own name.

        Args:
            annotation: A class or typing construct (e.g. ``List[int]``)

        Returns:
            TypeRef for the mapped type
        """
        if annotation is None or annotation is _NONE_TYPE:
            return cls("void")
        if annotation is Any:
            return cls("unknown")

        origin = typing.get_origin(annotation)
        args = typing.get_args(annotation)

        if origin is typing.Union or _is_pep604_union(annotation):
            members = [arg for arg in args if arg is not _NONE_TYPE]
            mapped = [cls.from_python(arg) for arg in members]
            result = mapped[0] if len(mapped) == 1 else cls.union(*mapped)
            if len(members) < len(args):
                return result.nullable()
            return result

        if origin is typing.Literal:
            literals = [_literal(cls, arg) for arg in args]
            return literals[0] if len(literals) == 1 else cls.union(*literals)

        if origin is not None:
            return cls._from_generic(origin, args)

        if annotation in _PRIMITIVES:
            return cls(_PRIMITIVES[annotation])
        if annotation in (list, tuple):
            return cls("unknown[]")
        if annotation in _SET_ORIGINS:
            return cls("Set").of("unknown")
        if annotation in _MAPPING_ORIGINS:
            return cls("Record").of("string", "unknown")

        return cls(getattr(annotation, "__name__", str(annotation)))

    @classmethod
    def _from_generic(cls, origin, args) -> "TypeRef":
        if origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return _element(cls.from_python(args[0])).array()
            if not args:
                return cls("unknown[]")
            return cls.tuple_(*(cls.from_python(arg) for arg in args))
        if origin in _AWAITABLE_ORIGINS:
            return cls("Promise").of(cls.from_python(args[-1]) if args else cls("void"))
        if origin in _MAPPING_ORIGINS:
            return cls("Record").of(cls.from_python(args[0]), cls.from_python(args[1]))
        if origin in _SET_ORIGINS:
            return cls("Set").of(cls.from_python(args[0]))
        if origin in _SEQUENCE_ORIGINS:
            return _element(cls.from_python(args[0])).array()

        name = cls.from_python(origin)
        if not args:
            return name
        return name.of(*(cls.from_python(arg) for arg in args))


def _element(type_ref: TypeRef) -> TypeRef:
    if " | " in type_ref.value or " & " in type_ref.value:
        return type_ref.parenthesize()
    return type_ref


def _literal(cls, value) -> TypeRef:
    if isinstance(value, str):
        return cls.literal(value)
    if isinstance(value, bool):
        return cls.numeric_literal("true" if value else "false")
    return cls.numeric_literal(value)


def _is_pep604_union(annotation) -> bool:
    union_type = getattr(types, "UnionType", None)
    return union_type is not None and isinstance(annotation, union_type)
