"""
Helpers for the TypeScript built-in utility types.

Each helper returns a TypeRef, e.g. ``pick("User", '"id" | "name"')`` gives
``Pick<User, "id" | "name">``.
"""

from __future__ import annotations

from .type_ref import TypeRef


def _utility(name: str, *arguments) -> TypeRef:
    return TypeRef.from_(name).of(*arguments)


def partial(inner) -> TypeRef:
    return _utility("Partial", inner)


def required(inner) -> TypeRef:
    return _utility("Required", inner)


def readonly_of(inner) -> TypeRef:
    return _utility("Readonly", inner)


def pick(object_type, keys) -> TypeRef:
    return _utility("Pick", object_type, keys)


def omit(object_type, keys) -> TypeRef:
    return _utility("Omit", object_type, keys)


def record(key_type, value_type) -> TypeRef:
    return _utility("Record", key_type, value_type)


def exclude(union_type, excluded) -> TypeRef:
    return _utility("Exclude", union_type, excluded)


def extract(union_type, extracted) -> TypeRef:
    return _utility("Extract", union_type, extracted)


def non_nullable(inner) -> TypeRef:
    return _utility("NonNullable", inner)


def return_type(function_type) -> TypeRef:
    return _utility("ReturnType", function_type)


def parameters(function_type) -> TypeRef:
    return _utility("Parameters", function_type)


def instance_type(constructor_type) -> TypeRef:
    return _utility("InstanceType", constructor_type)


def awaited(inner) -> TypeRef:
    return _utility("Awaited", inner)
