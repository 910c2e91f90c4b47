"""
Property builder.

A property renders either as a plain declaration line or, once a getter or
setter is supplied, as a ``get``/``set`` accessor pair.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..utils.string_utils import require_text
from .body import BodyBuilder, BodyCallback
from .kinds import Accessibility


@dataclass(frozen=True)
class PropertyBuilder:
    """A class or interface property with optional accessors."""
    name: str
    type: str
    accessibility: Accessibility = Accessibility.NONE
    is_readonly: bool = False
    is_optional: bool = False
    is_static: bool = False
    is_abstract: bool = False
    is_override: bool = False
    getter_expression: Optional[str] = None
    getter_body: Optional[BodyBuilder] = None
    setter_body: Optional[BodyBuilder] = None
    initializer: Optional[str] = None

    @classmethod
    def for_(cls, name, type_) -> "PropertyBuilder":
        return cls(
            name=require_text(name, "Property name cannot be empty or whitespace.", "name"),
            type=require_text(type_, "Property type cannot be empty or whitespace.", "type"),
        )

    @property
    def has_getter(self) -> bool:
        return self.getter_expression is not None or self.getter_body is not None

    @property
    def has_accessor(self) -> bool:
        return self.has_getter or self.setter_body is not None

    def with_accessibility(self, accessibility: Accessibility) -> "PropertyBuilder":
        return replace(self, accessibility=accessibility)

    def as_readonly(self) -> "PropertyBuilder":
        return replace(self, is_readonly=True)

    def as_optional(self) -> "PropertyBuilder":
        return replace(self, is_optional=True)

    def as_static(self) -> "PropertyBuilder":
        return replace(self, is_static=True)

    def as_abstract(self) -> "PropertyBuilder":
        return replace(self, is_abstract=True)

    def as_override(self) -> "PropertyBuilder":
        return replace(self, is_override=True)

    def with_getter(self, getter) -> "PropertyBuilder":
        """
        Add a getter.

        Args:
            getter: Either an expression returned by the getter, or a
                callback receiving an empty BodyBuilder and returning the
                getter body
        """
        if callable(getter):
            return replace(self, getter_body=getter(BodyBuilder.empty()))
        return replace(self, getter_expression=str(getter))

    def with_setter(self, configure: BodyCallback) -> "PropertyBuilder":
        """Add a setter whose parameter is named ``value``."""
        return replace(self, setter_body=configure(BodyBuilder.empty()))

    def with_initializer(self, expression) -> "PropertyBuilder":
        return replace(self, initializer=str(expression))
