"""
Method builder.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..utils.string_utils import require_text
from .body import BodyBuilder, BodyCallback
from .kinds import Accessibility
from .parameter import ParameterBuilder, make_parameter


def type_parameter(name, constraint=None) -> str:
    """Render a type parameter, ``T`` or ``T extends C``."""
    name = require_text(name, "Type parameter name cannot be empty or whitespace.", "name")
    if constraint is None:
        return name
    return f"{name} extends {constraint}"


@dataclass(frozen=True)
class MethodBuilder:
    """A method declaration with either a block body or an expression body."""
    name: str
    return_type: Optional[str] = None
    accessibility: Accessibility = Accessibility.NONE
    is_static: bool = False
    is_async: bool = False
    is_abstract: bool = False
    is_override: bool = False
    is_generator: bool = False
    is_optional: bool = False
    type_parameters: Tuple[str, ...] = ()
    parameters: Tuple[ParameterBuilder, ...] = ()
    body: Optional[BodyBuilder] = None
    expression_body: Optional[str] = None
    overload_signatures: Tuple[str, ...] = ()
    decorators: Tuple[str, ...] = ()

    @classmethod
    def for_(cls, name) -> "MethodBuilder":
        return cls(name=require_text(name, "Method name cannot be empty or whitespace.", "name"))

    @property
    def has_body(self) -> bool:
        return self.body is not None or self.expression_body is not None

    def with_return_type(self, return_type) -> "MethodBuilder":
        return replace(self, return_type=str(return_type))

    def with_accessibility(self, accessibility: Accessibility) -> "MethodBuilder":
        return replace(self, accessibility=accessibility)

    def as_static(self) -> "MethodBuilder":
        return replace(self, is_static=True)

    def as_async(self) -> "MethodBuilder":
        return replace(self, is_async=True)

    def as_abstract(self) -> "MethodBuilder":
        return replace(self, is_abstract=True)

    def as_override(self) -> "MethodBuilder":
        return replace(self, is_override=True)

    def as_generator(self) -> "MethodBuilder":
        return replace(self, is_generator=True)

    def as_optional(self) -> "MethodBuilder":
        return replace(self, is_optional=True)

    def add_type_parameter(self, name, constraint=None) -> "MethodBuilder":
        return replace(self, type_parameters=self.type_parameters + (type_parameter(name, constraint),))

    def add_parameter(self, name_or_parameter, type_=None, configure=None) -> "MethodBuilder":
        parameter = make_parameter(name_or_parameter, type_, configure)
        return replace(self, parameters=self.parameters + (parameter,))

    def with_body(self, configure: BodyCallback) -> "MethodBuilder":
        return replace(self, body=configure(BodyBuilder.empty()))

    def with_expression_body(self, expression) -> "MethodBuilder":
        """Render the body as ``{ return expression; }``."""
        return replace(self, expression_body=str(expression))

    def add_overload_signature(self, signature: str) -> "MethodBuilder":
        return replace(self, overload_signatures=self.overload_signatures + (signature,))

    def with_decorator(self, decorator: str) -> "MethodBuilder":
        return replace(self, decorators=self.decorators + (decorator,))
