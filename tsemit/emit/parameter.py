"""
Parameter builder for constructors, methods and arrow functions.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from ..utils.string_utils import require_text
from .kinds import Accessibility


@dataclass(frozen=True)
class ParameterBuilder:
    """A single parameter: name, type annotation and modifiers."""
    name: str
    type: str
    default_value: Optional[str] = None
    is_optional: bool = False
    is_rest: bool = False
    accessibility: Accessibility = Accessibility.NONE
    is_readonly: bool = False

    @classmethod
    def for_(cls, name, type_) -> "ParameterBuilder":
        return cls(
            name=require_text(name, "Parameter name cannot be empty or whitespace.", "name"),
            type=require_text(type_, "Parameter type cannot be empty or whitespace.", "type"),
        )

    def with_default_value(self, value) -> "ParameterBuilder":
        return replace(self, default_value=str(value))

    def as_optional(self) -> "ParameterBuilder":
        return replace(self, is_optional=True)

    def as_rest(self) -> "ParameterBuilder":
        return replace(self, is_rest=True)

    def as_parameter_property(self, accessibility: Accessibility) -> "ParameterBuilder":
        """Turn a constructor parameter into a parameter property."""
        return replace(self, accessibility=accessibility)

    def as_readonly_parameter_property(self) -> "ParameterBuilder":
        return replace(self, is_readonly=True)


def make_parameter(name_or_parameter, type_=None, configure=None) -> ParameterBuilder:
    """
    Build a parameter from the overloaded ``add_parameter`` arguments.

    Accepts either a ready ParameterBuilder or a name and type with an
    optional ``configure`` callback.
    """
    if isinstance(name_or_parameter, ParameterBuilder):
        return name_or_parameter
    parameter = ParameterBuilder.for_(name_or_parameter, type_)
    if configure is not None:
        parameter = configure(parameter)
    return parameter


def render_parameter(parameter: ParameterBuilder, with_property_modifiers: bool = True) -> str:
    """
    Render one parameter.

    Args:
        parameter: Parameter to render
        with_property_modifiers: Include parameter-property accessibility and
            ``readonly``; only constructors use them

    Returns:
        ``[access ][readonly ][...]name[?]: T[ = default]``
    """
    parts = []
    if with_property_modifiers:
        if parameter.accessibility is not Accessibility.NONE:
            parts.append(f"{parameter.accessibility.keyword} ")
        if parameter.is_readonly:
            parts.append("readonly ")
    if parameter.is_rest:
        parts.append("...")
    parts.append(parameter.name)
    if parameter.is_optional:
        parts.append("?")
    parts.append(f": {parameter.type}")
    if parameter.default_value is not None:
        parts.append(f" = {parameter.default_value}")
    return "".join(parts)


def render_parameters(parameters: Iterable[ParameterBuilder], with_property_modifiers: bool = True) -> str:
    return ", ".join(render_parameter(p, with_property_modifiers) for p in parameters)
