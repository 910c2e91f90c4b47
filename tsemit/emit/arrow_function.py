"""
Arrow function expression builder.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..refs.expression_ref import ExpressionRef
from ..utils.exceptions import BuilderError
from .body import BodyBuilder, BodyCallback, format_block
from .method import type_parameter
from .parameter import ParameterBuilder, make_parameter, render_parameters


@dataclass(frozen=True)
class ArrowFunctionBuilder:
    """Builds ``[async ][<T>](params)[: R] => body`` expressions."""
    parameters: Tuple[ParameterBuilder, ...] = ()
    type_parameters: Tuple[str, ...] = ()
    is_async: bool = False
    return_type: Optional[str] = None
    expression_body: Optional[str] = None
    body: Optional[BodyBuilder] = None

    @classmethod
    def create(cls) -> "ArrowFunctionBuilder":
        return cls()

    def as_async(self) -> "ArrowFunctionBuilder":
        return replace(self, is_async=True)

    def with_return_type(self, return_type) -> "ArrowFunctionBuilder":
        return replace(self, return_type=str(return_type))

    def add_type_parameter(self, name, constraint=None) -> "ArrowFunctionBuilder":
        return replace(self, type_parameters=self.type_parameters + (type_parameter(name, constraint),))

    def add_parameter(self, name_or_parameter, type_=None, configure=None) -> "ArrowFunctionBuilder":
        parameter = make_parameter(name_or_parameter, type_, configure)
        return replace(self, parameters=self.parameters + (parameter,))

    def with_expression_body(self, expression) -> "ArrowFunctionBuilder":
        return replace(self, expression_body=str(expression))

    def with_body(self, configure: BodyCallback) -> "ArrowFunctionBuilder":
        return replace(self, body=configure(BodyBuilder.empty()))

    def build(self) -> ExpressionRef:
        """
        Render the arrow function.

        Returns:
            ExpressionRef holding the function text

        Raises:
            BuilderError: If neither an expression body nor a block body is set
        """
        if self.expression_body is None and self.body is None:
            raise BuilderError("Arrow function must have either an expression body or a block body.", "body")

        text = "async " if self.is_async else ""
        if self.type_parameters:
            text += f"<{', '.join(self.type_parameters)}>"
        text += f"({render_parameters(self.parameters, with_property_modifiers=False)})"
        if self.return_type is not None:
            text += f": {self.return_type}"
        text += " => "

        if self.expression_body is not None:
            text += self.expression_body
        else:
            text += format_block(self.body)

        return ExpressionRef(text)

    def __str__(self) -> str:
        return self.build().value

