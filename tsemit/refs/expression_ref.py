"""
Expression references.

An ExpressionRef is a small immutable wrapper around a TypeScript expression
string with chainable methods for the common operators. Builders accept an
ExpressionRef anywhere an expression string is expected.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.string_utils import require_text


def _args(arguments) -> str:
    return ", ".join(str(arg) for arg in arguments)


@dataclass(frozen=True)
class ExpressionRef:
    """A TypeScript expression such as ``user?.name ?? 'anonymous'``."""
    value: str

    @classmethod
    def from_(cls, expression) -> "ExpressionRef":
        return cls(require_text(expression, "Expression cannot be empty or whitespace.", "expression"))

    def __str__(self) -> str:
        return self.value

    # -------------------------------------------------------------------------
    # Calls and Member Access
    # -------------------------------------------------------------------------

    def call(self, method: str, *arguments) -> "ExpressionRef":
        """``expr.method(args)``"""
        return ExpressionRef(f"{self.value}.{method}({_args(arguments)})")

    def invoke(self, *arguments) -> "ExpressionRef":
        """``expr(args)``"""
        return ExpressionRef(f"{self.value}({_args(arguments)})")

    def member(self, name: str) -> "ExpressionRef":
        return ExpressionRef(f"{self.value}.{name}")

    def index(self, key) -> "ExpressionRef":
        return ExpressionRef(f"{self.value}[{key}]")

    def optional_chain(self, name: str) -> "ExpressionRef":
        return ExpressionRef(f"{self.value}?.{name}")

    def optional_call(self, method: str, *arguments) -> "ExpressionRef":
        return ExpressionRef(f"{self.value}?.{method}({_args(arguments)})")

    def optional_index(self, key) -> "ExpressionRef":
        return ExpressionRef(f"{self.value}?.[{key}]")

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def nullish_coalesce(self, fallback) -> "ExpressionRef":
        return ExpressionRef(f"{self.value} ?? {fallback}")

    def non_null(self) -> "ExpressionRef":
        return ExpressionRef(f"{self.value}!")

    def as_(self, target) -> "ExpressionRef":
        return ExpressionRef(f"{self.value} as {target}")

    def satisfies(self, target) -> "ExpressionRef":
        return ExpressionRef(f"{self.value} satisfies {target}")

    def type_of(self) -> "ExpressionRef":
        return ExpressionRef(f"typeof {self.value}")

    def instance_of(self, target) -> "ExpressionRef":
        return ExpressionRef(f"{self.value} instanceof {target}")

    def await_(self) -> "ExpressionRef":
        return ExpressionRef(f"await {self.value}")

    def spread(self) -> "ExpressionRef":
        return ExpressionRef(f"...{self.value}")

    def template_literal(self, prefix: str = "", suffix: str = "") -> "ExpressionRef":
        """Embed the expression in a template string: ``prefix${expr}suffix``."""
        return ExpressionRef(f"`{prefix}${{{self.value}}}{suffix}`")

    def parenthesize(self) -> "ExpressionRef":
        return ExpressionRef(f"({self.value})")

    def strict_equals(self, other) -> "ExpressionRef":
        return ExpressionRef(f"{self.value} === {other}")

    def strict_not_equals(self, other) -> "ExpressionRef":
        return ExpressionRef(f"{self.value} !== {other}")

    def and_(self, other) -> "ExpressionRef":
        return ExpressionRef(f"{self.value} && {other}")

    def or_(self, other) -> "ExpressionRef":
        return ExpressionRef(f"{self.value} || {other}")

    def not_(self) -> "ExpressionRef":
        return ExpressionRef(f"!{self.value}")
