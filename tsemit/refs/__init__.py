"""
Type and expression references.

Value types that compose TypeScript type expressions and runtime
expressions as strings, plus factories for common library calls.
"""

from .expression_ref import ExpressionRef
from .type_ref import TypeRef
from . import expressions, utility_types

__all__ = [
    "ExpressionRef",
    "TypeRef",
    "expressions",
    "utility_types",
]
