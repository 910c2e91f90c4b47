"""
Declaration builders and the TypeScript emitter.
"""

from .kinds import Accessibility, TypeKind, ValidationLevel
from .diagnostics import Diagnostic, Severity
from .body import BodyBuilder
from .parameter import ParameterBuilder
from .field import FieldBuilder
from .property import PropertyBuilder
from .constructor import ConstructorBuilder
from .method import MethodBuilder
from .type_builder import TypeBuilder
from .arrow_function import ArrowFunctionBuilder
from .object_literal import ObjectLiteralBuilder
from .options import EmitOptions
from .result import OptionalEmit, ValidEmit
from .emitter import emit

__all__ = [
    "Accessibility",
    "TypeKind",
    "ValidationLevel",
    "Diagnostic",
    "Severity",
    "BodyBuilder",
    "ParameterBuilder",
    "FieldBuilder",
    "PropertyBuilder",
    "ConstructorBuilder",
    "MethodBuilder",
    "TypeBuilder",
    "ArrowFunctionBuilder",
    "ObjectLiteralBuilder",
    "EmitOptions",
    "OptionalEmit",
    "ValidEmit",
    "emit",
]
