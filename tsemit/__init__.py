"""
tsemit: TypeScript source generation for Python

Build an immutable model of a TypeScript declaration (class, interface,
type alias, enum) and render it to deterministic source text, optionally
formatted with dprint/prettier and confirmed valid by running tsc.

Key Features:
- Immutable, copy-on-write builders for types, members and bodies
- Deterministic rendering with configurable indentation and punctuation
- Optional out-of-process tsc validation reported as diagnostics
- Two-phase result gate: OptionalEmit -> ValidEmit

Usage:
    from tsemit import TypeBuilder

    result = (
        TypeBuilder.class_("Person")
        .exported()
        .add_field("id", "string", lambda f: f.as_readonly())
        .emit()
    )
    code = result.validate_or_throw().code
"""

__version__ = "0.1.0"
__author__ = "tsemit Team"
__email__ = "tsemit@example.com"

# Public API exports
from .emit import (
    Accessibility,
    ArrowFunctionBuilder,
    BodyBuilder,
    ConstructorBuilder,
    Diagnostic,
    EmitOptions,
    FieldBuilder,
    MethodBuilder,
    ObjectLiteralBuilder,
    OptionalEmit,
    ParameterBuilder,
    PropertyBuilder,
    Severity,
    TypeBuilder,
    TypeKind,
    ValidEmit,
    ValidationLevel,
    emit,
)
from .refs import ExpressionRef, TypeRef
from .compiler import TscValidator, validate_many
from .utils import (
    BuilderError,
    EmitValidationError,
    TsEmitConfig,
    TsEmitError,
    get_config,
)

__all__ = [
    "Accessibility",
    "ArrowFunctionBuilder",
    "BodyBuilder",
    "ConstructorBuilder",
    "Diagnostic",
    "EmitOptions",
    "FieldBuilder",
    "MethodBuilder",
    "ObjectLiteralBuilder",
    "OptionalEmit",
    "ParameterBuilder",
    "PropertyBuilder",
    "Severity",
    "TypeBuilder",
    "TypeKind",
    "ValidEmit",
    "ValidationLevel",
    "emit",
    "ExpressionRef",
    "TypeRef",
    "TscValidator",
    "validate_many",
    "BuilderError",
    "EmitValidationError",
    "TsEmitConfig",
    "TsEmitError",
    "get_config",
]
