"""
TypeScript emitter.

Renders a TypeBuilder graph into source text. Rendering is deterministic:
the same builders and options always produce the same text. Problems are
reported as diagnostics on the returned OptionalEmit; nothing raised while
rendering escapes :func:`emit`.
"""

from __future__ import annotations

from typing import List, Optional

from ..utils.logging import EmitLogger
from ..utils.string_utils import is_blank, split_lines
from .body import BodyBuilder
from .constructor import ConstructorBuilder
from .diagnostics import Diagnostic
from .field import FieldBuilder
from .kinds import Accessibility, TypeKind, ValidationLevel
from .method import MethodBuilder
from .options import EmitOptions
from .parameter import render_parameters
from .property import PropertyBuilder
from .result import OptionalEmit
from .type_builder import TypeBuilder

emit_logger = EmitLogger(__name__)

TYPE_NAME_REQUIRED = "Type name is required."


def emit(builder: TypeBuilder, options: Optional[EmitOptions] = None) -> OptionalEmit:
    """
    Render a type declaration to TypeScript source.

    Output is the header comment, the imports, then the declaration, and
    always ends with exactly one end-of-line. When requested the text is
    then passed through the formatter and the compiler validator; validator
    diagnostics are appended while the code stays present.

    Args:
        builder: Root type declaration
        options: Emit options; defaults when None

    Returns:
        OptionalEmit with the code, or with code None and an error
        diagnostic when rendering failed
    """
    if options is None:
        options = EmitOptions.default()

    if is_blank(builder.name):
        emit_logger.log_emit_failure(str(builder.name), TYPE_NAME_REQUIRED)
        return OptionalEmit(None, (Diagnostic.error(TYPE_NAME_REQUIRED),))

    emit_logger.log_emit_start(builder.name, builder.kind.value)
    diagnostics: List[Diagnostic] = []

    try:
        code = _Renderer(options).render_file(builder)

        if options.format_output:
            code = _resolve_formatter(options).format(code, options)

        if options.validation_level >= ValidationLevel.SYNTAX:
            diagnostics.extend(_resolve_checker(options).validate(code))

        return OptionalEmit(code, tuple(diagnostics))
    except Exception as e:
        emit_logger.log_emit_failure(builder.name, str(e))
        diagnostics.append(Diagnostic.error(str(e)))
        return OptionalEmit(None, tuple(diagnostics))


def _resolve_formatter(options: EmitOptions):
    if options.formatter is not None:
        return options.formatter
    from ..compiler.formatter import default_formatter

    return default_formatter()


def _resolve_checker(options: EmitOptions):
    if options.checker is not None:
        return options.checker
    from ..compiler.validator import TscValidator

    return TscValidator(tsc_path=options.tsc_path, timeout=options.validation_timeout)


def _access(accessibility: Accessibility) -> str:
    if accessibility is Accessibility.NONE:
        return ""
    return f"{accessibility.keyword} "


def _type_parameters(type_parameters) -> str:
    if not type_parameters:
        return ""
    return f"<{', '.join(type_parameters)}>"


class _Renderer:
    """Accumulates the lines of one emitted file."""

    def __init__(self, options: EmitOptions):
        self.options = options
        self.semi = options.semicolon
        self.lines: List[str] = []

    def render_file(self, builder: TypeBuilder) -> str:
        if self.options.header_comment is not None:
            self.lines.append(self.options.header_comment)
            self.lines.append("")

        if builder.imports:
            self.lines.extend(builder.imports)
            self.lines.append("")

        self.render_type(builder, "")

        eol = self.options.end_of_line
        return eol.join(self.lines) + eol

    # -------------------------------------------------------------------------
    # Types
    # -------------------------------------------------------------------------

    def render_type(self, builder: TypeBuilder, indent: str) -> None:
        if builder.js_doc is not None:
            self.lines.append(f"{indent}/**")
            for line in split_lines(builder.js_doc):
                self.lines.append(f"{indent} * {line}")
            self.lines.append(f"{indent} */")

        self._decorators(builder.decorators, indent)

        if builder.kind is TypeKind.TYPE_ALIAS:
            self._type_alias(builder, indent)
        elif builder.kind in (TypeKind.ENUM, TypeKind.CONST_ENUM):
            self._enum(builder, indent)
        else:
            self._class_or_interface(builder, indent)

    def _type_alias(self, builder: TypeBuilder, indent: str) -> None:
        definition = builder.type_alias_definition
        if definition is None:
            definition = "unknown"
        self.lines.append(
            f"{indent}{self._head(builder)}type {builder.name}"
            f"{_type_parameters(builder.type_parameters)} = {definition}{self.semi}"
        )

    def _enum(self, builder: TypeBuilder, indent: str) -> None:
        inner = indent + self.options.indentation
        const = "const " if builder.kind is TypeKind.CONST_ENUM else ""
        self.lines.append(f"{indent}{self._head(builder)}{const}enum {builder.name} {{")

        last = len(builder.enum_members) - 1
        for i, (name, value) in enumerate(builder.enum_members):
            line = f"{inner}{name}"
            if value is not None:
                line += f" = {value}"
            if i < last or self.options.use_trailing_commas:
                line += ","
            self.lines.append(line)

        self.lines.append(f"{indent}}}")

    def _class_or_interface(self, builder: TypeBuilder, indent: str) -> None:
        inner = indent + self.options.indentation
        is_class = builder.kind is TypeKind.CLASS

        header = f"{indent}{self._head(builder)}"
        if builder.is_abstract and is_class:
            header += "abstract "
        header += "class " if is_class else "interface "
        header += builder.name + _type_parameters(builder.type_parameters)
        if builder.extends_clause:
            header += f" extends {', '.join(builder.extends_clause)}"
        if builder.implements_clause and is_class:
            header += f" implements {', '.join(builder.implements_clause)}"
        self.lines.append(f"{header} {{")

        sections = []
        if builder.index_signatures:
            sections.append(lambda: self._index_signatures(builder.index_signatures, inner))
        if builder.fields:
            sections.append(lambda: self._each(self._field, builder.fields, inner))
        if builder.constructors and is_class:
            sections.append(lambda: self._each(self._constructor, builder.constructors, inner))
        if builder.properties:
            sections.append(lambda: self._each(self._property, builder.properties, inner))
        if builder.methods:
            sections.append(lambda: self._each(
                lambda method, ind: self._method(method, builder.kind, ind),
                builder.methods, inner, separated=True,
            ))
        if builder.nested_types:
            sections.append(lambda: self._each(self.render_type, builder.nested_types, inner, separated=True))

        for i, render_section in enumerate(sections):
            if i > 0:
                self.lines.append("")
            render_section()

        self.lines.append(f"{indent}}}")

    def _head(self, builder: TypeBuilder) -> str:
        head = ""
        if builder.is_default_export:
            head = "export default "
        elif builder.is_exported:
            head = "export "
        if builder.is_declare:
            head += "declare "
        return head

    def _each(self, render, items, indent: str, separated: bool = False) -> None:
        for i, item in enumerate(items):
            if separated and i > 0:
                self.lines.append("")
            render(item, indent)

    # -------------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------------

    def _index_signatures(self, signatures, indent: str) -> None:
        for signature in signatures:
            self.lines.append(f"{indent}{signature}{self.semi}")

    def _field(self, field: FieldBuilder, indent: str) -> None:
        line = indent + _access(field.accessibility)
        if field.is_abstract:
            line += "abstract "
        if field.is_declare:
            line += "declare "
        if field.is_override:
            line += "override "
        if field.is_static:
            line += "static "
        if field.is_readonly:
            line += "readonly "
        if field.is_es_private:
            line += "#"
        line += field.name
        if field.is_optional:
            line += "?"
        line += f": {field.type}"
        if field.initializer is not None:
            line += f" = {field.initializer}"
        self.lines.append(line + self.semi)

    def _constructor(self, ctor: ConstructorBuilder, indent: str) -> None:
        body_indent = indent + self.options.indentation
        for signature in ctor.overload_signatures:
            self.lines.append(f"{indent}{signature}{self.semi}")

        head = f"{indent}{_access(ctor.accessibility)}constructor({render_parameters(ctor.parameters)})"
        if ctor.body is None and not ctor.super_arguments:
            self.lines.append(f"{head} {{}}")
            return

        self.lines.append(f"{head} {{")
        if ctor.super_arguments:
            self.lines.append(f"{body_indent}super({', '.join(ctor.super_arguments)}){self.semi}")
        if ctor.body is not None:
            self._body(ctor.body, body_indent)
        self.lines.append(f"{indent}}}")

    def _property(self, prop: PropertyBuilder, indent: str) -> None:
        if prop.has_accessor:
            self._accessors(prop, indent)
            return

        line = indent + _access(prop.accessibility)
        if prop.is_abstract:
            line += "abstract "
        if prop.is_override:
            line += "override "
        if prop.is_static:
            line += "static "
        if prop.is_readonly:
            line += "readonly "
        line += prop.name
        if prop.is_optional:
            line += "?"
        line += f": {prop.type}"
        if prop.initializer is not None:
            line += f" = {prop.initializer}"
        self.lines.append(line + self.semi)

    def _accessors(self, prop: PropertyBuilder, indent: str) -> None:
        body_indent = indent + self.options.indentation
        modifiers = _access(prop.accessibility) + ("static " if prop.is_static else "")

        if prop.has_getter:
            self.lines.append(f"{indent}{modifiers}get {prop.name}(): {prop.type} {{")
            if prop.getter_expression is not None:
                self.lines.append(f"{body_indent}return {prop.getter_expression}{self.semi}")
            else:
                self._body(prop.getter_body, body_indent)
            self.lines.append(f"{indent}}}")

        if prop.setter_body is not None:
            self.lines.append(f"{indent}{modifiers}set {prop.name}(value: {prop.type}) {{")
            self._body(prop.setter_body, body_indent)
            self.lines.append(f"{indent}}}")

    def _method(self, method: MethodBuilder, parent_kind: TypeKind, indent: str) -> None:
        body_indent = indent + self.options.indentation
        self._decorators(method.decorators, indent)
        for signature in method.overload_signatures:
            self.lines.append(f"{indent}{signature}{self.semi}")

        line = indent + _access(method.accessibility)
        if method.is_abstract:
            line += "abstract "
        if method.is_override:
            line += "override "
        if method.is_static:
            line += "static "
        if method.is_async:
            line += "async "
        if method.is_generator:
            line += "*"
        line += method.name
        if method.is_optional:
            line += "?"
        line += _type_parameters(method.type_parameters)
        line += f"({render_parameters(method.parameters)})"
        if method.return_type is not None:
            line += f": {method.return_type}"

        if method.is_abstract or (parent_kind is TypeKind.INTERFACE and not method.has_body):
            self.lines.append(line + self.semi)
            return

        if method.expression_body is not None:
            self.lines.append(f"{line} {{")
            self.lines.append(f"{body_indent}return {method.expression_body}{self.semi}")
            self.lines.append(f"{indent}}}")
            return

        if method.body is not None:
            self.lines.append(f"{line} {{")
            self._body(method.body, body_indent)
            self.lines.append(f"{indent}}}")
            return

        self.lines.append(f"{line} {{}}")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _decorators(self, decorators, indent: str) -> None:
        for decorator in decorators:
            prefix = "" if decorator.startswith("@") else "@"
            self.lines.append(f"{indent}{prefix}{decorator}")

    def _body(self, body: BodyBuilder, indent: str) -> None:
        for statement in body.statements:
            for line in split_lines(statement):
                self.lines.append(f"{indent}{line}")
