"""
Object literal expression builder.

Entries keep insertion order. Up to three single-line entries render on one
line (``{ a: 1, b }``); more entries, a multi-line value or any method entry
switch to one entry per line.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from ..refs.expression_ref import ExpressionRef
from ..utils.constants import BLOCK_INDENT, EMPTY_BLOCK, OBJECT_LITERAL_SINGLE_LINE_LIMIT
from ..utils.string_utils import prefix_lines, require_text
from .method import MethodBuilder
from .parameter import render_parameters


class EntryKind(Enum):
    PROPERTY = "property"
    SHORTHAND = "shorthand"
    COMPUTED = "computed"
    SPREAD = "spread"
    METHOD = "method"


@dataclass(frozen=True)
class ObjectEntry:
    kind: EntryKind
    key: str
    value: Optional[str] = None

    def render(self) -> str:
        if self.kind is EntryKind.PROPERTY:
            return f"{self.key}: {self.value}"
        if self.kind is EntryKind.COMPUTED:
            return f"[{self.key}]: {self.value}"
        if self.kind is EntryKind.SPREAD:
            return f"...{self.key}"
        if self.kind is EntryKind.METHOD:
            return self.value
        return self.key


@dataclass(frozen=True)
class ObjectLiteralBuilder:
    """Immutable builder for ``{ ... }`` object literal expressions."""
    entries: Tuple[ObjectEntry, ...] = ()

    @classmethod
    def create(cls) -> "ObjectLiteralBuilder":
        return cls()

    def _add(self, entry: ObjectEntry) -> "ObjectLiteralBuilder":
        return replace(self, entries=self.entries + (entry,))

    def add_property(self, name, value) -> "ObjectLiteralBuilder":
        name = require_text(name, "Property name cannot be empty or whitespace.", "name")
        return self._add(ObjectEntry(EntryKind.PROPERTY, name, str(value)))

    def add_shorthand(self, name) -> "ObjectLiteralBuilder":
        name = require_text(name, "Property name cannot be empty or whitespace.", "name")
        return self._add(ObjectEntry(EntryKind.SHORTHAND, name))

    def add_computed_property(self, key_expression, value) -> "ObjectLiteralBuilder":
        return self._add(ObjectEntry(EntryKind.COMPUTED, str(key_expression), str(value)))

    def add_spread(self, expression) -> "ObjectLiteralBuilder":
        return self._add(ObjectEntry(EntryKind.SPREAD, str(expression)))

    def add_method(self, name, configure) -> "ObjectLiteralBuilder":
        """Add a method shorthand entry configured through a MethodBuilder."""
        method = configure(MethodBuilder.for_(name))
        return self._add(ObjectEntry(EntryKind.METHOD, method.name, _method_shorthand(method)))

    @property
    def is_multi_line(self) -> bool:
        if len(self.entries) > OBJECT_LITERAL_SINGLE_LINE_LIMIT:
            return True
        return any(
            entry.kind is EntryKind.METHOD or (entry.value is not None and "\n" in entry.value)
            for entry in self.entries
        )

    def build(self) -> ExpressionRef:
        if not self.entries:
            return ExpressionRef(EMPTY_BLOCK)

        if not self.is_multi_line:
            return ExpressionRef("{ " + ", ".join(entry.render() for entry in self.entries) + " }")

        last = len(self.entries) - 1
        lines = ["{"]
        for i, entry in enumerate(self.entries):
            lines.append(f"{BLOCK_INDENT}{entry.render()}{',' if i < last else ''}")
        lines.append("}")
        return ExpressionRef("\n".join(lines))

    def __str__(self) -> str:
        return self.build().value


def _method_shorthand(method: MethodBuilder) -> str:
    # Rendered for an entry sitting one level inside the literal.
    body_indent = BLOCK_INDENT * 2
    text = "async " if method.is_async else ""
    if method.is_generator:
        text += "*"
    text += f"{method.name}({render_parameters(method.parameters, with_property_modifiers=False)})"
    if method.return_type is not None:
        text += f": {method.return_type}"

    if method.expression_body is not None:
        return f"{text} {{\n{body_indent}return {method.expression_body};\n{BLOCK_INDENT}}}"

    if method.body is not None and not method.body.is_empty:
        lines = [f"{text} {{"]
        for statement in method.body.statements:
            lines.extend(prefix_lines(statement, body_indent))
        lines.append(f"{BLOCK_INDENT}}}")
        return "\n".join(lines)

    return f"{text} {EMPTY_BLOCK}"
