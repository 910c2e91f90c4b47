"""
Statement body builder.

A BodyBuilder is an ordered, append-only sequence of TypeScript statements.
Structured constructs (if, loops, try) receive a fresh empty body through a
callback and embed it as a brace block, so bodies nest to any depth.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional, Tuple

from ..utils.constants import BLOCK_INDENT, EMPTY_BLOCK
from ..utils.exceptions import BuilderError
from ..utils.string_utils import is_blank, normalize_statement, prefix_lines, split_lines

BodyCallback = Callable[["BodyBuilder"], "BodyBuilder"]


@dataclass(frozen=True)
class BodyBuilder:
    """Immutable sequence of statements for a method, accessor or block."""
    statements: Tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "BodyBuilder":
        return cls()

    @property
    def is_empty(self) -> bool:
        return len(self.statements) == 0

    def _append(self, statement: str) -> "BodyBuilder":
        return replace(self, statements=self.statements + (statement,))

    # -------------------------------------------------------------------------
    # Statements
    # -------------------------------------------------------------------------

    def add_statement(self, statement) -> "BodyBuilder":
        """
        Append a raw statement.

        Trailing whitespace is removed and a semicolon is appended unless the
        statement already ends in ``;``, ``}`` or ``{``.

        Raises:
            BuilderError: If the statement is blank
        """
        if is_blank(statement):
            raise BuilderError("Statement cannot be empty or whitespace.", "statement")
        return self._append(normalize_statement(str(statement)))

    def add_statements(self, *statements) -> "BodyBuilder":
        body = self
        for statement in statements:
            body = body.add_statement(statement)
        return body

    def add_return(self, expression=None) -> "BodyBuilder":
        if expression is None:
            return self._append("return;")
        return self._append(f"return {expression};")

    def add_throw(self, expression) -> "BodyBuilder":
        return self._append(f"throw {expression};")

    def add_comment(self, text: str) -> "BodyBuilder":
        """Append a line comment; multi-line text becomes one ``//`` line per line."""
        lines = [f"// {line}".rstrip() for line in split_lines(text)]
        return self._append("\n".join(lines))

    # -------------------------------------------------------------------------
    # Control Flow
    # -------------------------------------------------------------------------

    def add_if(self, condition, configure: BodyCallback) -> "BodyBuilder":
        block = format_block(_configure(configure))
        return self._append(f"if ({condition}) {block}")

    def add_if_else(self, condition, configure_then: BodyCallback, configure_else: BodyCallback) -> "BodyBuilder":
        then_block = format_block(_configure(configure_then))
        else_block = format_block(_configure(configure_else))
        return self._append(f"if ({condition}) {then_block} else {else_block}")

    def add_for_of(self, variable: str, iterable, configure: BodyCallback) -> "BodyBuilder":
        block = format_block(_configure(configure))
        return self._append(f"for (const {variable} of {iterable}) {block}")

    def add_for_in(self, variable: str, obj, configure: BodyCallback) -> "BodyBuilder":
        block = format_block(_configure(configure))
        return self._append(f"for (const {variable} in {obj}) {block}")

    def add_for(self, initializer, condition, step, configure: BodyCallback) -> "BodyBuilder":
        block = format_block(_configure(configure))
        return self._append(f"for ({initializer}; {condition}; {step}) {block}")

    def add_while(self, condition, configure: BodyCallback) -> "BodyBuilder":
        block = format_block(_configure(configure))
        return self._append(f"while ({condition}) {block}")

    def add_try_catch(self, configure_try: BodyCallback, error_variable: str,
                      configure_catch: BodyCallback) -> "BodyBuilder":
        try_block = format_block(_configure(configure_try))
        catch_block = format_block(_configure(configure_catch))
        return self._append(f"try {try_block} catch ({error_variable}) {catch_block}")

    def add_try_catch_finally(self, configure_try: BodyCallback, error_variable: str,
                              configure_catch: BodyCallback, configure_finally: BodyCallback) -> "BodyBuilder":
        try_block = format_block(_configure(configure_try))
        catch_block = format_block(_configure(configure_catch))
        finally_block = format_block(_configure(configure_finally))
        return self._append(
            f"try {try_block} catch ({error_variable}) {catch_block} finally {finally_block}"
        )

    # -------------------------------------------------------------------------
    # Variable Declarations
    # -------------------------------------------------------------------------

    def add_const(self, name: str, expression, type_=None) -> "BodyBuilder":
        return self._append(_declaration("const", name, expression, type_))

    def add_let(self, name: str, expression, type_=None) -> "BodyBuilder":
        return self._append(_declaration("let", name, expression, type_))


def _configure(configure: BodyCallback) -> BodyBuilder:
    body = configure(BodyBuilder.empty())
    if not isinstance(body, BodyBuilder):
        raise BuilderError("Body callback must return a BodyBuilder.", "configure")
    return body


def _declaration(keyword: str, name: str, expression, type_: Optional[object]) -> str:
    if is_blank(name):
        raise BuilderError("Variable name cannot be empty or whitespace.", "name")
    if type_ is None:
        return f"{keyword} {name} = {expression};"
    return f"{keyword} {name}: {type_} = {expression};"


def format_block(body: BodyBuilder) -> str:
    """
    Render a body as a brace block.

    Every line of every statement is indented one level, so statements
    that are themselves blocks keep their relative indentation.

    Args:
        body: Body to render

    Returns:
        ``{ }`` for an empty body, otherwise a multi-line block
    """
    if body.is_empty:
        return EMPTY_BLOCK

    lines = ["{"]
    for statement in body.statements:
        lines.extend(prefix_lines(statement, BLOCK_INDENT))
    lines.append("}")
    return "\n".join(lines)
