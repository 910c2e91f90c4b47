"""
Unit tests for the common expression factories and the expression
builders (arrow functions and object literals).
"""

import pytest

from tsemit.emit import ArrowFunctionBuilder, ObjectLiteralBuilder
from tsemit.refs import ExpressionRef, expressions
from tsemit.utils.exceptions import BuilderError


class TestExpressionFactories:
    """Test the console, Promise, fetch and Object helpers."""

    def test_console(self):
        """Test console calls."""
        assert expressions.console_log("'a'", "b").value == "console.log('a', b)"
        assert expressions.console_error("err").value == "console.error(err)"
        assert expressions.console_warn("w").value == "console.warn(w)"
        assert expressions.console_time_end("'t'").value == "console.timeEnd('t')"

    def test_promise(self):
        """Test Promise statics and construction."""
        assert expressions.promise_resolve("1").value == "Promise.resolve(1)"
        assert expressions.promise_all("a", "b").value == "Promise.all([a, b])"
        assert expressions.promise_all_settled("a").value == "Promise.allSettled([a])"
        assert expressions.promise_race().value == "Promise.race([])"
        assert (
            expressions.promise_new("(resolve) => resolve(1)").value
            == "new Promise((resolve) => resolve(1))"
        )

    def test_fetch(self):
        """Test fetch helpers and JSON request options."""
        assert expressions.fetch_get("url").value == "fetch(url)"
        assert expressions.fetch_post("'/api'", "payload").value == (
            "fetch('/api', { method: 'POST', body: JSON.stringify(payload), "
            "headers: { 'Content-Type': 'application/json' } })"
        )
        assert expressions.fetch_put("u", "b").value.startswith("fetch(u, { method: 'PUT'")
        assert expressions.fetch_delete("u").value == "fetch(u, { method: 'DELETE' })"
        assert expressions.response_json("res").value == "res.json()"
        assert expressions.response_text(ExpressionRef.from_("res")).value == "res.text()"

    def test_object_helpers(self):
        """Test Object statics and spreads."""
        assert expressions.object_keys("o").value == "Object.keys(o)"
        assert expressions.object_entries("o").value == "Object.entries(o)"
        assert expressions.object_assign("{}", "a", "b").value == "Object.assign({}, a, b)"
        assert expressions.object_from_entries("pairs").value == "Object.fromEntries(pairs)"
        assert expressions.object_spread("defaults").value == "{ ...defaults }"


class TestArrowFunctionBuilder:
    """Test arrow function rendering."""

    def test_expression_body(self):
        """Test a concise arrow function."""
        arrow = (
            ArrowFunctionBuilder.create()
            .add_parameter("x", "number")
            .with_return_type("number")
            .with_expression_body("x * 2")
        )
        assert arrow.build().value == "(x: number): number => x * 2"
        assert str(arrow) == arrow.build().value

    def test_block_body(self):
        """Test a block arrow function with generics and async."""
        arrow = (
            ArrowFunctionBuilder.create()
            .as_async()
            .add_type_parameter("T")
            .add_parameter("url", "string")
            .with_body(lambda b: b.add_const("res", "await fetch(url)").add_return("res.json() as T"))
        )
        assert arrow.build().value == (
            "async <T>(url: string) => {\n"
            "  const res = await fetch(url);\n"
            "  return res.json() as T;\n"
            "}"
        )

    def test_empty_block_body(self):
        """Test an empty block renders as an empty brace block."""
        assert ArrowFunctionBuilder.create().with_body(lambda b: b).build().value == "() => { }"

    def test_parameter_properties_not_rendered(self):
        """Test accessibility modifiers never appear on arrow parameters."""
        arrow = (
            ArrowFunctionBuilder.create()
            .add_parameter("x", "number", lambda p: p.as_readonly_parameter_property())
            .with_expression_body("x")
        )
        assert arrow.build().value == "(x: number) => x"

    def test_requires_body(self):
        """Test building without a body fails."""
        with pytest.raises(BuilderError):
            ArrowFunctionBuilder.create().build()


class TestObjectLiteralBuilder:
    """Test object literal rendering."""

    def test_empty(self):
        """Test the empty literal."""
        assert ObjectLiteralBuilder.create().build().value == "{ }"

    def test_single_line(self):
        """Test short literals stay on one line."""
        literal = (
            ObjectLiteralBuilder.create()
            .add_property("id", "1")
            .add_shorthand("name")
            .add_spread("rest")
        )
        assert literal.build().value == "{ id: 1, name, ...rest }"

    def test_multi_line_when_long(self):
        """Test more than three entries switch to one entry per line."""
        literal = (
            ObjectLiteralBuilder.create()
            .add_property("a", "1")
            .add_property("b", "2")
            .add_computed_property("key", "3")
            .add_shorthand("d")
        )
        assert literal.is_multi_line
        assert literal.build().value == (
            "{\n"
            "  a: 1,\n"
            "  b: 2,\n"
            "  [key]: 3,\n"
            "  d\n"
            "}"
        )

    def test_method_entries(self):
        """Test method shorthand entries force multi-line output."""
        literal = (
            ObjectLiteralBuilder.create()
            .add_property("count", "0")
            .add_method("inc", lambda m: m.with_body(lambda b: b.add_statement("this.count++")))
            .add_method("get", lambda m: m.with_return_type("number").with_expression_body("this.count"))
            .add_method("noop", lambda m: m)
        )
        assert literal.build().value == (
            "{\n"
            "  count: 0,\n"
            "  inc() {\n"
            "    this.count++;\n"
            "  },\n"
            "  get(): number {\n"
            "    return this.count;\n"
            "  },\n"
            "  noop() { }\n"
            "}"
        )

    def test_immutability(self):
        """Test adding entries returns a new builder."""
        base = ObjectLiteralBuilder.create()
        base.add_property("a", "1")
        assert base.entries == ()
