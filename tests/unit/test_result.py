"""
Unit tests for emit results and diagnostics.

Tests the OptionalEmit -> ValidEmit gate, severity handling and the
tagged string form of diagnostics.
"""

import dataclasses

import pytest

from tsemit.emit.diagnostics import Diagnostic, Severity
from tsemit.emit.result import OptionalEmit, ValidEmit
from tsemit.utils.exceptions import EmitValidationError


class TestDiagnostic:
    """Test the Diagnostic value type."""

    def test_string_forms(self):
        """Test the tagged text of each severity."""
        assert str(Diagnostic.error("bad")) == "error: bad"
        assert str(Diagnostic.warning("meh")) == "warning: meh"
        assert str(Diagnostic.info("Found 1 error.")) == "Found 1 error."

    def test_predicates(self):
        """Test is_error and is_warning."""
        assert Diagnostic.error("x").is_error
        assert not Diagnostic.error("x").is_warning
        assert Diagnostic.warning("x").is_warning
        info = Diagnostic.info("x")
        assert info.severity is Severity.NONE
        assert not info.is_error and not info.is_warning

    @pytest.mark.parametrize("text,severity,message", [
        ("error: broken", Severity.ERROR, "broken"),
        ("warning: careful", Severity.WARNING, "careful"),
        ("plain text", Severity.NONE, "plain text"),
        ("Error: not a tag", Severity.NONE, "Error: not a tag"),
    ])
    def test_parse(self, text, severity, message):
        """Test parsing the tagged text back into a diagnostic."""
        diag = Diagnostic.parse(text)
        assert diag.severity is severity
        assert diag.message == message


class TestOptionalEmit:
    """Test the unconfirmed result."""

    def test_success_requires_code(self):
        """Test a missing code is never successful."""
        assert not OptionalEmit(None).success
        assert OptionalEmit("class A {}\n").success

    def test_errors_fail_warnings_do_not(self):
        """Test only error severity affects success."""
        warned = OptionalEmit("x", (Diagnostic.warning("w"), Diagnostic.info("note")))
        failed = OptionalEmit("x", (Diagnostic.error("e"),))

        assert warned.success
        assert warned.warnings == (Diagnostic.warning("w"),)
        assert not failed.success
        assert failed.errors == (Diagnostic.error("e"),)

    def test_string_diagnostics_are_parsed(self):
        """Test tagged strings are accepted as diagnostics."""
        result = OptionalEmit("x", ("error: nope", "just info"))
        assert result.diagnostics == (Diagnostic.error("nope"), Diagnostic.info("just info"))
        assert not result.success


class TestGate:
    """Test the OptionalEmit -> ValidEmit gate."""

    def test_validate_or_throw_success(self):
        """Test a successful result yields a ValidEmit with the same code."""
        optional = OptionalEmit("export class A {\n}\n")
        valid = optional.validate_or_throw()

        assert isinstance(valid, ValidEmit)
        assert valid.code == optional.code
        assert str(valid) == optional.code

    def test_validate_or_throw_failure(self):
        """Test a failed result raises with the diagnostics attached."""
        optional = OptionalEmit(None, (Diagnostic.error("Type name is required."),))

        with pytest.raises(EmitValidationError) as exc_info:
            optional.validate_or_throw()

        error = exc_info.value
        assert error.message == "Emit failed: error: Type name is required."
        assert error.diagnostics == optional.diagnostics
        assert error.get_errors() == [Diagnostic.error("Type name is required.")]

    def test_validate_or_throw_custom_message(self):
        """Test the caller's message replaces the generated one."""
        with pytest.raises(EmitValidationError) as exc_info:
            OptionalEmit(None).validate_or_throw("generation failed")
        assert exc_info.value.message == "generation failed"

    def test_code_present_with_errors_still_fails(self):
        """Test compiler errors fail the gate even though code exists."""
        optional = OptionalEmit("class A {}", (Diagnostic.error("TS1005"),))
        with pytest.raises(EmitValidationError):
            optional.validate_or_throw()

    def test_try_validate(self):
        """Test the non-throwing gate."""
        assert OptionalEmit(None).try_validate() is None
        valid = OptionalEmit("x").try_validate()
        assert valid is not None and valid.code == "x"

    def test_valid_emit_cannot_be_built_directly(self):
        """Test ValidEmit is only reachable through the gate."""
        with pytest.raises(TypeError):
            ValidEmit("class A {}")
        with pytest.raises(TypeError):
            ValidEmit("class A {}", object())

    def test_valid_emit_cannot_be_copied_with_new_code(self):
        """Test dataclasses.replace cannot carry the gate over to other code."""
        valid = OptionalEmit("class A {}").validate_or_throw()

        with pytest.raises(TypeError):
            dataclasses.replace(valid, code="garbage !!!")
        assert valid.code == "class A {}"

    def test_gated_results_compare_by_code(self):
        """Test two confirmed results with the same code are equal."""
        first = OptionalEmit("x").validate_or_throw()
        second = OptionalEmit("x").try_validate()
        assert first == second
        assert str(first) == "x"
