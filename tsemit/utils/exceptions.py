"""
Custom exception definitions.

This module defines the exception hierarchy for tsemit-specific errors.
Builder preconditions raise immediately; the emitter and validator report
problems as diagnostics instead, so the only other raise point is the
result gate.
"""

from typing import Optional, Sequence


class TsEmitError(Exception):
    """
    Base exception for all tsemit errors.

    Carries a human-readable message plus an optional dictionary of
    context rendered after the message.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize the error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class BuilderError(TsEmitError, ValueError):
    """
    Raised when a builder precondition is violated.

    Examples are a blank member name or type annotation, a blank statement,
    or an arrow function built without any body.
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        """
        Initialize builder error.

        Args:
            message: Error description
            argument: Name of the offending argument
        """
        details = {}
        if argument is not None:
            details["argument"] = argument
        super().__init__(message, details)
        self.argument = argument


class EmitValidationError(TsEmitError):
    """
    Raised by the result gate when an emit result is not successful.

    The diagnostics that caused the failure are kept on the exception.
    """

    def __init__(self, message: str, diagnostics: Sequence = ()):
        """
        Initialize emit validation error.

        Args:
            message: Error description
            diagnostics: Diagnostics of the failed emit
        """
        super().__init__(message, {"diagnostic_count": len(diagnostics)} if diagnostics else None)
        self.diagnostics = tuple(diagnostics)

    def get_errors(self) -> list:
        """
        Extract the error-severity diagnostics.

        Returns:
            List of error diagnostics
        """
        return [diag for diag in self.diagnostics if diag.is_error]


class CompilationError(TsEmitError):
    """
    Describes a failed TypeScript compiler run.

    The validator converts these into diagnostics at its boundary; the
    exception type exists so the failure can be logged and inspected with
    the source and raw compiler output attached.
    """

    def __init__(self, message: str, source: str = "", compiler_output: str = ""):
        """
        Initialize compilation error.

        Args:
            message: Error description
            source: TypeScript source that failed to compile
            compiler_output: Output from the compiler
        """
        details = {}
        if source:
            details["source_length"] = len(source)
        if compiler_output:
            details["compiler_output_length"] = len(compiler_output)

        super().__init__(message, details)
        self.source = source
        self.compiler_output = compiler_output

    def get_compiler_errors(self) -> list:
        """
        Extract error lines from compiler output.

        Returns:
            List of error message strings
        """
        if not self.compiler_output:
            return []

        errors = []
        for line in self.compiler_output.split("\n"):
            if "error ts" in line.lower():
                errors.append(line.strip())
        return errors


class ToolNotFoundError(TsEmitError):
    """
    Raised when a required external tool cannot be started.

    Only raised on request (``TscEnvironment.require``); the validator
    itself reports a missing compiler as a diagnostic.
    """

    def __init__(self, tool: str, reason: str = ""):
        """
        Initialize tool-not-found error.

        Args:
            tool: Name of the missing tool
            reason: Optional explanation
        """
        message = f"External tool '{tool}' is not available"
        if reason:
            message += f": {reason}"

        super().__init__(message, {"tool": tool})
        self.tool = tool
        self.reason = reason
