"""
Diagnostics produced by the emitter and the compiler validator.

A diagnostic is a severity plus a message. Its string form is the tagged
text ``error: <msg>`` / ``warning: <msg>`` / ``<msg>``; the severity is the
only thing success checks look at.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Diagnostic severity. NONE marks unclassified compiler output."""
    ERROR = "error"
    WARNING = "warning"
    NONE = "none"


_PREFIXES = {
    Severity.ERROR: "error: ",
    Severity.WARNING: "warning: ",
}


@dataclass(frozen=True)
class Diagnostic:
    """A single emit or validation message."""
    severity: Severity
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        return f"{_PREFIXES.get(self.severity, '')}{self.message}"

    @classmethod
    def error(cls, message: str) -> "Diagnostic":
        return cls(Severity.ERROR, message)

    @classmethod
    def warning(cls, message: str) -> "Diagnostic":
        return cls(Severity.WARNING, message)

    @classmethod
    def info(cls, message: str) -> "Diagnostic":
        return cls(Severity.NONE, message)

    @classmethod
    def parse(cls, text: str) -> "Diagnostic":
        """
        Read a tagged diagnostic string back into a Diagnostic.

        Args:
            text: Text such as ``"error: something failed"``

        Returns:
            Diagnostic with the severity named by the prefix, or
            Severity.NONE when there is no recognised prefix
        """
        for severity, prefix in _PREFIXES.items():
            if text.startswith(prefix):
                return cls(severity, text[len(prefix):])
        return cls(Severity.NONE, text)
