"""
Emit results.

OptionalEmit is what the emitter returns: code (possibly None) plus
diagnostics. ValidEmit can only be obtained from a successful OptionalEmit
through ``validate_or_throw`` or ``try_validate``, so holding one means the
code was emitted and no diagnostic was an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..utils.exceptions import EmitValidationError
from .diagnostics import Diagnostic

_GATE_TOKEN = object()


@dataclass(frozen=True)
class OptionalEmit:
    """Unconfirmed emit result."""
    code: Optional[str]
    diagnostics: Tuple[Diagnostic, ...] = ()

    def __post_init__(self):
        normalized = tuple(
            diag if isinstance(diag, Diagnostic) else Diagnostic.parse(str(diag))
            for diag in self.diagnostics
        )
        object.__setattr__(self, "diagnostics", normalized)

    @property
    def success(self) -> bool:
        return self.code is not None and not any(diag.is_error for diag in self.diagnostics)

    @property
    def errors(self) -> Tuple[Diagnostic, ...]:
        return tuple(diag for diag in self.diagnostics if diag.is_error)

    @property
    def warnings(self) -> Tuple[Diagnostic, ...]:
        return tuple(diag for diag in self.diagnostics if diag.is_warning)

    def validate_or_throw(self, message: Optional[str] = None) -> "ValidEmit":
        """
        Confirm the result.

        Args:
            message: Error message to use instead of the generated one

        Returns:
            ValidEmit holding the same code

        Raises:
            EmitValidationError: If the result is not successful
        """
        if not self.success:
            if message is None:
                message = "Emit failed: " + ", ".join(str(diag) for diag in self.diagnostics)
            raise EmitValidationError(message, self.diagnostics)
        return ValidEmit._from_gate(self.code)

    def try_validate(self) -> Optional["ValidEmit"]:
        """Return a ValidEmit on success, otherwise None."""
        if not self.success:
            return None
        return ValidEmit._from_gate(self.code)


@dataclass(frozen=True)
class ValidEmit:
    """Confirmed emit result. Only produced by OptionalEmit."""
    code: str
    _token: object = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self._token is not _GATE_TOKEN:
            raise TypeError("ValidEmit can only be created through OptionalEmit.validate_or_throw or try_validate")
        if self.code is None:
            raise TypeError("ValidEmit requires code")

    @classmethod
    def _from_gate(cls, code: str) -> "ValidEmit":
        # __init__ always leaves the token unset.
        instance = object.__new__(cls)
        object.__setattr__(instance, "code", code)
        object.__setattr__(instance, "_token", _GATE_TOKEN)
        return instance

    def __str__(self) -> str:
        return self.code
