"""
Constructor builder.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .body import BodyBuilder, BodyCallback
from .kinds import Accessibility
from .parameter import ParameterBuilder, make_parameter


@dataclass(frozen=True)
class ConstructorBuilder:
    """A class constructor with optional ``super(...)`` call and body."""
    accessibility: Accessibility = Accessibility.NONE
    parameters: Tuple[ParameterBuilder, ...] = ()
    body: Optional[BodyBuilder] = None
    super_arguments: Tuple[str, ...] = ()
    overload_signatures: Tuple[str, ...] = ()

    @classmethod
    def create(cls) -> "ConstructorBuilder":
        return cls()

    def with_accessibility(self, accessibility: Accessibility) -> "ConstructorBuilder":
        return replace(self, accessibility=accessibility)

    def add_parameter(self, name_or_parameter, type_=None, configure=None) -> "ConstructorBuilder":
        parameter = make_parameter(name_or_parameter, type_, configure)
        return replace(self, parameters=self.parameters + (parameter,))

    def with_body(self, configure: BodyCallback) -> "ConstructorBuilder":
        return replace(self, body=configure(BodyBuilder.empty()))

    def calls_super(self, *arguments) -> "ConstructorBuilder":
        """Emit ``super(arguments)`` as the first body statement."""
        return replace(self, super_arguments=tuple(str(arg) for arg in arguments))

    def add_overload_signature(self, signature: str) -> "ConstructorBuilder":
        return replace(self, overload_signatures=self.overload_signatures + (signature,))
