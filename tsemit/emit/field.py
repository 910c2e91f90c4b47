"""
Field builder for class and interface members.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..utils.string_utils import require_text
from .kinds import Accessibility


@dataclass(frozen=True)
class FieldBuilder:
    """A field declaration such as ``private readonly id: string = '';``."""
    name: str
    type: str
    accessibility: Accessibility = Accessibility.NONE
    is_readonly: bool = False
    is_static: bool = False
    is_optional: bool = False
    is_es_private: bool = False
    is_declare: bool = False
    is_override: bool = False
    is_abstract: bool = False
    initializer: Optional[str] = None

    @classmethod
    def for_(cls, name, type_) -> "FieldBuilder":
        return cls(
            name=require_text(name, "Field name cannot be empty or whitespace.", "name"),
            type=require_text(type_, "Field type cannot be empty or whitespace.", "type"),
        )

    def with_accessibility(self, accessibility: Accessibility) -> "FieldBuilder":
        return replace(self, accessibility=accessibility)

    def as_readonly(self) -> "FieldBuilder":
        return replace(self, is_readonly=True)

    def as_static(self) -> "FieldBuilder":
        return replace(self, is_static=True)

    def as_optional(self) -> "FieldBuilder":
        return replace(self, is_optional=True)

    def as_es_private(self) -> "FieldBuilder":
        """Render the field with a ``#`` private name."""
        return replace(self, is_es_private=True)

    def as_declare(self) -> "FieldBuilder":
        return replace(self, is_declare=True)

    def as_override(self) -> "FieldBuilder":
        return replace(self, is_override=True)

    def as_abstract(self) -> "FieldBuilder":
        return replace(self, is_abstract=True)

    def with_initializer(self, expression) -> "FieldBuilder":
        return replace(self, initializer=str(expression))
