"""
Enumerations shared by the builders and the emitter.
"""

from __future__ import annotations

from enum import Enum


class TypeKind(Enum):
    """Kind of top-level or nested TypeScript declaration."""
    CLASS = "class"
    INTERFACE = "interface"
    TYPE_ALIAS = "type"
    ENUM = "enum"
    CONST_ENUM = "const enum"


class Accessibility(Enum):
    """Member accessibility keyword. NONE renders no keyword."""
    NONE = ""
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"

    @property
    def keyword(self) -> str:
        return self.value


class ValidationLevel(Enum):
    """Level of validation to perform after rendering."""
    NONE = "none"
    SYNTAX = "syntax"

    @property
    def rank(self) -> int:
        return _VALIDATION_RANK[self]

    def __ge__(self, other):
        if not isinstance(other, ValidationLevel):
            return NotImplemented
        return self.rank >= other.rank

    def __lt__(self, other):
        if not isinstance(other, ValidationLevel):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def parse(cls, value) -> "ValidationLevel":
        """Accept a ValidationLevel or its case-insensitive name/value."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for level in cls:
            if text in (level.value, level.name.lower()):
                return level
        raise ValueError(f"Unknown validation level: {value!r}")


_VALIDATION_RANK = {ValidationLevel.NONE: 0, ValidationLevel.SYNTAX: 1}
