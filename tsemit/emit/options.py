"""
Emit options.

EmitOptions controls how the emitter renders text and which optional
post-processing passes (formatting, compiler validation) run afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Optional

from ..utils.constants import (
    DEFAULT_END_OF_LINE,
    DEFAULT_HEADER_COMMENT,
    DEFAULT_INDENTATION,
    DEFAULT_VALIDATION_TIMEOUT,
)
from .kinds import ValidationLevel

if TYPE_CHECKING:
    from ..utils.config import TsEmitConfig


@dataclass(frozen=True)
class EmitOptions:
    """Rendering and post-processing settings for a single emit call."""
    indentation: str = DEFAULT_INDENTATION
    end_of_line: str = DEFAULT_END_OF_LINE
    header_comment: Optional[str] = DEFAULT_HEADER_COMMENT
    use_semicolons: bool = True
    use_trailing_commas: bool = False
    single_quotes: bool = True
    format_output: bool = False
    validation_level: ValidationLevel = ValidationLevel.NONE
    tsc_path: Optional[str] = None
    validation_timeout: float = DEFAULT_VALIDATION_TIMEOUT
    # Injected collaborators; None selects the tsc validator / default formatter chain.
    checker: Optional[Any] = field(default=None, compare=False)
    formatter: Optional[Any] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "validation_level", ValidationLevel.parse(self.validation_level))

    @property
    def semicolon(self) -> str:
        return ";" if self.use_semicolons else ""

    @property
    def uses_tabs(self) -> bool:
        return "\t" in self.indentation

    @property
    def indent_width(self) -> int:
        return 1 if self.uses_tabs else len(self.indentation)

    @classmethod
    def default(cls) -> "EmitOptions":
        return cls()

    @classmethod
    def from_config(cls, config: Optional["TsEmitConfig"] = None) -> "EmitOptions":
        """
        Build options from the configuration layer.

        Args:
            config: Configuration to read; the global configuration when None

        Returns:
            EmitOptions populated from the ``emit`` and ``validation`` sections
        """
        if config is None:
            from ..utils.config import get_config

            config = get_config()

        emit_config = config.emit
        validation_config = config.validation
        return cls(
            indentation=emit_config.indentation,
            end_of_line=emit_config.end_of_line,
            header_comment=emit_config.header_comment,
            use_semicolons=emit_config.use_semicolons,
            use_trailing_commas=emit_config.use_trailing_commas,
            single_quotes=emit_config.single_quotes,
            format_output=emit_config.format_output,
            validation_level=ValidationLevel.parse(validation_config.level),
            tsc_path=validation_config.tsc_path,
            validation_timeout=validation_config.timeout_seconds,
        )

    def with_(self, **changes) -> "EmitOptions":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
