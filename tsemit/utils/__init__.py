"""
Utils package for tsemit.

This module provides logging, configuration, exceptions, constants and
text helpers shared by the emit and compiler packages.
"""

from .exceptions import (
    TsEmitError,
    BuilderError,
    EmitValidationError,
    CompilationError,
    ToolNotFoundError,
)
from .constants import *
from .string_utils import normalize_statement, prefix_lines, require_text, split_lines

from .config import (
    TsEmitConfig,
    EmitConfig,
    ValidationConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)

from .logging import EmitLogger, get_logger, setup_logging, setup_logging_from_config

__all__ = [
    # Exceptions
    "TsEmitError",
    "BuilderError",
    "EmitValidationError",
    "CompilationError",
    "ToolNotFoundError",

    # Constants (exported via *)

    # String utilities
    "require_text",
    "normalize_statement",
    "prefix_lines",
    "split_lines",

    # Configuration
    "TsEmitConfig",
    "EmitConfig",
    "ValidationConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "EmitLogger",
    "get_logger",
    "setup_logging",
    "setup_logging_from_config",
]
