"""
Compiler package for tsemit.

Runs the external TypeScript toolchain: tsc resolution and validation of
emitted source, and optional formatting with dprint or prettier.
"""

from .tsc_utils import TscEnvironment, ToolResult, get_tsc_environment, probe, run_tool
from .validator import Checker, TscValidator, parse_tsc_output, validate_many
from .formatter import (
    ChainFormatter,
    DprintFormatter,
    PrettierFormatter,
    SourceFormatter,
    default_formatter,
)

__all__ = [
    "TscEnvironment",
    "ToolResult",
    "get_tsc_environment",
    "probe",
    "run_tool",
    "Checker",
    "TscValidator",
    "parse_tsc_output",
    "validate_many",
    "SourceFormatter",
    "DprintFormatter",
    "PrettierFormatter",
    "ChainFormatter",
    "default_formatter",
]
