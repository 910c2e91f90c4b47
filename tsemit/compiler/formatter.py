"""
Optional source formatting through external formatters.

dprint is tried first (no Node.js needed), then prettier through npx. When
neither can format the text it is returned unchanged; formatting problems
are logged and never raised.
"""

from typing import List, Optional, Protocol, Sequence

from ..utils.constants import DPRINT_COMMAND, DPRINT_TYPESCRIPT_PLUGIN, FORMATTER_TIMEOUT, NPX_COMMAND
from ..utils.logging import EmitLogger, get_logger
from .tsc_utils import probe, run_tool

logger = get_logger(__name__)
emit_logger = EmitLogger(__name__)


class SourceFormatter(Protocol):
    """Formats TypeScript source according to emit options."""

    def format(self, code: str, options) -> str:
        ...


class _StdinFormatter:
    """Base for formatters that read source on stdin and print the result."""

    name = "formatter"

    def __init__(self, timeout: float = FORMATTER_TIMEOUT):
        self.timeout = timeout

    def build_command(self, options) -> List[str]:
        raise NotImplementedError

    def version_command(self) -> List[str]:
        raise NotImplementedError

    def try_format(self, code: str, options) -> Optional[str]:
        """
        Format code, returning None when the tool is missing or fails.

        Args:
            code: Source text
            options: EmitOptions supplying indentation, semicolons, quotes
                and trailing comma settings

        Returns:
            Formatted text, or None
        """
        try:
            result = run_tool(self.build_command(options), self.timeout, input_text=code)
        except OSError as e:
            emit_logger.log_formatter_fallback(self.name, str(e))
            return None

        if not result.succeeded:
            emit_logger.log_formatter_fallback(self.name, f"exit code {result.returncode}")
            return None
        if not result.stdout.strip():
            emit_logger.log_formatter_fallback(self.name, "no output")
            return None
        return result.stdout

    def format(self, code: str, options) -> str:
        formatted = self.try_format(code, options)
        return code if formatted is None else formatted

    def is_available(self) -> bool:
        return probe(self.version_command())


class DprintFormatter(_StdinFormatter):
    """Formats with ``dprint fmt --stdin ts`` and the TypeScript plugin."""

    name = "dprint"

    def build_command(self, options) -> List[str]:
        settings = [
            f"indentWidth={options.indent_width}",
            f"useTabs={'true' if options.uses_tabs else 'false'}",
            f"semiColons={'always' if options.use_semicolons else 'asi'}",
            f"quoteStyle={'preferSingle' if options.single_quotes else 'preferDouble'}",
            f"trailingCommas={'always' if options.use_trailing_commas else 'never'}",
        ]
        command = [DPRINT_COMMAND, "fmt", "--stdin", "ts", "--plugins", DPRINT_TYPESCRIPT_PLUGIN]
        for setting in settings:
            command.extend(["--config-inline", setting])
        return command

    def version_command(self) -> List[str]:
        return [DPRINT_COMMAND, "--version"]


class PrettierFormatter(_StdinFormatter):
    """Formats with prettier run through ``npx``."""

    name = "prettier"

    def build_command(self, options) -> List[str]:
        return [
            NPX_COMMAND, "--yes", "prettier", "--parser", "typescript",
            "--tab-width", str(options.indent_width),
            "--use-tabs" if options.uses_tabs else "--no-use-tabs",
            "--semi" if options.use_semicolons else "--no-semi",
            "--single-quote" if options.single_quotes else "--no-single-quote",
            "--trailing-comma", "all" if options.use_trailing_commas else "none",
        ]

    def version_command(self) -> List[str]:
        return [NPX_COMMAND, "--yes", "prettier", "--version"]


class ChainFormatter:
    """Tries each formatter in turn and keeps the first result."""

    def __init__(self, formatters: Sequence[_StdinFormatter]):
        self.formatters = list(formatters)

    def format(self, code: str, options) -> str:
        for formatter in self.formatters:
            formatted = formatter.try_format(code, options)
            if formatted is not None:
                logger.debug(f"Formatted output with {formatter.name}")
                return formatted
        logger.debug("No formatter available, returning code unchanged")
        return code

    def is_available(self) -> bool:
        return any(formatter.is_available() for formatter in self.formatters)


def default_formatter() -> ChainFormatter:
    """dprint first, then prettier."""
    return ChainFormatter([DprintFormatter(), PrettierFormatter()])
