"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
tsemit package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional

from .constants import ENV_LOG_LEVEL

ROOT_LOGGER_NAME = "tsemit"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the tsemit package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING")

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def setup_logging_from_config(config=None) -> None:
    """
    Configure logging from the ``logging`` section of a configuration.

    TSEMIT_LOG_LEVEL still takes precedence over the configured level.

    Args:
        config: TsEmitConfig to read; the global configuration when None
    """
    if config is None:
        from .config import get_config

        config = get_config()

    log_config = config.logging
    level = os.environ.get(ENV_LOG_LEVEL) or log_config.level
    log_file = log_config.log_file if log_config.enable_file_logging else None
    setup_logging(level=level, log_file=log_file)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance nested under the package logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class EmitLogger:
    """
    Domain-specific logging helpers for emit and validation runs.

    Wraps a module logger with methods for the events the emitter,
    validator and formatter report, so messages stay uniform.
    """

    def __init__(self, name: str):
        """
        Initialize logger for a specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_emit_start(self, type_name: str, kind: str) -> None:
        """
        Log the beginning of an emit call.

        Args:
            type_name: Name of the root type being rendered
            kind: Declaration kind of the root type
        """
        self.logger.debug(f"Emitting {kind} '{type_name}'")

    def log_emit_failure(self, type_name: str, reason: str) -> None:
        """
        Log a rendering failure that was converted into a diagnostic.

        Args:
            type_name: Name of the root type
            reason: Error text placed in the diagnostic
        """
        self.logger.warning(f"Emit failed for '{type_name}': {reason}")

    def log_validation_result(self, diagnostic_count: int, error_count: int, elapsed: float) -> None:
        """
        Log the outcome of a compiler validation run.

        Args:
            diagnostic_count: Number of diagnostics produced
            error_count: Number of error diagnostics among them
            elapsed: Wall-clock time of the compiler run in seconds
        """
        self.logger.info(
            f"Validation finished in {elapsed:.3f}s: {diagnostic_count} diagnostics ({error_count} errors)"
        )

    def log_tool_resolution(self, tool: str, command: str) -> None:
        """
        Log which command line an external tool resolved to.

        Args:
            tool: Logical tool name (e.g. 'tsc')
            command: Resolved command
        """
        self.logger.debug(f"Resolved {tool} to '{command}'")

    def log_formatter_fallback(self, formatter: str, reason: str) -> None:
        """
        Log that a formatter was skipped and the next one will be tried.

        Args:
            formatter: Formatter that could not be used
            reason: Why it was skipped
        """
        self.logger.debug(f"Formatter '{formatter}' unavailable: {reason}")


# Initialize logging on module import
setup_logging()
