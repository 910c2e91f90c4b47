"""
Configuration System for tsemit.

This module provides a single configuration interface for rendering
defaults, compiler validation and logging, loaded from a JSON or YAML file
with a few environment variable overrides.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    DEFAULT_END_OF_LINE,
    DEFAULT_HEADER_COMMENT,
    DEFAULT_VALIDATION_TIMEOUT,
    ENV_CONFIG_FILE,
    ENV_TSC_PATH,
    ENV_VALIDATE,
)
from .logging import get_logger

logger = get_logger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_YAML_SUFFIXES = (".yaml", ".yml")


@dataclass
class EmitConfig:
    """Rendering configuration."""

    indent_size: int = 2
    use_tabs: bool = False
    end_of_line: str = DEFAULT_END_OF_LINE
    header_comment: Optional[str] = DEFAULT_HEADER_COMMENT
    use_semicolons: bool = True
    use_trailing_commas: bool = False
    single_quotes: bool = True
    format_output: bool = False

    @property
    def indentation(self) -> str:
        """Indentation unit derived from indent_size and use_tabs."""
        return "\t" if self.use_tabs else " " * self.indent_size


@dataclass
class ValidationConfig:
    """Compiler validation configuration."""

    level: str = "none"
    tsc_path: Optional[str] = None
    timeout_seconds: float = DEFAULT_VALIDATION_TIMEOUT
    max_workers: int = 4


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    enable_file_logging: bool = False
    log_file: str = "tsemit.log"


class TsEmitConfig:
    """
    Unified configuration manager for tsemit.

    Sections are exposed as dataclasses (``emit``, ``validation``,
    ``logging``). Missing keys fall back to defaults; a missing or unreadable
    file yields an all-default configuration.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses the
                TSEMIT_CONFIG environment variable or the default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.emit = self._create_emit_config()
        self.validation = self._create_validation_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        env_file = os.getenv(ENV_CONFIG_FILE)
        if env_file:
            return Path(env_file)

        # Default location: try YAML first, then JSON
        config_dir = Path(__file__).parent.parent
        yaml_config = config_dir / "tsemit_config.yaml"
        json_config = config_dir / "tsemit_config.json"

        if yaml_config.exists():
            return yaml_config
        return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.debug(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in _YAML_SUFFIXES:
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return {}

        if not isinstance(config_data, dict):
            logger.warning(f"Configuration file {self.config_file} is not a mapping, using defaults")
            return {}

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _create_emit_config(self) -> EmitConfig:
        """Create emit configuration from loaded data."""
        emit_data = self._config_data.get("emit", {}) or {}

        return EmitConfig(
            indent_size=emit_data.get("indent_size", 2),
            use_tabs=emit_data.get("use_tabs", False),
            end_of_line=emit_data.get("end_of_line", DEFAULT_END_OF_LINE),
            header_comment=emit_data.get("header_comment", DEFAULT_HEADER_COMMENT),
            use_semicolons=emit_data.get("use_semicolons", True),
            use_trailing_commas=emit_data.get("use_trailing_commas", False),
            single_quotes=emit_data.get("single_quotes", True),
            format_output=emit_data.get("format_output", False),
        )

    def _create_validation_config(self) -> ValidationConfig:
        """Create validation configuration from loaded data."""
        validation_data = self._config_data.get("validation", {}) or {}

        level = validation_data.get("level", "none")
        if os.getenv(ENV_VALIDATE, "").lower() in _TRUE_VALUES:
            level = "syntax"

        tsc_path = os.getenv(ENV_TSC_PATH) or validation_data.get("tsc_path")

        return ValidationConfig(
            level=level,
            tsc_path=tsc_path,
            timeout_seconds=float(validation_data.get("timeout_seconds", DEFAULT_VALIDATION_TIMEOUT)),
            max_workers=validation_data.get("max_workers", 4),
        )

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {}) or {}

        return LoggingConfig(
            level=log_data.get("level", "WARNING"),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "tsemit.log"),
        )

    def is_validation_enabled(self) -> bool:
        """Check if compiler validation is requested."""
        return self.validation.level.lower() != "none"

    def to_dict(self) -> Dict[str, Any]:
        """Return the configuration as a plain dictionary."""
        return {
            "version": "1.0",
            "description": "tsemit configuration",
            "emit": {
                "indent_size": self.emit.indent_size,
                "use_tabs": self.emit.use_tabs,
                "end_of_line": self.emit.end_of_line,
                "header_comment": self.emit.header_comment,
                "use_semicolons": self.emit.use_semicolons,
                "use_trailing_commas": self.emit.use_trailing_commas,
                "single_quotes": self.emit.single_quotes,
                "format_output": self.emit.format_output,
            },
            "validation": {
                "level": self.validation.level,
                "tsc_path": self.validation.tsc_path,
                "timeout_seconds": self.validation.timeout_seconds,
                "max_workers": self.validation.max_workers,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

    def save_config(self) -> None:
        """Save current configuration to file as JSON."""
        try:
            with open(self.config_file, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
            logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")


# Global configuration instance
_global_config: Optional[TsEmitConfig] = None


def get_config() -> TsEmitConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = TsEmitConfig()
    return _global_config


def set_config(config: Optional[TsEmitConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> TsEmitConfig:
    """Load configuration from a specific file."""
    return TsEmitConfig(config_file)
