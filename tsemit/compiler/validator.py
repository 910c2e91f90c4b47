"""
TypeScript validation through the external compiler.

The validator writes the emitted source into a fresh temporary project,
runs ``tsc --noEmit`` on it and turns the compiler output into
diagnostics. It never raises: a missing compiler, a timeout or any other
failure is reported as an error diagnostic, and the temporary directory is
always removed.
"""

import json
import os
import shutil
import tempfile
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Protocol

from ..emit.diagnostics import Diagnostic
from ..utils.constants import (
    DEFAULT_VALIDATION_TIMEOUT,
    TEMP_DIR_PREFIX,
    TSC_ERROR_MARKER,
    TSC_GLOBAL_ERROR_PREFIX,
    TSC_WARNING_MARKER,
    VALIDATION_CONFIG_FILE,
    VALIDATION_SOURCE_FILE,
    VALIDATION_TSCONFIG,
)
from ..utils.config import get_config
from ..utils.logging import EmitLogger, get_logger
from .tsc_utils import TscEnvironment, ToolResult, get_tsc_environment, run_tool

logger = get_logger(__name__)
emit_logger = EmitLogger(__name__)

NO_OUTPUT_MESSAGE = "tsc exited with errors but produced no output."


class Checker(Protocol):
    """Anything that can check source text and report diagnostics."""

    def validate(self, source: str) -> List[Diagnostic]:
        ...


def parse_tsc_output(output: str) -> List[Diagnostic]:
    """
    Convert tsc output into diagnostics.

    Lines containing ``: error TS`` or starting with ``error TS`` are errors,
    lines containing ``: warning TS`` are warnings, and every other non-blank
    line is kept unclassified.

    Args:
        output: Combined compiler stdout and stderr

    Returns:
        Diagnostics in output order; a single error when output is empty
    """
    if not output or not output.strip():
        return [Diagnostic.error(NO_OUTPUT_MESSAGE)]

    diagnostics = []
    for raw_line in output.split("\n"):
        line = raw_line.rstrip("\r")
        if not line.strip():
            continue
        if TSC_ERROR_MARKER in line or line.startswith(TSC_GLOBAL_ERROR_PREFIX):
            diagnostics.append(Diagnostic.error(line))
        elif TSC_WARNING_MARKER in line:
            diagnostics.append(Diagnostic.warning(line))
        else:
            diagnostics.append(Diagnostic.info(line))
    return diagnostics


class TscValidator:
    """Checker backed by the TypeScript compiler."""

    def __init__(
        self,
        tsc_path: Optional[str] = None,
        timeout: float = DEFAULT_VALIDATION_TIMEOUT,
        environment: Optional[TscEnvironment] = None,
    ):
        """
        Initialize the validator.

        Args:
            tsc_path: Explicit compiler path; resolved automatically when None
            timeout: Maximum compiler run time in seconds
            environment: Pre-built environment, mainly for tests
        """
        self.timeout = timeout
        self.environment = environment or get_tsc_environment(tsc_path)

    def is_available(self) -> bool:
        """Check if the compiler can be run."""
        return self.environment.is_available()

    def validate(self, source: str) -> List[Diagnostic]:
        """
        Type-check source text.

        Args:
            source: Complete TypeScript file contents

        Returns:
            Empty list when tsc accepts the file, otherwise its diagnostics
        """
        temp_dir = None
        try:
            temp_dir = tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX)
            tsconfig_path = self._write_project(temp_dir, source)
            command = self.environment.get_check_command(tsconfig_path)
            result = run_tool(command, self.timeout, cwd=temp_dir)
            diagnostics = self._diagnostics_from(result)
            emit_logger.log_validation_result(
                len(diagnostics), sum(1 for diag in diagnostics if diag.is_error), result.elapsed
            )
            return diagnostics
        except OSError as e:
            logger.warning(f"Could not run tsc: {e}")
            return [Diagnostic.error(f"Failed to run tsc: {e}")]
        except Exception as e:
            logger.error(f"Unexpected error during validation: {e}")
            return [Diagnostic.error(f"Validation failed: {e}")]
        finally:
            if temp_dir is not None:
                shutil.rmtree(temp_dir, ignore_errors=True)

    def _write_project(self, temp_dir: str, source: str) -> str:
        source_path = os.path.join(temp_dir, VALIDATION_SOURCE_FILE)
        with open(source_path, "w", encoding="utf-8") as f:
            f.write(source)

        tsconfig_path = os.path.join(temp_dir, VALIDATION_CONFIG_FILE)
        with open(tsconfig_path, "w", encoding="utf-8") as f:
            json.dump(VALIDATION_TSCONFIG, f, indent=2)

        return tsconfig_path

    def _diagnostics_from(self, result: ToolResult) -> List[Diagnostic]:
        if result.timed_out:
            diagnostics = parse_tsc_output(result.output) if result.output.strip() else []
            diagnostics.append(Diagnostic.error(f"tsc timed out after {self.timeout:g} seconds"))
            return diagnostics

        if result.returncode == 0:
            return []

        diagnostics = parse_tsc_output(result.output)
        error_count = sum(1 for diag in diagnostics if diag.is_error)
        logger.info(f"tsc exited with code {result.returncode}: {error_count} compiler errors")
        if not any(diag.is_error for diag in diagnostics):
            diagnostics.append(Diagnostic.error(f"tsc exited with code {result.returncode}."))
        return diagnostics


def validate_many(
    sources: Iterable[str],
    max_workers: Optional[int] = None,
    checker: Optional[Checker] = None,
) -> List[List[Diagnostic]]:
    """
    Validate several sources concurrently.

    Each run uses its own temporary directory; results keep input order.

    Args:
        sources: Source texts to check
        max_workers: Thread pool size; the configured validation.max_workers when None
        checker: Checker to use; a default TscValidator when None

    Returns:
        One diagnostics list per source
    """
    checker = checker or TscValidator()
    sources = list(sources)
    if not sources:
        return []

    if max_workers is None:
        max_workers = get_config().validation.max_workers

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(checker.validate, sources))
