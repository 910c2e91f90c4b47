"""
TypeScript Toolchain Utilities.

This module locates the TypeScript compiler and runs external tools
(tsc, npx, dprint, prettier) as child processes with bounded waits.
"""

import os
import shlex
import subprocess
import time
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Sequence

from ..utils.constants import NPX_COMMAND, TOOL_PROBE_TIMEOUT, TSC_COMMAND
from ..utils.exceptions import ToolNotFoundError
from ..utils.logging import EmitLogger, get_logger

logger = get_logger(__name__)
emit_logger = EmitLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one external tool run. ``output`` is stdout and stderr joined."""
    command: tuple
    returncode: Optional[int]
    output: str
    elapsed: float
    timed_out: bool = False
    stdout: str = ""

    @property
    def succeeded(self) -> bool:
        return not self.timed_out and self.returncode == 0


def _decode(data) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def run_tool(
    command: Sequence[str],
    timeout: float,
    cwd: Optional[str] = None,
    input_text: Optional[str] = None,
) -> ToolResult:
    """
    Run an external tool and capture its combined output.

    On timeout the child is killed and whatever output was captured so far
    is returned with ``timed_out`` set.

    Args:
        command: Command and arguments
        timeout: Maximum wait in seconds
        cwd: Working directory for the child
        input_text: Text passed on stdin

    Returns:
        ToolResult with stdout and stderr joined

    Raises:
        OSError: If the process cannot be started
    """
    command = tuple(command)
    logger.debug(f"Running: {' '.join(command)}")
    start = time.perf_counter()

    try:
        result = subprocess.run(
            list(command),
            cwd=cwd,
            input=input_text,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        elapsed = time.perf_counter() - start
        output = _join_output(_decode(e.stdout), _decode(e.stderr))
        logger.warning(f"{command[0]} timed out after {timeout} seconds")
        return ToolResult(command, None, output, elapsed, timed_out=True, stdout=_decode(e.stdout))

    elapsed = time.perf_counter() - start
    output = _join_output(result.stdout or "", result.stderr or "")
    return ToolResult(command, result.returncode, output, elapsed, stdout=result.stdout or "")


def _join_output(stdout: str, stderr: str) -> str:
    if stdout and stderr:
        return stdout.rstrip("\n") + "\n" + stderr
    return stdout or stderr


def probe(command: Sequence[str], timeout: float = TOOL_PROBE_TIMEOUT) -> bool:
    """
    Check whether a command runs and exits with status 0.

    Args:
        command: Probe command, typically ending in ``--version``
        timeout: Maximum wait in seconds

    Returns:
        True if the command succeeded
    """
    try:
        return run_tool(command, timeout).succeeded
    except OSError as e:
        logger.debug(f"Probe {' '.join(command)} failed: {e}")
        return False


class TscEnvironment:
    """Resolves and checks the TypeScript compiler command."""

    def __init__(self, tsc_path: Optional[str] = None, probe_timeout: float = TOOL_PROBE_TIMEOUT):
        """
        Initialize tsc environment.

        Args:
            tsc_path: Explicit compiler path or command line; resolved from
                PATH / npx when None
            probe_timeout: Timeout for ``--version`` probes
        """
        self.tsc_path = tsc_path
        self.probe_timeout = probe_timeout
        self._command: Optional[List[str]] = None
        self._is_available: Optional[bool] = None

    def resolve(self) -> List[str]:
        """
        Resolve the compiler command.

        Order: explicit path, ``tsc`` on PATH, ``npx tsc``, and finally bare
        ``tsc`` so a later failure still names the compiler.

        Returns:
            Command prefix to which compiler arguments are appended
        """
        if self._command is not None:
            return list(self._command)

        if self.tsc_path:
            if os.path.exists(self.tsc_path):
                command = [self.tsc_path]
            else:
                command = shlex.split(self.tsc_path)
        elif probe([TSC_COMMAND, "--version"], self.probe_timeout):
            command = [TSC_COMMAND]
        elif probe([NPX_COMMAND, TSC_COMMAND, "--version"], self.probe_timeout):
            command = [NPX_COMMAND, TSC_COMMAND]
        else:
            command = [TSC_COMMAND]

        emit_logger.log_tool_resolution("tsc", " ".join(command))
        self._command = command
        return list(command)

    def is_available(self) -> bool:
        """Check if the resolved compiler answers ``--version``."""
        if self._is_available is not None:
            return self._is_available

        self._is_available = probe(self.resolve() + ["--version"], self.probe_timeout)
        if not self._is_available:
            logger.debug("tsc is not available")
        return self._is_available

    def get_version(self) -> Optional[str]:
        """Return the compiler version string, or None when unavailable."""
        try:
            result = run_tool(self.resolve() + ["--version"], self.probe_timeout)
        except OSError:
            return None
        if not result.succeeded:
            return None
        return result.output.strip() or None

    def require(self) -> List[str]:
        """
        Resolve the compiler, failing hard when it cannot run.

        Returns:
            Resolved command prefix

        Raises:
            ToolNotFoundError: If the compiler is not available
        """
        if not self.is_available():
            raise ToolNotFoundError(TSC_COMMAND, "install TypeScript or set TSEMIT_TSC_PATH")
        return self.resolve()

    def get_check_command(self, tsconfig_path: str) -> List[str]:
        """
        Get the type-check command for a project file.

        Args:
            tsconfig_path: Path to tsconfig.json

        Returns:
            Complete command list for subprocess
        """
        return self.resolve() + ["--noEmit", "--pretty", "false", "-p", tsconfig_path]


@lru_cache(maxsize=None)
def get_tsc_environment(tsc_path: Optional[str] = None) -> TscEnvironment:
    """Get the shared environment for a tsc path so resolution runs once."""
    return TscEnvironment(tsc_path)
