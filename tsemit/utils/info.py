"""
Package information utility.

This module provides a command-line utility for displaying
information about the tsemit installation and the external
TypeScript tooling it can use.
"""

import platform
import sys
from typing import Any, Dict

import tsemit
from tsemit.utils.logging import setup_logging_from_config


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to tsemit.

    Returns:
        Dictionary containing system information
    """
    return {
        "python_version": sys.version,
        "platform": platform.platform(),
        "architecture": platform.architecture(),
    }


def get_toolchain_info() -> Dict[str, Any]:
    """
    Get availability of the external TypeScript tools.

    Returns:
        Dictionary with the resolved tsc command, its version and
        formatter availability
    """
    from tsemit.compiler import DprintFormatter, PrettierFormatter, get_tsc_environment
    from tsemit.utils.config import get_config

    config = get_config()
    environment = get_tsc_environment(config.validation.tsc_path)

    info = {
        "tsc_command": " ".join(environment.resolve()),
        "tsc_version": environment.get_version(),
        "dprint_available": DprintFormatter().is_available(),
        "prettier_available": PrettierFormatter().is_available(),
        "config_file": str(config.config_file),
        "validation_level": config.validation.level,
    }
    return info


def print_info() -> None:
    """Print formatted information about tsemit and the system."""
    print("tsemit TypeScript Emitter")
    print("=" * 40)

    print(f"\ntsemit Version: {tsemit.__version__}")
    print(f"Author: {tsemit.__author__}")

    toolchain = get_toolchain_info()
    print(f"\ntsc Command: {toolchain['tsc_command']}")
    if toolchain["tsc_version"]:
        print(f"tsc Version: {toolchain['tsc_version']}")
    else:
        print("tsc: Not available")
    print(f"dprint Available: {toolchain['dprint_available']}")
    print(f"prettier Available: {toolchain['prettier_available']}")
    print(f"Config File: {toolchain['config_file']}")
    print(f"Validation Level: {toolchain['validation_level']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Architecture: {system_info['architecture'][0]}")


def main() -> None:
    """Main entry point for the tsemit-info command."""
    try:
        setup_logging_from_config()
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
