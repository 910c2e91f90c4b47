"""
Constants for the tsemit package.

This module consolidates constant definitions used across the emit and
compiler layers, providing a single source of truth for default option
values and external tool settings.
"""

from __future__ import annotations


# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_INDENTATION = "  "
DEFAULT_END_OF_LINE = "\n"
DEFAULT_HEADER_COMMENT = "// <auto-generated />"

# Indent applied to the inside of control-flow blocks built by BodyBuilder.
BLOCK_INDENT = "  "
EMPTY_BLOCK = "{ }"

# Object literals with more entries than this are rendered one entry per line.
OBJECT_LITERAL_SINGLE_LINE_LIMIT = 3

# Statement endings that must not receive an extra semicolon.
STATEMENT_TERMINATORS = (";", "}", "{")


# =============================================================================
# External Tool Constants
# =============================================================================

TSC_COMMAND = "tsc"
NPX_COMMAND = "npx"
DPRINT_COMMAND = "dprint"

DEFAULT_VALIDATION_TIMEOUT = 30.0
TOOL_PROBE_TIMEOUT = 15.0
FORMATTER_TIMEOUT = 30.0

TEMP_DIR_PREFIX = "tsemit-"
VALIDATION_SOURCE_FILE = "emit.ts"
VALIDATION_CONFIG_FILE = "tsconfig.json"

# Minimal strict single-file project used for validation runs.
VALIDATION_TSCONFIG = {
    "compilerOptions": {
        "strict": True,
        "target": "ES2022",
        "module": "ES2022",
        "moduleResolution": "bundler",
        "noEmit": True,
        "skipLibCheck": True,
        "lib": ["ES2022", "DOM"],
    },
    "include": [VALIDATION_SOURCE_FILE],
}

DPRINT_TYPESCRIPT_PLUGIN = "https://plugins.dprint.dev/typescript-0.95.4.wasm"

# Markers used to classify lines of tsc output.
TSC_ERROR_MARKER = ": error TS"
TSC_WARNING_MARKER = ": warning TS"
TSC_GLOBAL_ERROR_PREFIX = "error TS"


# =============================================================================
# Environment Variables
# =============================================================================

ENV_LOG_LEVEL = "TSEMIT_LOG_LEVEL"
ENV_CONFIG_FILE = "TSEMIT_CONFIG"
ENV_TSC_PATH = "TSEMIT_TSC_PATH"
ENV_VALIDATE = "TSEMIT_VALIDATE"
