"""
Pytest configuration and shared fixtures for tsemit tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
import tempfile
import shutil
from typing import List

from tsemit import EmitOptions, TypeBuilder
from tsemit.emit.diagnostics import Diagnostic
from tsemit.utils.config import set_config


# Test configuration
@pytest.fixture(scope="session")
def test_config():
    """Global test configuration."""
    return {
        'temp_dir': None,
        'tsc_available': shutil.which("tsc") is not None or shutil.which("npx") is not None,
    }


@pytest.fixture(scope="session")
def temp_test_dir(test_config):
    """Create temporary directory for test artifacts."""
    temp_dir = tempfile.mkdtemp(prefix="tsemit_test_")
    test_config['temp_dir'] = temp_dir
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_global_config():
    """Drop the cached global configuration around every test."""
    set_config(None)
    yield
    set_config(None)


# Builder fixtures
@pytest.fixture
def plain_options():
    """Emit options without the header comment, so output starts at the declaration."""
    return EmitOptions(header_comment=None)


@pytest.fixture
def person_builder():
    """The exported Person class used by the end-to-end tests."""
    return (
        TypeBuilder.class_("Person")
        .exported()
        .add_field("id", "string", lambda f: f.as_readonly())
        .add_constructor(
            lambda c: c.add_parameter("id", "string").with_body(lambda b: b.add_statement("this.id = id"))
        )
        .add_method(
            "greet",
            lambda m: m.with_return_type("string").with_body(
                lambda b: b.add_return("`Hello, ${this.id}`")
            ),
        )
    )


class StubChecker:
    """Checker returning canned diagnostics and recording what it saw."""

    def __init__(self, diagnostics: List[Diagnostic] = None):
        self.diagnostics = list(diagnostics or [])
        self.sources = []

    def validate(self, source: str) -> List[Diagnostic]:
        self.sources.append(source)
        return list(self.diagnostics)


class StubFormatter:
    """Formatter that prefixes a marker line and counts its calls."""

    def __init__(self, prefix: str = "// formatted\n"):
        self.prefix = prefix
        self.calls = 0

    def format(self, code: str, options) -> str:
        self.calls += 1
        return self.prefix + code


@pytest.fixture
def stub_checker():
    """Checker that reports no diagnostics."""
    return StubChecker()


@pytest.fixture
def stub_formatter():
    """Formatter that prefixes a marker comment."""
    return StubFormatter()


# Pytest hooks for test collection and reporting
def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and skip conditions."""
    for item in items:
        # Add markers based on test path
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        # Skip tests that need the TypeScript compiler
        if "requires_tsc" in item.keywords:
            if not shutil.which("tsc") and not shutil.which("npx"):
                item.add_marker(pytest.mark.skip(reason="TypeScript compiler not available"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests against the real compiler"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take a long time to run"
    )
    config.addinivalue_line(
        "markers", "requires_tsc: Tests that require the TypeScript compiler (tsc or npx)"
    )
