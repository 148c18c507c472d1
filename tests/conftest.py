"""
Pytest configuration and shared fixtures for AMXXRelease tests.
"""

import pytest

from amxxrelease.core.platform import clear_platform_cache

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.release import (
    source_tree,
    output_dir,
    release_config,
    fun_module,
    cstrike_module,
)


@pytest.fixture(autouse=True)
def fresh_platform_cache():
    """Reset cached platform detection around each test."""
    clear_platform_cache()
    yield
    clear_platform_cache()
