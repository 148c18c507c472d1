"""
Core functionality for AMXXRelease.

This package contains the foundational modules the builders depend on.
"""

from .exceptions import (
    ReleaseError,
    ConfigError,
    BuilderError,
    UnsupportedPlatformError,
)

from .locking import LockManager, LockTimeout

from .platform import detect_os, clear_platform_cache

from .process import ToolInvocation, ToolResult, run_tool

__all__ = [
    "ReleaseError",
    "ConfigError",
    "BuilderError",
    "UnsupportedPlatformError",
    "LockManager",
    "LockTimeout",
    "detect_os",
    "clear_platform_cache",
    "ToolInvocation",
    "ToolResult",
    "run_tool",
]
