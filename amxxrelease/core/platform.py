"""
Platform detection for AMXXRelease.

Only the operating system matters when choosing a release builder, so
detection is limited to a normalized OS name.

Usage:
    from amxxrelease.core.platform import detect_os

    if detect_os() == "windows":
        ...
"""

import functools
import platform

from amxxrelease.core.exceptions import UnsupportedPlatformError


@functools.lru_cache(maxsize=1)
def detect_os() -> str:
    """
    Detect the current operating system.

    This function is cached - it only runs detection once per process.

    Returns:
        Normalized OS name: 'windows', 'linux' or 'macos'

    Raises:
        UnsupportedPlatformError: If the OS is not recognized
    """
    system = platform.system().lower()

    if system == "windows":
        return "windows"
    elif system == "linux":
        return "linux"
    elif system == "darwin":
        return "macos"
    else:
        raise UnsupportedPlatformError(system)


def clear_platform_cache() -> None:
    """Clear the cached detection result (used by tests)."""
    detect_os.cache_clear()
