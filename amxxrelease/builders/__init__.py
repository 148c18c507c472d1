"""
Release builders for AMXXRelease.

Each supported platform has one builder. The orchestrating script picks one
with :func:`create_builder` and drives it for the whole release run.
"""

from typing import Dict, Optional, Type

from amxxrelease.builders.base import Builder
from amxxrelease.builders.linux import LinuxBuilder
from amxxrelease.builders.win32 import Win32Builder
from amxxrelease.config.parser import BuildConfig
from amxxrelease.core.exceptions import UnsupportedPlatformError
from amxxrelease.core.locking import LockManager
from amxxrelease.core.platform import detect_os

BUILDERS: Dict[str, Type[Builder]] = {
    Win32Builder.name: Win32Builder,
    LinuxBuilder.name: LinuxBuilder,
}


def get_builder_class(os_name: Optional[str] = None) -> Type[Builder]:
    """
    Get the builder class for a platform.

    Args:
        os_name: 'windows' or 'linux' (default: the current platform)

    Returns:
        Builder subclass for the platform

    Raises:
        UnsupportedPlatformError: If no builder exists for the platform
    """
    if os_name is None:
        os_name = detect_os()

    try:
        return BUILDERS[os_name]
    except KeyError:
        raise UnsupportedPlatformError(os_name) from None


def create_builder(
    config: BuildConfig,
    os_name: Optional[str] = None,
    lock_manager: Optional[LockManager] = None,
) -> Builder:
    """
    Create a ready builder for a platform.

    Args:
        config: Release configuration
        os_name: Target platform (default: the current platform)
        lock_manager: Optional lock manager guarding module artifacts

    Returns:
        Builder returned by the platform's setup
    """
    return get_builder_class(os_name).setup(config, lock_manager=lock_manager)


__all__ = [
    "Builder",
    "Win32Builder",
    "LinuxBuilder",
    "BUILDERS",
    "get_builder_class",
    "create_builder",
]
