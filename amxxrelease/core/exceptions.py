"""
Centralized exception hierarchy for AMXXRelease.

Builders do not wrap errors raised while launching external tools; those
propagate to the caller unchanged. The exceptions below cover problems
detected by AMXXRelease itself.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class ReleaseError(Exception):
    """Base exception for all AMXXRelease errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(ReleaseError):
    """Configuration parsing or validation error."""

    pass


# ============================================================================
# Builder Exceptions
# ============================================================================


class BuilderError(ReleaseError):
    """Base exception for builder errors."""

    pass


class UnsupportedPlatformError(BuilderError):
    """Raised when no builder exists for the requested platform."""

    def __init__(self, os_name: str):
        self.os_name = os_name
        super().__init__(f"No release builder for platform: {os_name}")
