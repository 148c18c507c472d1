"""Test fixtures for AMXXRelease tests.

- release: source tree layout, release configuration and module records
"""

__all__ = [
    "release",
]
