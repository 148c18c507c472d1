"""
AMXXRelease - release build driver for AMX Mod X.

This package provides tools to:
- Compile scripted plugins with the amxxpc compiler
- Build native modules with the platform build driver (devenv, make)
- Package release directories with an external archiver
"""

__version__ = "0.1.0"

from amxxrelease.builders import Builder, create_builder, get_builder_class
from amxxrelease.config.parser import BuildConfig, Module, parse_config
from amxxrelease.core.exceptions import ReleaseError

__all__ = [
    "__version__",
    "Builder",
    "create_builder",
    "get_builder_class",
    "BuildConfig",
    "Module",
    "parse_config",
    "ReleaseError",
]
