"""YAML configuration parser for AMXXRelease.

This module parses release configuration files (tool paths and the source
tree location) and defines the module record the builders consume.

Example ``release.yaml``::

    source_tree: C:/amxmodx/trunk
    output_path: C:/amxmodx/release
    compress_path: C:/tools/zip.exe
    devenv_path: C:/VS/Common7/IDE/devenv.com
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from amxxrelease.core.exceptions import ConfigError


@dataclass(frozen=True)
class BuildConfig:
    """Tool paths and directories for one release run."""

    source_tree: str
    output_path: str
    compress_path: Optional[str] = None  # Archiver (default: platform archiver)
    devenv_path: str = "devenv"  # Windows build driver
    make_path: str = "make"  # Linux build driver
    make_opts: str = ""  # Extra arguments passed to make verbatim


@dataclass(frozen=True)
class Module:
    """A native module built by the platform build driver."""

    sourcedir: str  # Relative to the source tree
    projname: str  # Base name of the produced library
    vcproj: str  # Base name of the .vcproj file
    build: str = "Release"  # Build configuration name
    bindir: Optional[str] = None  # Optional directory below sourcedir

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Module":
        """
        Create a module record from a mapping.

        Args:
            data: Mapping with sourcedir, projname, vcproj and optionally
                build and bindir

        Returns:
            Module instance

        Raises:
            ConfigError: If the record is not a mapping or a field is
                missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ConfigError("Module must be a mapping")

        for field_name in ("sourcedir", "projname", "vcproj"):
            if not data.get(field_name):
                raise ConfigError(f"Module missing required field: {field_name}")

        build = data.get("build", "Release")
        if not isinstance(build, str) or not build:
            raise ConfigError("Module build must be a non-empty string")

        bindir = data.get("bindir")
        if bindir is not None and (not isinstance(bindir, str) or not bindir):
            raise ConfigError("Module bindir must be a non-empty string")

        return cls(
            sourcedir=str(data["sourcedir"]),
            projname=str(data["projname"]),
            vcproj=str(data["vcproj"]),
            build=build,
            bindir=bindir,
        )


def parse_config(config_path: Path) -> BuildConfig:
    """
    Parse a release configuration file.

    Args:
        config_path: Path to the YAML configuration

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    return _parse_and_validate(data)


def _parse_and_validate(data: dict) -> BuildConfig:
    """Parse and validate configuration data."""
    for field_name in ("source_tree", "output_path"):
        if field_name not in data:
            raise ConfigError(f"Missing required field: {field_name}")

    values = {}
    for field_name in (
        "source_tree",
        "output_path",
        "compress_path",
        "devenv_path",
        "make_path",
    ):
        if field_name in data:
            values[field_name] = _parse_path(field_name, data[field_name])

    make_opts = data.get("make_opts", "")
    if make_opts is None:
        make_opts = ""
    if not isinstance(make_opts, str):
        raise ConfigError("make_opts must be a string")
    values["make_opts"] = make_opts

    return BuildConfig(**values)


def _parse_path(field_name: str, value: Any) -> str:
    """Validate a path field and expand ``~``."""
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{field_name} must be a non-empty string")

    if value.startswith("~"):
        return str(Path(value).expanduser())
    return value
