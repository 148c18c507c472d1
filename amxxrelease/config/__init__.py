"""Configuration for AMXXRelease."""

from .parser import BuildConfig, Module, parse_config, ConfigError

__all__ = ["BuildConfig", "Module", "parse_config", "ConfigError"]
