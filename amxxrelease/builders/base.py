"""
Release builder interface for AMXXRelease.

A builder turns plugin sources and native module projects into release
artifacts by running external tools (the amxxpc plugin compiler, the
platform build driver and an archiver). The tools report nothing useful on
their own, so a module build is judged only by whether its artifact exists
once the build driver exits.

Builders are obtained with :meth:`Builder.setup`, which resolves the plugin
compiler path once. The returned builder is never reconfigured afterwards.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from amxxrelease.config.parser import BuildConfig, Module
from amxxrelease.core.locking import LockManager
from amxxrelease.core.process import ToolInvocation, ToolResult, run_tool

logger = logging.getLogger(__name__)


class Builder(ABC):
    """
    Abstract base class for platform release builders.

    Subclasses describe one target platform: its path separator, plugin
    compiler location, library extension, and how the build driver and
    archiver are invoked.
    """

    # Platform identifier
    name: str = "base"

    # Separator used in every path handed to an external tool
    path_separator: str = "/"

    # Suffix appended to plugin inputs before compiling
    plugin_suffix: str = ".sma"

    def __init__(
        self,
        config: BuildConfig,
        compiler_path: str,
        lock_manager: Optional[LockManager] = None,
    ):
        """
        Initialize builder.

        Prefer :meth:`setup`, which resolves ``compiler_path`` from the
        configuration.

        Args:
            config: Release configuration
            compiler_path: Resolved path to the plugin compiler
            lock_manager: Optional lock manager guarding module artifacts
        """
        self._config = config
        self._compiler_path = compiler_path
        self._lock_manager = lock_manager

    @classmethod
    def setup(
        cls, config: BuildConfig, lock_manager: Optional[LockManager] = None
    ) -> "Builder":
        """
        Create a ready builder for a release run.

        Resolves the plugin compiler path from the source tree once; the
        compiler is expected to stay in place for the life of the builder.

        Args:
            config: Release configuration
            lock_manager: Optional lock manager guarding module artifacts

        Returns:
            Builder ready to compile, build and compress
        """
        compiler_path = cls.resolve_compiler_path(config)
        logger.debug(f"{cls.name} builder using plugin compiler: {compiler_path}")
        return cls(config, compiler_path, lock_manager=lock_manager)

    @property
    def config(self) -> BuildConfig:
        return self._config

    @property
    def compiler_path(self) -> str:
        """Plugin compiler resolved during setup."""
        return self._compiler_path

    @classmethod
    def normalize_path(cls, path: str) -> str:
        """Replace both separator styles with the platform separator."""
        return path.replace("/", cls.path_separator).replace("\\", cls.path_separator)

    @classmethod
    def join(cls, *segments: str) -> str:
        """Join path segments with the platform separator, keeping empty ones."""
        return cls.path_separator.join(segments)

    @classmethod
    @abstractmethod
    def resolve_compiler_path(cls, config: BuildConfig) -> str:
        """
        Locate the plugin compiler for this platform.

        Args:
            config: Release configuration

        Returns:
            Normalized path to the compiler executable
        """
        pass

    @abstractmethod
    def library_extension(self) -> str:
        """
        Get the file name suffix of native modules on this platform.

        Returns:
            Suffix such as '.dll'
        """
        pass

    @abstractmethod
    def module_artifact_path(self, module: Module) -> str:
        """
        Compute where the build driver leaves a module's library.

        Args:
            module: Module to build

        Returns:
            Normalized artifact path
        """
        pass

    @abstractmethod
    def build_invocation(self, module: Module) -> ToolInvocation:
        """
        Describe the build driver launch for a module.

        Args:
            module: Module to build

        Returns:
            ToolInvocation for the build driver
        """
        pass

    @abstractmethod
    def compress_dir(self, archive_name: str, directory_name: str) -> ToolResult:
        """
        Archive a directory below the output path.

        The archiver's exit status is not checked; inspect the returned
        result to detect failures.

        Args:
            archive_name: Archive file to create
            directory_name: Directory to add recursively

        Returns:
            ToolResult of the archiver run
        """
        pass

    def plugins_dir(self) -> str:
        """Directory the plugin compiler runs in."""
        return self.normalize_path(self.join(self._config.source_tree, "plugins"))

    def module_dir(self, module: Module) -> str:
        """
        Compute the directory a module is built in.

        The directory is ``<source tree>/<sourcedir>``, followed by
        ``<bindir>`` only when the module has one.
        """
        segments = [self._config.source_tree, module.sourcedir]
        if module.bindir is not None:
            segments.append(module.bindir)
        return self.normalize_path(self.join(*segments))

    def compile_plugin(
        self, input_path: str, extra_args: Optional[str] = None
    ) -> ToolResult:
        """
        Compile a plugin with amxxpc.

        The compiler's exit status is not checked; callers that need to know
        whether the plugin compiled should look for the compiled output or
        inspect the returned result.

        Args:
            input_path: Plugin path without the .sma suffix, relative to
                the plugins directory
            extra_args: Extra compiler arguments, appended verbatim

        Returns:
            ToolResult of the compiler run
        """
        arguments = input_path + self.plugin_suffix
        if extra_args is not None:
            arguments += " " + extra_args

        invocation = ToolInvocation(
            executable=self._compiler_path,
            arguments=arguments,
            working_dir=self.plugins_dir(),
        )
        logger.info(f"Compiling plugin {input_path}")
        return run_tool(invocation)

    def build_module(self, module: Module) -> Optional[Path]:
        """
        Build a native module.

        Args:
            module: Module to build

        Returns:
            Path to the built library, or None if the build produced nothing
        """
        result = self.build_module_result(module)
        if not result.artifact_exists:
            return None
        return Path(result.artifact)

    def build_module_result(self, module: Module) -> ToolResult:
        """
        Build a native module and report the full outcome.

        Any library left by an earlier build is deleted first, so only a
        library written by this run counts. Success is decided by the
        library existing after the build driver exits; its exit status is
        recorded but not consulted.

        Args:
            module: Module to build

        Returns:
            ToolResult carrying the artifact check
        """
        artifact = self.module_artifact_path(module)

        if self._lock_manager is None:
            return self._build_artifact(module, artifact)

        with self._lock_manager.artifact_lock(artifact):
            return self._build_artifact(module, artifact)

    def _build_artifact(self, module: Module, artifact: str) -> ToolResult:
        artifact_file = Path(artifact)
        if artifact_file.is_file():
            logger.debug(f"Removing stale artifact: {artifact}")
            artifact_file.unlink()

        logger.info(f"Building module {module.projname} ({module.build})")
        result = run_tool(self.build_invocation(module))

        exists = artifact_file.is_file()
        if not exists:
            logger.warning(
                f"Module {module.projname} produced no output at {artifact} "
                f"(exit {result.return_code})"
            )
        return result.with_artifact(artifact, exists)
