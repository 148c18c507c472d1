"""
Linux release builder.

Modules are built with make from their source directories and the release
archive is a gzip-compressed tarball.
"""

import logging

from amxxrelease.builders.base import Builder
from amxxrelease.config.parser import BuildConfig, Module
from amxxrelease.core.process import ToolInvocation, ToolResult, run_tool

logger = logging.getLogger(__name__)


class LinuxBuilder(Builder):
    """Release builder for Linux."""

    name = "linux"
    path_separator = "/"

    @classmethod
    def resolve_compiler_path(cls, config: BuildConfig) -> str:
        return cls.normalize_path(config.source_tree + "/plugins/amxxpc")

    def library_extension(self) -> str:
        return "_i386.so"

    def module_artifact_path(self, module: Module) -> str:
        # make leaves the library next to the makefile
        return self.join(
            self.module_dir(module), module.projname + self.library_extension()
        )

    def build_invocation(self, module: Module) -> ToolInvocation:
        return ToolInvocation(
            executable=self.normalize_path(self._config.make_path),
            arguments=self._config.make_opts,
            working_dir=self.module_dir(module),
        )

    def compress_dir(self, archive_name: str, directory_name: str) -> ToolResult:
        invocation = ToolInvocation(
            executable=self.normalize_path(self._config.compress_path or "tar"),
            arguments=f"zcvf {archive_name} {directory_name}",
            working_dir=self.normalize_path(self._config.output_path),
        )
        logger.info(f"Compressing {directory_name} into {archive_name}")
        return run_tool(invocation)
