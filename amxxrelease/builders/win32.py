"""
Windows (32-bit) release builder.

Modules are built with devenv from their .vcproj files and the release
archive is made with a zip-style archiver.
"""

import logging

from amxxrelease.builders.base import Builder
from amxxrelease.config.parser import BuildConfig, Module
from amxxrelease.core.process import ToolInvocation, ToolResult, run_tool

logger = logging.getLogger(__name__)


class Win32Builder(Builder):
    """Release builder for Windows."""

    name = "windows"
    path_separator = "\\"

    @classmethod
    def resolve_compiler_path(cls, config: BuildConfig) -> str:
        return cls.normalize_path(config.source_tree + "\\plugins\\amxxpc.exe")

    def library_extension(self) -> str:
        return ".dll"

    def module_artifact_path(self, module: Module) -> str:
        """
        Compute ``<module dir>\\<build>\\<projname>.dll``.

        When the module has no bindir an empty segment takes its place, so
        the path carries a doubled separator. Release scripts have always
        produced paths this way and Windows resolves them to the same file.
        """
        segments = [self._config.source_tree, module.sourcedir]
        segments.append(module.bindir if module.bindir is not None else "")
        segments.append(module.build)
        segments.append(module.projname + self.library_extension())
        return self.normalize_path(self.join(*segments))

    def build_invocation(self, module: Module) -> ToolInvocation:
        return ToolInvocation(
            executable=self.normalize_path(self._config.devenv_path),
            arguments=f"/build {module.build} {module.vcproj}.vcproj",
            working_dir=self.module_dir(module),
        )

    def compress_dir(self, archive_name: str, directory_name: str) -> ToolResult:
        invocation = ToolInvocation(
            executable=self.normalize_path(self._config.compress_path or "zip"),
            arguments=f"-r {archive_name} {directory_name}",
            working_dir=self.normalize_path(self._config.output_path),
        )
        logger.info(f"Compressing {directory_name} into {archive_name}")
        return run_tool(invocation)
