"""
External tool invocation for AMXXRelease.

Every tool the builders drive (amxxpc, devenv, make, the archiver) is run
through :func:`run_tool`. The call blocks until the process exits; there is
no timeout and no retry. The outcome is captured in a :class:`ToolResult` so
callers can inspect the exit status even where the builder contract ignores
it.
"""

import logging
import shlex
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import List, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolInvocation:
    """
    A single external tool launch.

    Attributes:
        executable: Path to the tool
        arguments: Argument string, passed to the tool verbatim
        working_dir: Directory the tool is started in
    """

    executable: str
    arguments: str
    working_dir: str

    def command(self) -> Union[str, List[str]]:
        """
        Render the launch form for ``subprocess``.

        On Windows the tool receives a single command line, exactly as the
        argument string was written. Elsewhere the argument string is split
        into tokens with shell quoting rules.
        """
        if sys.platform == "win32":
            return f"{subprocess.list2cmdline([self.executable])} {self.arguments}"
        return [self.executable] + shlex.split(self.arguments)

    def __str__(self) -> str:
        return f"{self.executable} {self.arguments} (in {self.working_dir})"


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of a tool invocation.

    Attributes:
        invocation: The launch that produced this result
        return_code: Process exit status
        duration: Wall-clock seconds from launch to exit
        artifact: Path checked after the run, if any
        artifact_exists: Whether ``artifact`` existed after the run
    """

    invocation: ToolInvocation
    return_code: int
    duration: float
    artifact: Optional[str] = None
    artifact_exists: Optional[bool] = None

    @property
    def ok(self) -> bool:
        """True when the tool exited cleanly and any checked artifact exists."""
        if self.artifact_exists is not None and not self.artifact_exists:
            return False
        return self.return_code == 0

    def with_artifact(self, artifact: str, exists: bool) -> "ToolResult":
        """Return a copy carrying a post-run artifact check."""
        return ToolResult(
            invocation=self.invocation,
            return_code=self.return_code,
            duration=self.duration,
            artifact=artifact,
            artifact_exists=exists,
        )

    def __repr__(self) -> str:
        status = "ok" if self.ok else "failed"
        output = f" -> {self.artifact}" if self.artifact else ""
        return (
            f"ToolResult({self.invocation.executable}: {status}, "
            f"exit {self.return_code}, {self.duration:.2f}s{output})"
        )


def run_tool(invocation: ToolInvocation) -> ToolResult:
    """
    Run an external tool to completion.

    Tool output goes straight to the console. Errors raised while launching
    the process (missing executable, bad working directory) propagate
    unchanged.

    Args:
        invocation: Tool, arguments and working directory

    Returns:
        ToolResult with exit status and duration
    """
    logger.debug(f"Running: {invocation}")

    start = time.monotonic()
    completed = subprocess.run(invocation.command(), cwd=invocation.working_dir)
    duration = time.monotonic() - start

    result = ToolResult(
        invocation=invocation,
        return_code=completed.returncode,
        duration=duration,
    )
    if result.return_code != 0:
        logger.debug(
            f"{invocation.executable} exited with {result.return_code} "
            f"after {duration:.2f}s"
        )
    return result
