"""
Artifact locking for AMXXRelease.

A module build deletes its artifact, runs the build driver and then checks
for the artifact again. Two builds writing the same artifact at once would
race on that sequence, so builders can hold a file lock keyed by the
artifact path for the whole delete-build-check step.

Usage:
    from amxxrelease.core.locking import LockManager

    lock_manager = LockManager(Path("/tmp/amxx-locks"))
    with lock_manager.artifact_lock("dlls/fun/Release/fun_amxx.dll"):
        ...
"""

import hashlib
import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Union

from filelock import FileLock, Timeout as LockTimeout

logger = logging.getLogger(__name__)


class LockManager:
    """
    Manages per-artifact file locks.

    Uses the `filelock` library so locks work across threads and processes
    and are released if the holder dies.

    Attributes:
        lock_dir: Directory where lock files are stored
    """

    def __init__(self, lock_dir: Union[str, Path]):
        """
        Initialize lock manager.

        Args:
            lock_dir: Directory for lock files (created if missing)
        """
        self.lock_dir = Path(lock_dir)
        self.lock_dir.mkdir(parents=True, exist_ok=True)

    def lock_path_for(self, artifact_path: str) -> Path:
        """
        Get the lock file used for an artifact.

        The readable part of the name is the artifact file name; a short
        digest of the full path keeps artifacts with the same name apart.
        """
        safe_name = re.split(r"[\\/:]", artifact_path)[-1] or "artifact"
        digest = hashlib.sha256(artifact_path.encode("utf-8")).hexdigest()[:16]
        return self.lock_dir / f"artifact-{safe_name}-{digest}.lock"

    @contextmanager
    def artifact_lock(self, artifact_path: str, timeout: float = 600):
        """
        Acquire the lock for one build artifact.

        Args:
            artifact_path: Artifact path exactly as the builder computes it
            timeout: Maximum wait time in seconds (default: 600, builds are slow)

        Yields:
            None

        Raises:
            LockTimeout: If lock can't be acquired within timeout
        """
        lock_path = self.lock_path_for(artifact_path)
        lock = FileLock(lock_path, timeout=timeout)

        try:
            lock.acquire()
        except LockTimeout as e:
            logger.error(
                f"Could not acquire artifact lock for {artifact_path} after {timeout}s."
            )
            raise LockTimeout(
                f"Could not acquire artifact lock for {artifact_path} after {timeout}s. "
                "Another build may be producing this artifact."
            ) from e

        logger.debug(f"Acquired artifact lock: {lock_path}")
        try:
            yield
        finally:
            lock.release()
            logger.debug(f"Released artifact lock: {lock_path}")
