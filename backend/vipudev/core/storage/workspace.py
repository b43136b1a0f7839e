"""Scratch directories for code runs."""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


class UnsafePathError(ValueError):
    """A submitted file path resolves outside the scratch directory."""


class ScratchWorkspace:
    """A uniquely named temporary directory that is removed after use.

    Usable as a context manager; cleanup never raises.
    """

    def __init__(self, prefix: str = "vipudev-", base_path: Optional[str] = None):
        """
        Create the scratch directory.

        Args:
            prefix: Directory name prefix
            base_path: Parent directory; the system temp dir when None
        """
        if base_path:
            Path(base_path).mkdir(parents=True, exist_ok=True)
        self.path = Path(tempfile.mkdtemp(prefix=prefix, dir=base_path))

    def resolve(self, relative_path: str) -> Path:
        """
        Map a submitted path to a location inside the workspace.

        Leading slashes and backslashes are stripped; anything that still
        escapes the workspace (e.g. ``../``) is rejected.
        """
        cleaned = relative_path.lstrip("/\\")
        target = (self.path / cleaned).resolve()
        root = self.path.resolve()
        if target == root or not target.is_relative_to(root):
            raise UnsafePathError(f"File path escapes the workspace: {relative_path!r}")
        return target

    def write_file(self, relative_path: str, content: str) -> Path:
        target = self.resolve(relative_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    def write_files(self, files: Iterable[tuple[str, str]], default_name: str) -> list[Path]:
        """Write (path, content) pairs; an empty path becomes `default_name`."""
        written = []
        for path, content in files:
            name = path.lstrip("/\\") or default_name
            written.append(self.write_file(name, content))
        return written

    def cleanup(self) -> None:
        """Remove the workspace recursively, best effort."""
        try:
            shutil.rmtree(self.path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Failed to remove scratch directory %s: %s", self.path, e)

    def __enter__(self) -> "ScratchWorkspace":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()
