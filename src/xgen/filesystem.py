"""File-system collaborator used by the generators.

FileWriter creates directories and writes files, turning any OSError into
FileSystemError so generators only deal with xgen errors.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import FileSystemError

logger = logging.getLogger(__name__)


class FileWriter:
    """Creates directories and writes files on the local file system."""

    def create_directory(self, path: Path) -> None:
        """Create ``path`` and any missing ancestors. No-op if it already exists."""
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Failed to create directory '%s': %s", path, exc)
            raise FileSystemError(path, "Unable to create directory") from exc

    def write_file(self, path: Path, content: bytes) -> None:
        """Write ``content`` to ``path``, replacing any existing file."""
        try:
            path.write_bytes(content)
        except OSError as exc:
            logger.error("Failed to write file '%s': %s", path, exc)
            raise FileSystemError(path, "Unable to write file") from exc
        logger.debug("Wrote %d bytes to %s", len(content), path)
