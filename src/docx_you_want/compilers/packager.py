"""Packager that seals a finished workspace into a DOCX archive."""

import logging
import os
import tempfile
import zipfile
from pathlib import Path

from ..exceptions import DocxIOError

logger = logging.getLogger(__name__)


class Packager:
    """Write a directory tree as a single deflate-compressed zip archive.

    The archive mirrors the tree exactly: relative paths are kept, and every
    directory gets its own entry so empty directories survive. The archive is
    written beside the destination and moved into place only once complete,
    so a failed seal leaves any existing file at the destination untouched.
    """

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED):
        self.compression = compression

    def seal(self, root: Path, destination: Path) -> Path:
        """Archive everything under *root* into *destination*.

        Args:
            root: Directory to archive
            destination: Path of the archive to write (replaced if present)

        Returns:
            The destination path

        Raises:
            DocxIOError: If the tree cannot be read or the archive written
        """
        logger.info(f"Packaging {root} into {destination}")
        partial = None
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            fd, name = tempfile.mkstemp(
                prefix=f".{destination.name}.", suffix=".part", dir=destination.parent
            )
            os.close(fd)
            partial = Path(name)

            with zipfile.ZipFile(partial, "w", compression=self.compression) as archive:
                for path in self._walk(root):
                    # directories get a trailing-slash entry from ZipFile.write
                    arcname = path.relative_to(root).as_posix()
                    archive.write(path, arcname)
                    logger.debug(f"Added {arcname}")

            os.replace(partial, destination)
        except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
            if partial is not None:
                self._discard(partial)
            raise DocxIOError(f"Failed to write archive {destination}: {e}") from e

        return destination

    def _discard(self, partial: Path) -> None:
        try:
            partial.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to remove partial archive {partial}: {e}")

    def _walk(self, root: Path) -> list[Path]:
        """List every file and directory below *root* in a stable order."""
        paths = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            current = Path(dirpath)
            if current != root:
                paths.append(current)
            paths.extend(current / name for name in sorted(filenames))
        return paths
