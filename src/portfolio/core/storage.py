"""Local blob storage for uploaded cover images.

Files live under ``settings.media_root`` and are addressed by a path relative
to it (``project_images/3f2a....jpg``), which is what gets stored on the
project row and served under ``settings.media_url``.
"""

import os
from functools import lru_cache
from pathlib import Path, PurePosixPath
from uuid import uuid4

from src.portfolio.core.config import get_settings
from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)


class LocalBlobStorage:
    """Filesystem-backed blob store rooted at a single directory."""

    def __init__(self, root: str | os.PathLike[str]):
        self.root = Path(root)

    def _resolve(self, relative_path: str) -> Path:
        """Map a stored relative path to a file under root.

        Raises:
            ValueError: If the path escapes the storage root
        """
        target = (self.root / relative_path).resolve()
        if not target.is_relative_to(self.root.resolve()):
            raise ValueError(f"Path escapes storage root: {relative_path}")
        return target

    def put(self, namespace: str, data: bytes, filename: str | None = None) -> str:
        """Store bytes under namespace with a random file name.

        The extension of ``filename`` is kept so the file is served with a
        sensible content type.

        Returns:
            Path of the stored file relative to the storage root
        """
        suffix = PurePosixPath(filename).suffix.lower() if filename else ""
        relative_path = str(PurePosixPath(namespace) / f"{uuid4().hex}{suffix}")

        target = self._resolve(relative_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)

        logger.info("Blob stored", path=relative_path, size=len(data))
        return relative_path

    def delete(self, relative_path: str) -> bool:
        """Delete a stored blob. Missing files are not an error.

        Returns:
            True if a file was removed
        """
        target = self._resolve(relative_path)
        try:
            target.unlink()
        except FileNotFoundError:
            logger.debug("Blob already absent", path=relative_path)
            return False
        logger.info("Blob deleted", path=relative_path)
        return True

    def exists(self, relative_path: str) -> bool:
        return self._resolve(relative_path).is_file()

    def read(self, relative_path: str) -> bytes:
        return self._resolve(relative_path).read_bytes()


@lru_cache
def get_storage() -> LocalBlobStorage:
    return LocalBlobStorage(get_settings().media_root)
