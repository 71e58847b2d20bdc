"""
LocalFileStorage - Attachment bytes on the local file system.

Layout: {base_path}/{user_id}/{uuid}_{yyyymmdd_hhmmss}{ext}
URL:    /uploads/{user_id}/{stored_name}

This is a SYNC service - no database, no async.
The size reported back is the number of bytes actually written, and the
attachment kind comes from the MIME type guessed from the original filename.
"""

import logging
import mimetypes
import os
import re
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

from messaging.config.settings import Config
from messaging.domain.exceptions import FileTooLargeError, StorageUnavailableError
from messaging.domain.ports.file_storage import FileInfo, FileStorage, StoredFile
from messaging.domain.value_objects.enums import AttachmentType
from messaging.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)

URL_PREFIX = "/uploads/"


def classify_attachment(filename: str) -> AttachmentType:
    """image/*, video/* and audio/* map to their kind, everything else is a file."""
    mime_type, _ = mimetypes.guess_type(filename)
    if mime_type:
        for kind in (AttachmentType.IMAGE, AttachmentType.VIDEO, AttachmentType.AUDIO):
            if mime_type.startswith(f"{kind.value}/"):
                return kind
    return AttachmentType.FILE


class LocalFileStorage(FileStorage):
    def __init__(
        self,
        base_path: Optional[str] = None,
        max_size: Optional[int] = None,
    ):
        """
        Args:
            base_path: Root directory for uploads (default: Config.FILE_STORAGE_LOCAL_PATH)
            max_size: Largest accepted upload in bytes (default: Config.FILE_STORAGE_MAX_SIZE)
        """
        self.base_path = Path(base_path or Config.FILE_STORAGE_LOCAL_PATH).resolve()
        self.max_size = max_size if max_size is not None else Config.FILE_STORAGE_MAX_SIZE

    def store(self, content: bytes, filename: str, user_id: UserId) -> StoredFile:
        if len(content) > self.max_size:
            raise FileTooLargeError(self.max_size)

        owner_dir = self._sanitize(user_id.value)
        ext = re.sub(r"[^\w\.]", "", os.path.splitext(filename)[1].lower())
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        stored_name = f"{uuid.uuid4()}_{timestamp}{ext}"

        directory = self.base_path / owner_dir
        file_path = directory / stored_name
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with open(file_path, "wb") as f:
                written = f.write(content)
        except OSError as e:
            logger.error(f"[FileStorage] Failed to write {file_path}: {e}")
            raise StorageUnavailableError("File storage unavailable") from e

        logger.debug(f"[FileStorage] Saved file: {file_path} ({written} bytes)")
        return StoredFile(
            url=f"{URL_PREFIX}{owner_dir}/{stored_name}",
            filename=filename,
            size=written,
            type=classify_attachment(filename),
        )

    def delete_file(self, url: str) -> bool:
        """
        Delete file from disk.

        Returns:
            True if deleted, False if file didn't exist
        """
        file_path = self._resolve(url)
        if file_path is None or not file_path.is_file():
            logger.warning(f"[FileStorage] File not found for deletion: {url}")
            return False

        try:
            file_path.unlink()
        except OSError as e:
            logger.error(f"[FileStorage] Failed to delete file {file_path}: {e}")
            raise StorageUnavailableError("File storage unavailable") from e
        logger.debug(f"[FileStorage] Deleted file: {file_path}")
        return True

    def get_file_info(self, url: str) -> FileInfo:
        file_path = self._resolve(url)
        if file_path is None or not file_path.is_file():
            return FileInfo(url=url, exists=False)

        return FileInfo(
            url=url,
            exists=True,
            filename=file_path.name,
            size=file_path.stat().st_size,
            type=classify_attachment(file_path.name),
        )

    def _resolve(self, url: str) -> Optional[Path]:
        """Map a /uploads/ URL back to a path, refusing anything outside base_path."""
        if not url.startswith(URL_PREFIX):
            return None
        file_path = (self.base_path / url[len(URL_PREFIX) :]).resolve()
        if self.base_path not in file_path.parents:
            return None
        return file_path

    @staticmethod
    def _sanitize(name: str) -> str:
        # Unsafe characters and runs of dots become underscores
        safe = re.sub(r"[^\w\-\.]", "_", name)
        safe = re.sub(r"\.{2,}", "_", safe).strip(".")
        return safe or "unnamed"
