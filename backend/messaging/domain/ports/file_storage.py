"""
File Storage Port - Byte persistence for attachment uploads.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from messaging.domain.value_objects.enums import AttachmentType
from messaging.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class StoredFile:
    url: str
    filename: str
    size: int  # bytes actually written
    type: AttachmentType


@dataclass(frozen=True)
class FileInfo:
    url: str
    exists: bool
    filename: Optional[str] = None
    size: Optional[int] = None
    type: Optional[AttachmentType] = None


class FileStorage(ABC):
    @abstractmethod
    def store(self, content: bytes, filename: str, user_id: UserId) -> StoredFile:
        """
        Persist content and return its reference.

        Raises:
            FileTooLargeError: content exceeds the configured maximum size
            StorageUnavailableError: the bytes could not be written
        """
        ...

    @abstractmethod
    def delete_file(self, url: str) -> bool: ...

    @abstractmethod
    def get_file_info(self, url: str) -> FileInfo: ...
