"""NoOpFileStorage - wired when FILE_STORAGE_PROVIDER=none."""

from messaging.domain.exceptions import StorageUnavailableError
from messaging.domain.ports.file_storage import FileInfo, FileStorage, StoredFile
from messaging.domain.value_objects.user_id import UserId


class NoOpFileStorage(FileStorage):
    def store(self, content: bytes, filename: str, user_id: UserId) -> StoredFile:
        raise StorageUnavailableError("file storage is disabled")

    def delete_file(self, url: str) -> bool:
        raise StorageUnavailableError("file storage is disabled")

    def get_file_info(self, url: str) -> FileInfo:
        raise StorageUnavailableError("file storage is disabled")
