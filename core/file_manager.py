import os
import threading
from typing import List, Optional

from core import file_catalog, file_operations, search_engine
from core.models import (
    DeleteResult,
    DirectoryResult,
    EntryMetadata,
    FileEntry,
    ReadResult,
    SearchCriteria,
    WriteResult,
)


class FileManager:
    """
    All file operations bound to a single storage root.

    The root is normalized once here and never changes afterwards.
    """

    def __init__(self, storage_root: str):
        self.storage_root = os.path.normpath(os.path.abspath(storage_root))

    def list_files(self, directory: Optional[str] = None) -> List[EntryMetadata]:
        return file_catalog.list_directory(self.storage_root, directory)

    def read_file(self, file_path: str) -> ReadResult:
        return file_operations.read_file(self.storage_root, file_path)

    def write_file(self, file_path: str, content: str) -> WriteResult:
        return file_operations.write_file(self.storage_root, file_path, content)

    def create_directory(self, directory_path: str) -> DirectoryResult:
        return file_operations.create_directory(self.storage_root, directory_path)

    def delete_item(self, item_path: str, recursive: bool = True) -> DeleteResult:
        return file_operations.delete_item(self.storage_root, item_path, recursive)

    def search_files(
        self,
        criteria: SearchCriteria,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[FileEntry]:
        return search_engine.search(self.storage_root, criteria, cancel_event)
