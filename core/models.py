from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

class FileEntry(BaseModel):
    name: str
    path: str  # relative to the storage root
    size: int
    created: datetime
    modified: datetime

class EntryMetadata(FileEntry):
    is_directory: bool

class SearchCriteria(BaseModel):
    """
    Filters for one search call. Empty strings are treated as absent.
    """
    model_config = ConfigDict(frozen=True)

    directory: Optional[str] = None
    filename: Optional[str] = None
    extension: Optional[str] = None
    content: Optional[str] = None
    recursive: bool = True

    @field_validator("directory", "filename", "extension", "content")
    @classmethod
    def empty_as_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @field_validator("extension")
    @classmethod
    def strip_leading_dot(cls, value: Optional[str]) -> Optional[str]:
        if value and value.startswith("."):
            return value[1:] or None
        return value

class ReadResult(BaseModel):
    path: str
    media_type: str
    content: str

class WriteResult(BaseModel):
    path: str
    created: bool
    bytes_written: int

class DirectoryResult(BaseModel):
    path: str
    created: bool

class DeleteResult(BaseModel):
    path: str
    is_directory: bool
