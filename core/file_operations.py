import errno
import os
import shutil

from core.errors import (
    AccessDeniedError,
    DirectoryNotEmptyError,
    NotFoundError,
    UnsupportedContentError,
    WrongTypeError,
)
from core.models import DeleteResult, DirectoryResult, ReadResult, WriteResult
from core.path_resolver import resolve_path
from core.type_classifier import is_textual_type, media_type


def read_file(root: str, file_path: str) -> ReadResult:
    """
    Read a text file under the storage root.

    Raises:
        NotFoundError: File does not exist.
        WrongTypeError: Path is a directory.
        UnsupportedContentError: Extension does not classify as text.
    """
    target = resolve_path(root, file_path)
    if not os.path.exists(target):
        raise NotFoundError("File not found.")
    if os.path.isdir(target):
        raise WrongTypeError("Cannot read a directory as a file.")

    mime = media_type(target)
    if not is_textual_type(mime):
        raise UnsupportedContentError(f"Cannot read binary file of type: {mime}")

    # newline="" keeps line endings exactly as stored
    with open(target, "r", encoding="utf-8", errors="replace", newline="") as f:
        content = f.read()

    return ReadResult(path=file_path, media_type=mime, content=content)


def write_file(root: str, file_path: str, content: str) -> WriteResult:
    """
    Create or overwrite a text file, creating missing parent directories.

    Not atomic: a concurrent writer can interleave between the existence
    check and the write.
    """
    target = resolve_path(root, file_path)
    if os.path.isdir(target):
        raise WrongTypeError("Cannot write to a directory.")

    parent = os.path.dirname(target)
    if not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)

    is_new_file = not os.path.exists(target)
    data = content.encode("utf-8")
    with open(target, "wb") as f:
        f.write(data)

    return WriteResult(path=file_path, created=is_new_file, bytes_written=len(data))


def create_directory(root: str, directory_path: str) -> DirectoryResult:
    """Create a directory and its ancestors. An existing path is left untouched."""
    target = resolve_path(root, directory_path)
    if os.path.exists(target):
        return DirectoryResult(path=directory_path, created=False)

    os.makedirs(target, exist_ok=True)
    return DirectoryResult(path=directory_path, created=True)


def delete_item(root: str, item_path: str, recursive: bool = True) -> DeleteResult:
    """
    Delete a file, or a directory.

    A non-empty directory is only removed when ``recursive`` is true;
    otherwise DirectoryNotEmptyError is raised and nothing is deleted.
    Files are deleted regardless of ``recursive``.
    """
    target = resolve_path(root, item_path)
    if target == os.path.normpath(root):
        raise AccessDeniedError("Access denied: The storage directory itself cannot be deleted.")
    if not os.path.lexists(target):
        raise NotFoundError("File or directory not found.")

    if os.path.isdir(target) and not os.path.islink(target):
        if recursive:
            shutil.rmtree(target)
        else:
            try:
                os.rmdir(target)
            except OSError as e:
                if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
                    raise DirectoryNotEmptyError(
                        f"Directory is not empty: {item_path}. Use recursive=true to delete it."
                    ) from e
                raise
        return DeleteResult(path=item_path, is_directory=True)

    os.unlink(target)
    return DeleteResult(path=item_path, is_directory=False)
