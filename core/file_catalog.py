import os
import stat
from typing import List, Optional

from core.errors import NotFoundError, WrongTypeError
from core.formatting import timestamp_from_epoch
from core.models import EntryMetadata, FileEntry
from core.path_resolver import relative_to_root, resolve_path


def _created_time(stats: os.stat_result) -> float:
    # st_birthtime is only reported on some platforms (macOS, BSD, Windows).
    return getattr(stats, "st_birthtime", stats.st_ctime)


def file_entry(root: str, path: str, stats: os.stat_result) -> FileEntry:
    return FileEntry(
        name=os.path.basename(path),
        path=relative_to_root(root, path),
        size=stats.st_size,
        created=timestamp_from_epoch(_created_time(stats)),
        modified=timestamp_from_epoch(stats.st_mtime),
    )


def entry_metadata(root: str, path: str, stats: os.stat_result, is_directory: bool) -> EntryMetadata:
    return EntryMetadata(
        **file_entry(root, path, stats).model_dump(),
        is_directory=is_directory,
    )


def resolve_directory(root: str, directory: Optional[str], missing_message: str) -> str:
    """Resolve ``directory`` and make sure it exists and is a directory."""
    target = resolve_path(root, directory)
    if not os.path.exists(target):
        raise NotFoundError(missing_message)
    if not os.path.isdir(target):
        raise WrongTypeError("The specified path is not a directory.")
    return target


def list_directory(root: str, directory: Optional[str] = None) -> List[EntryMetadata]:
    """
    List the immediate children of a directory under the storage root.

    Entries are returned in directory enumeration order, unsorted.

    Raises:
        AccessDeniedError: Path escapes the root.
        NotFoundError: Directory does not exist.
        WrongTypeError: Path is not a directory.
    """
    target = resolve_directory(root, directory, "Directory not found.")

    entries = []
    for name in os.listdir(target):
        child = os.path.join(target, name)
        stats = os.stat(child)
        entries.append(entry_metadata(root, child, stats, stat.S_ISDIR(stats.st_mode)))
    return entries
