import os
import stat
import threading
from typing import Iterator, List, Optional

from core.errors import SearchCancelledError
from core.file_catalog import file_entry, resolve_directory
from core.models import FileEntry, SearchCriteria
from core.type_classifier import is_textual
from utils.logger import log


def matches_filename(name: str, criteria: SearchCriteria) -> bool:
    if not criteria.filename:
        return True
    return criteria.filename.lower() in name.lower()


def matches_extension(name: str, criteria: SearchCriteria) -> bool:
    if not criteria.extension:
        return True
    _, ext = os.path.splitext(name)
    return ext[1:].lower() == criteria.extension.lower()


def matches_content(path: str, criteria: SearchCriteria) -> bool:
    """
    Case-insensitive substring test on a file's text.

    Binary files never match. Text is decoded the same way ``read_file``
    decodes it, so stray invalid bytes are replaced rather than failing.
    A file that cannot be read is a non-match so one bad file does not
    abort the search.
    """
    if not criteria.content:
        return True
    if not is_textual(path):
        return False
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            text = f.read()
    except OSError as e:
        log.debug(f"Skipping unreadable file during content search: {path}: {e}")
        return False
    return criteria.content.lower() in text.lower()


def iter_matches(
    root: str,
    criteria: SearchCriteria,
    cancel_event: Optional[threading.Event] = None,
) -> Iterator[FileEntry]:
    """
    Walk the search directory depth-first and yield matching files.

    Children are visited in directory enumeration order; a subdirectory's
    matches are yielded at the point where that subdirectory is enumerated.
    Directories are never yielded.

    Raises:
        AccessDeniedError: Search directory escapes the root.
        NotFoundError: Search directory does not exist.
        WrongTypeError: Search directory is a file.
        SearchCancelledError: ``cancel_event`` was set mid-walk.
    """
    start = resolve_directory(root, criteria.directory, "Search directory not found.")

    # Stack of (directory, iterator over its child names)
    stack = [(start, iter(os.listdir(start)))]
    while stack:
        if cancel_event is not None and cancel_event.is_set():
            raise SearchCancelledError("Search cancelled.")

        current, children = stack[-1]
        name = next(children, None)
        if name is None:
            stack.pop()
            continue

        path = os.path.join(current, name)
        try:
            stats = os.stat(path)
        except OSError as e:
            # Entry vanished or is a dangling link
            log.debug(f"Skipping {path}: {e}")
            continue

        if stat.S_ISDIR(stats.st_mode):
            if criteria.recursive:
                try:
                    stack.append((path, iter(os.listdir(path))))
                except OSError as e:
                    log.debug(f"Skipping unreadable directory {path}: {e}")
            continue

        if not matches_filename(name, criteria):
            continue
        if not matches_extension(name, criteria):
            continue
        if not matches_content(path, criteria):
            continue

        yield file_entry(root, path, stats)


def search(
    root: str,
    criteria: SearchCriteria,
    cancel_event: Optional[threading.Event] = None,
) -> List[FileEntry]:
    """Collect every match of :func:`iter_matches` into a list."""
    return list(iter_matches(root, criteria, cancel_event))
