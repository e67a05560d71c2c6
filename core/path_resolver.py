import os
from typing import Optional

from core.errors import AccessDeniedError


def is_within_root(root: str, path: str) -> bool:
    """
    String prefix containment test on normalized paths.

    The match must end on a separator so that a sibling such as
    ``/data/storage2`` is not accepted for the root ``/data/storage``.
    Symlinks are not resolved.
    """
    root = os.path.normpath(root)
    path = os.path.normpath(path)
    if path == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)


def resolve_path(root: str, relative_path: Optional[str] = None) -> str:
    """
    Resolve a client supplied path against the storage root.

    Args:
        root: Absolute storage root.
        relative_path: Path relative to the root. ``None`` or ``""`` means the root itself.

    Raises:
        AccessDeniedError: If the normalized result falls outside the root.
    """
    root = os.path.normpath(root)
    if not relative_path:
        return root

    resolved = os.path.normpath(os.path.join(root, relative_path))
    if not is_within_root(root, resolved):
        raise AccessDeniedError()
    return resolved


def relative_to_root(root: str, path: str) -> str:
    return os.path.relpath(path, os.path.normpath(root))
