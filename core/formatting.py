"""
Human readable rendering of catalog and search results.
"""

from datetime import datetime, timezone
from typing import List

from core.models import EntryMetadata, FileEntry

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]


def format_file_size(size_bytes: int) -> str:
    """Format a byte count with two decimals, e.g. ``1536 -> '1.50 KB'``."""
    size = float(size_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1
    return f"{size:.2f} {SIZE_UNITS[unit_index]}"


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def timestamp_from_epoch(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def format_listing(entries: List[EntryMetadata]) -> str:
    if not entries:
        return "No files found in the directory."

    blocks = []
    for entry in entries:
        tag = "[DIR]" if entry.is_directory else "[FILE]"
        blocks.append(
            f"{tag} {entry.name}\n"
            f"  Path: {entry.path}\n"
            f"  Size: {format_file_size(entry.size)}\n"
            f"  Created: {format_timestamp(entry.created)}\n"
            f"  Modified: {format_timestamp(entry.modified)}\n"
        )
    return f"{len(entries)} items found:\n\n" + "\n".join(blocks)


def format_search_results(matches: List[FileEntry]) -> str:
    if not matches:
        return "No matching files found."

    blocks = [
        f"[FILE] {match.name}\n"
        f"  Path: {match.path}\n"
        f"  Size: {format_file_size(match.size)}\n"
        f"  Modified: {format_timestamp(match.modified)}\n"
        for match in matches
    ]
    return f"{len(matches)} files found:\n\n" + "\n".join(blocks)
