import asyncio
import threading
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from config.settings import ensure_storage_root, settings
from core.errors import AccessDeniedError, FileManagerError
from core.file_manager import FileManager
from core.formatting import format_listing, format_search_results
from core.models import SearchCriteria
from utils.logger import audit_log, log

mcp = FastMCP("FileManager", host=settings.HOST, port=settings.PORT)

# Bound to the configured root; app.main() creates the directory on startup.
manager = FileManager(settings.storage_root)


def log_file_access(operation: str, file_path: Optional[str], allowed: bool, reason: str = ""):
    """Log all file access attempts for auditing."""
    audit_log.info(
        f"FILE_AUDIT | {operation} | {file_path or '.'} | "
        f"allowed={allowed} | {reason}"
    )


def _handle_failure(operation: str, file_path: Optional[str], error: Exception, action: str) -> str:
    """Turn an exception into the text returned to the client."""
    if isinstance(error, FileManagerError):
        log_file_access(operation, file_path, False, str(error))
        if isinstance(error, AccessDeniedError):
            log.warning(f"Access violation in {operation}: {file_path}")
        return str(error)

    log_file_access(operation, file_path, False, f"Unexpected: {error}")
    log.error(f"Unexpected error in {operation} for {file_path}: {error}")
    return f"An error occurred while {action}: {error}"


@mcp.tool()
def list_files(
    directory: Annotated[Optional[str], Field(description="The directory path to list files from, relative to storage directory")] = None,
) -> str:
    """List files and directories in a specified directory."""
    try:
        entries = manager.list_files(directory)
        log_file_access("list_files", directory, True, f"Found {len(entries)} items")
        return format_listing(entries)
    except Exception as e:
        return _handle_failure("list_files", directory, e, "listing files")


@mcp.tool()
def read_file(
    filePath: Annotated[str, Field(description="The path of the file to read, relative to storage directory")],
) -> str:
    """Read the contents of a text file."""
    try:
        result = manager.read_file(filePath)
        log_file_access("read_file", filePath, True)
        return f"File: {result.path}\nType: {result.media_type}\n\nContent:\n{result.content}"
    except Exception as e:
        return _handle_failure("read_file", filePath, e, "reading the file")


@mcp.tool()
def write_file(
    filePath: Annotated[str, Field(description="The path of the file to write, relative to storage directory")],
    content: Annotated[str, Field(description="The content to write to the file")],
) -> str:
    """Create or update a text file."""
    try:
        result = manager.write_file(filePath, content)
        status = "created" if result.created else "updated"
        log_file_access("write_file", filePath, True, f"{status}, {result.bytes_written} bytes")
        return f"File {status} successfully: {result.path}"
    except Exception as e:
        return _handle_failure("write_file", filePath, e, "writing the file")


@mcp.tool()
def create_directory(
    directoryPath: Annotated[str, Field(description="The path of the directory to create, relative to storage directory")],
) -> str:
    """Create a new directory."""
    try:
        result = manager.create_directory(directoryPath)
        if not result.created:
            log_file_access("create_directory", directoryPath, True, "already exists")
            return "Directory already exists."
        log_file_access("create_directory", directoryPath, True)
        return f"Directory created successfully: {result.path}"
    except Exception as e:
        return _handle_failure("create_directory", directoryPath, e, "creating the directory")


@mcp.tool()
def delete_item(
    itemPath: Annotated[str, Field(description="The path of the file or directory to delete, relative to storage directory")],
    recursive: Annotated[bool, Field(description="Whether to recursively delete directories")] = True,
) -> str:
    """Delete a file or directory."""
    try:
        result = manager.delete_item(itemPath, recursive)
        kind = "Directory" if result.is_directory else "File"
        log_file_access("delete_item", itemPath, True, f"{kind.lower()} deleted")
        return f"{kind} deleted successfully: {result.path}"
    except Exception as e:
        return _handle_failure("delete_item", itemPath, e, "deleting the item")


@mcp.tool()
async def search_files(
    directory: Annotated[Optional[str], Field(description="The directory to search in, relative to storage directory")] = None,
    filename: Annotated[Optional[str], Field(description="The filename or pattern to search for")] = None,
    extension: Annotated[Optional[str], Field(description="The file extension to search for")] = None,
    contentSearch: Annotated[Optional[str], Field(description="Text to search for within file contents")] = None,
    recursive: Annotated[bool, Field(description="Whether to search subdirectories recursively")] = True,
) -> str:
    """Search for files in the storage directory."""
    try:
        criteria = SearchCriteria(
            directory=directory,
            filename=filename,
            extension=extension,
            content=contentSearch,
            recursive=recursive,
        )
        # Walk runs in a worker thread. Cancelling the request sets the
        # event, which stops the walk at the next directory entry.
        cancel_event = threading.Event()
        try:
            matches = await asyncio.to_thread(manager.search_files, criteria, cancel_event)
        except asyncio.CancelledError:
            cancel_event.set()
            log_file_access("search_files", directory, True, "cancelled by client")
            raise
        log_file_access("search_files", directory, True, f"Found {len(matches)} files")
        return format_search_results(matches)
    except Exception as e:
        return _handle_failure("search_files", directory, e, "searching files")


if __name__ == "__main__":
    ensure_storage_root(settings.storage_root)
    mcp.run(transport=settings.MCP_TRANSPORT)
