"""
FileManager - sandboxed file operations over MCP
Main entry point
"""

import sys

from config.settings import settings, ensure_storage_root
from mcp_servers.file_manager_mcp import mcp
from utils.logger import setup_logger

def main():
    """Create the storage directory and start the MCP server."""
    logger = setup_logger(
        log_level=settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
        audit_log_file=settings.AUDIT_LOG_FILE,
    )

    root = ensure_storage_root(settings.storage_root)
    logger.info(f"Serving files from: {root}")

    if settings.MCP_TRANSPORT == "stdio":
        logger.info("Starting FileManager on stdio")
    else:
        logger.info(f"Starting FileManager ({settings.MCP_TRANSPORT}) on {settings.HOST}:{settings.PORT}")

    try:
        mcp.run(transport=settings.MCP_TRANSPORT)
    except KeyboardInterrupt:
        logger.info("Shutdown requested by user")
        sys.exit(0)

if __name__ == "__main__":
    main()
