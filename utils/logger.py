from loguru import logger
import sys
import os
from typing import Optional

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
AUDIT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS Z} | {message}"


def _is_audit_record(record) -> bool:
    return record["extra"].get("audit", False)


def setup_logger(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    audit_log_file: Optional[str] = None,
):
    """
    Configure the Loguru logger.

    Console output goes to stderr: stdout carries the MCP stdio transport.
    Records logged through ``audit_log`` reach every sink, and also the
    dedicated ``audit_log_file`` when one is configured.
    """
    logger.remove() # Remove default handler

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT)

    if log_file:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="1 week",
            level=log_level,
            format=FILE_FORMAT,
        )

    if audit_log_file:
        # Audit trail is kept regardless of LOG_LEVEL
        logger.add(
            audit_log_file,
            rotation="10 MB",
            retention="4 weeks",
            level="INFO",
            filter=_is_audit_record,
            format=AUDIT_FORMAT,
        )

    return logger


log = setup_logger(
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_file=os.getenv("LOG_FILE") or None,
    audit_log_file=os.getenv("AUDIT_LOG_FILE") or None,
)

# File access audit records
audit_log = log.bind(audit=True)
