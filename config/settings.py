import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()

PROJECT_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Centralized configuration for the FileManager server.
    Values come from the environment or a local .env file.
    """

    # Storage
    STORAGE_DIR: str = str(PROJECT_DIR / "storage")

    # Transport
    MCP_TRANSPORT: str = Field(default="stdio", pattern="^(stdio|sse|streamable-http)$")
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8000, ge=1, le=65535)

    # Application Settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    AUDIT_LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore'
    )

    @field_validator("STORAGE_DIR")
    @classmethod
    def normalize_storage_dir(cls, value: str) -> str:
        # The containment check compares normalized strings, so the root
        # has to be absolute and normalized once, here.
        return os.path.normpath(os.path.abspath(os.path.expanduser(value)))

    @property
    def storage_root(self) -> str:
        return self.STORAGE_DIR


def ensure_storage_root(root: str) -> Path:
    """Create the storage directory (and its ancestors) if it is missing."""
    path = Path(root)
    path.mkdir(parents=True, exist_ok=True)
    return path


# Singleton instance
settings = Settings()
