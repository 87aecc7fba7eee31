"""Configuration settings for Usagi."""
import codecs
from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Per-user data directory; relative paths in settings resolve against it
USAGI_HOME = Path.home() / ".usagi"

# Default log directory
DEFAULT_LOG_DIR = USAGI_HOME / "logs"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "usagi.log"


class UsagiSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = DEFAULT_LOG_FILE
    LOG_FORMAT: str = "detailed"  # simple, detailed
    LOG_RETENTION_DAYS: int = 7
    LOG_ROTATION_SIZE_MB: int = 1
    LOG_TO_CONSOLE: bool = False  # stderr would interleave with the prompts

    # Conversation
    ASSISTANT_NAME: str = "Usagi"
    COMMAND_PREFIX: str = "/"

    # Persistence
    FILE_ENCODING: str = "utf-8"

    model_config = SettingsConfigDict(
        env_prefix="USAGI_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Ensure log file path is absolute; setup_logging creates the directory
        if self.LOG_FILE:
            self.LOG_FILE = self.LOG_FILE.expanduser()
            if not self.LOG_FILE.is_absolute():
                self.LOG_FILE = USAGI_HOME / self.LOG_FILE

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ["simple", "detailed"]
        v = v.lower()
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v

    @field_validator("LOG_FILE", mode="before")
    @classmethod
    def validate_log_file(cls, v):
        # An empty value in the environment disables the file sink
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    @field_validator("COMMAND_PREFIX")
    @classmethod
    def validate_command_prefix(cls, v: str) -> str:
        if len(v) != 1 or v.isspace() or v.isalnum():
            raise ValueError("Command prefix must be a single punctuation character")
        return v

    @field_validator("FILE_ENCODING")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown file encoding: {v}")
        return v


@lru_cache()
def get_settings() -> UsagiSettings:
    """Get cached settings instance."""
    return UsagiSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache to force reload from environment."""
    get_settings.cache_clear()
