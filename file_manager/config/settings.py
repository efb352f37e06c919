"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from file_manager.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: int = self._get_log_level("FILE_MANAGER_LOG_LEVEL", "WARNING")
        self.chunk_size: int = self._get_int_env(
            "FILE_MANAGER_CHUNK_SIZE", 64 * 1024, minimum=1
        )
        self.brotli_quality: int = self._get_int_env(
            "FILE_MANAGER_BROTLI_QUALITY", 11, minimum=0, maximum=11
        )
        self.start_dir: str = self._get_start_dir("FILE_MANAGER_START_DIR")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(
        self,
        key: str,
        default: int,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> int:
        """Get an integer environment variable, raise error if out of range."""
        raw = self._get_env(key, str(default)).strip()
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
        if minimum is not None and value < minimum:
            raise ConfigurationError(f"{key} must be >= {minimum}, got {value}")
        if maximum is not None and value > maximum:
            raise ConfigurationError(f"{key} must be <= {maximum}, got {value}")
        return value

    def _get_log_level(self, key: str, default: str) -> int:
        """Translate a level name such as 'INFO' into a logging constant."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"{key} is not a valid logging level: {name}")
        return level

    def _get_start_dir(self, key: str) -> str:
        """Directory the session starts in; the user's home unless overridden."""
        value = os.getenv(key)
        if not value:
            return os.path.expanduser("~")
        path = os.path.abspath(os.path.expanduser(value))
        if not os.path.isdir(path):
            raise ConfigurationError(f"{key} is not a directory: {path}")
        return path
