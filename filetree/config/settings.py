"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from filetree.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.base_dir: str = self._get_env("FILETREE_BASE_DIR", "/")
        self.sniff_bytes: int = self._get_positive_int_env("FILETREE_SNIFF_BYTES", 2048)
        self.log_level: str = self._get_env("LOG_LEVEL", "INFO").upper()
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_positive_int_env("PORT", 8000)
        self.reload: bool = self._get_bool_env("RELOAD")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool_env(self, key: str) -> bool:
        """Get a boolean flag, off unless set to 1/true/yes."""
        return os.getenv(key, "").strip().lower() in {"1", "true", "yes"}

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got {raw!r}"
            )
        if value <= 0:
            raise ConfigurationError(
                f"Environment variable {key} must be positive, got {value}"
            )
        return value


# Global settings instance
settings = Settings()
