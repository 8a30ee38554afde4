"""Settings Manager - Handles API key, data file and logging configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from a .env file in the project root, falling back to the
    process environment.
    """

    DEFAULT_MODEL = "gemini-2.0-flash"
    DEFAULT_LOG_LEVEL = "INFO"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        return self._get_stripped("GEMINI_API_KEY")

    def get_gemini_model(self) -> str:
        return self._get_stripped("GEMINI_MODEL") or self.DEFAULT_MODEL

    def get_reviews_file(self) -> Optional[Path]:
        """Override for the reviews data file, None means the bundled file."""
        value = self._get_stripped("CAFE_REVIEWS_FILE")
        return Path(value).expanduser() if value else None

    def get_log_level(self) -> str:
        return (self._get_stripped("CAFE_REVIEWS_LOG_LEVEL") or self.DEFAULT_LOG_LEVEL).upper()

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get_stripped(key: str) -> Optional[str]:
        value = os.getenv(key)
        return value.strip() if value and value.strip() else None
