"""Settings Manager - Handles API key and deck directory configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DICTIONARY_DIR = "dictionaries"


class SettingsManager:
    """
    Manages settings loaded from the .env file in the project root.

    Recognised keys:
        GEMINI_API_KEY: key for the insight service.
        TANGO_DICTIONARY_DIR: directory holding deck exports.
    """

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

        self._project_root = Path(project_root)
        load_dotenv(dotenv_path=self._project_root / ".env")

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        key = os.getenv("GEMINI_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_dictionary_dir(self) -> Path:
        """Directory scanned for deck files; relative paths resolve against the project root."""
        value = (os.getenv("TANGO_DICTIONARY_DIR") or "").strip()
        path = Path(value) if value else Path(DEFAULT_DICTIONARY_DIR)
        if not path.is_absolute():
            path = self._project_root / path
        return path

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        load_dotenv(dotenv_path=self._project_root / ".env", override=True)
