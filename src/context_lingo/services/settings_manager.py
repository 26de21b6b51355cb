"""Settings Manager - Handles API key, model, and storage configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from a .env file in the project root (or the process
    environment). Values are looked up on every call.
    """

    DEFAULT_MODEL = "gemini-2.5-flash"
    DEFAULT_TARGET_LANGUAGE = "Chinese"
    DEFAULT_BACKEND = "json"
    SUPPORTED_BACKENDS = ("json", "sqlite")

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, uses the current working directory.
        """
        if project_root is None:
            project_root = Path.cwd()

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        return self._get_stripped("GEMINI_API_KEY")

    def get_model_name(self) -> str:
        return self._get_stripped("GEMINI_MODEL") or self.DEFAULT_MODEL

    def get_target_language(self) -> str:
        return self._get_stripped("TARGET_LANGUAGE") or self.DEFAULT_TARGET_LANGUAGE

    def get_data_dir(self) -> Path:
        """Directory holding persisted vocabulary."""
        configured = self._get_stripped("CONTEXT_LINGO_DATA_DIR")
        if configured:
            return Path(configured).expanduser()
        return Path.home() / ".context_lingo"

    def get_vocabulary_backend(self) -> str:
        """Storage backend name: 'json' or 'sqlite'.

        Raises:
            ValueError: if VOCABULARY_BACKEND names an unknown backend.
        """
        backend = (self._get_stripped("VOCABULARY_BACKEND") or self.DEFAULT_BACKEND).lower()
        if backend not in self.SUPPORTED_BACKENDS:
            raise ValueError(
                f"Unsupported VOCABULARY_BACKEND '{backend}'. Use one of: {', '.join(self.SUPPORTED_BACKENDS)}"
            )
        return backend

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get_stripped(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
