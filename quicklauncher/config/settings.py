"""
Configuration settings for the application.
"""

import os
import sys
import tempfile
from typing import Optional

from dotenv import load_dotenv

from quicklauncher.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_LINUX_TERMINALS = "gnome-terminal,konsole,xterm,x-terminal-emulator"
DEFAULT_TERMINAL_GRACE_SECONDS = "1.5"


def default_data_dir(platform: Optional[str] = None) -> str:
    """Per-user directory holding items.json for the given platform."""
    platform = platform or sys.platform
    home = os.path.expanduser("~")
    if platform.startswith("win"):
        base = os.getenv("APPDATA") or os.path.join(home, "AppData", "Roaming")
        return os.path.join(base, "QuickLauncher")
    if platform == "darwin":
        return os.path.join(home, "Library", "Application Support", "QuickLauncher")
    base = os.getenv("XDG_CONFIG_HOME") or os.path.join(home, ".config")
    return os.path.join(base, "quicklauncher")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.workspace_root: str = self._get_env("QL_WORKSPACE_ROOT", tempfile.gettempdir())
        self.workspace_dirname: str = self._get_env(
            "QL_WORKSPACE_DIRNAME", "launcher-app-temp"
        )
        self.data_dir: str = os.path.expanduser(
            self._get_env("QL_DATA_DIR", default_data_dir())
        )
        self.linux_terminals: list[str] = self._get_list_env(
            "QL_LINUX_TERMINALS", DEFAULT_LINUX_TERMINALS
        )
        self.log_level: str = self._get_env("QL_LOG_LEVEL", "INFO").upper()
        self.terminal_grace_seconds: float = self._get_float_env(
            "QL_TERMINAL_GRACE_SECONDS", DEFAULT_TERMINAL_GRACE_SECONDS
        )

        if not self.workspace_dirname or os.sep in self.workspace_dirname:
            raise ConfigurationError(
                f"QL_WORKSPACE_DIRNAME must be a single directory name, got {self.workspace_dirname!r}"
            )
        if not self.linux_terminals:
            raise ConfigurationError("QL_LINUX_TERMINALS must name at least one terminal")

    @property
    def items_file(self) -> str:
        """Absolute path of the JSON file storing the item list."""
        return os.path.join(self.data_dir, "items.json")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_float_env(self, key: str, default: str) -> float:
        """Get a non-negative number of seconds from an environment variable."""
        raw = self._get_env(key, default)
        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be a number of seconds, got {raw!r}")
        if value < 0:
            raise ConfigurationError(f"{key} must not be negative, got {raw!r}")
        return value

    def _get_list_env(self, key: str, default: str) -> list[str]:
        """Get a comma-separated environment variable as a list of names."""
        raw = self._get_env(key, default)
        return [part.strip() for part in raw.split(",") if part.strip()]


# Global settings instance
settings = Settings()
