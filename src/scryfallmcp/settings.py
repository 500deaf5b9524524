"""Persistent settings for the Scryfall MCP server.

Settings are stored in ~/.scryfallmcp/settings.json and persist between
sessions. Environment variables take precedence over the file.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Settings file location
SETTINGS_DIR = Path.home() / ".scryfallmcp"
SETTINGS_FILE = SETTINGS_DIR / "settings.json"

# Default settings
DEFAULTS = {
    "api_base": "https://api.scryfall.com",
    "user_agent": "ScryfallMCP/1.0.0",
    "rate_limit_ms": 100,  # Scryfall asks for 50-100ms between requests
    "request_timeout": 10,
    "log_level": "INFO",
    "default_search_limit": 25,
}

# Environment variable -> (setting key, type)
ENV_OVERRIDES = {
    "SCRYFALL_API_BASE": ("api_base", str),
    "SCRYFALL_USER_AGENT": ("user_agent", str),
    "SCRYFALL_RATE_LIMIT_MS": ("rate_limit_ms", int),
    "SCRYFALL_TIMEOUT": ("request_timeout", float),
    "SCRYFALL_MCP_LOG_LEVEL": ("log_level", str),
}


class Settings:
    """Persistent settings manager.

    Example:
        settings = Settings()
        timeout = settings.get("request_timeout")
        settings.set("rate_limit_ms", 150)
    """

    def __init__(self, settings_file: Optional[Path] = None) -> None:
        """Initialize settings, loading from disk and environment.

        Args:
            settings_file: Path to the JSON settings file. Defaults to
                ~/.scryfallmcp/settings.json
        """
        self._file = settings_file or SETTINGS_FILE
        self._data: dict[str, Any] = DEFAULTS.copy()
        self._load()
        self._apply_env()

    def _load(self) -> None:
        """Load settings from disk."""
        if not self._file.exists():
            return

        try:
            with open(self._file, "r", encoding="utf-8") as f:
                loaded = json.load(f)
            # Merge with defaults (new settings get defaults)
            for key, value in loaded.items():
                self._data[key] = value
            logger.debug(f"Loaded settings from {self._file}")
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to load settings: {e}")

    def _apply_env(self) -> None:
        """Apply environment variable overrides."""
        for env_name, (key, cast) in ENV_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if not raw:
                continue
            try:
                self._data[key] = cast(raw)
                logger.debug(f"Setting {key} overridden by {env_name}")
            except ValueError:
                logger.warning(f"Ignoring invalid {env_name}={raw!r}")

    def save(self) -> None:
        """Save settings to disk."""
        try:
            self._file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._file, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2)
            logger.debug(f"Saved settings to {self._file}")
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting key
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        return self._data.get(key, default if default is not None else DEFAULTS.get(key))

    def set(self, key: str, value: Any, save: bool = True) -> None:
        """Set a setting value.

        Args:
            key: Setting key
            value: Value to set
            save: If True (default), immediately save to disk
        """
        self._data[key] = value
        if save:
            self.save()

    def reset(self) -> None:
        """Reset all settings to defaults."""
        self._data = DEFAULTS.copy()
        self.save()


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
