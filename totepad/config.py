"""Persistent user settings.

Settings are stored as JSON in an OS-appropriate config directory and survive
application restarts. Command-line flags override them for a single run.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import TotepadConstants

logger = logging.getLogger(__name__)


DEFAULT_SETTINGS: Dict[str, Any] = {
    "notes_dir": TotepadConstants.NOTES_FOLDER,
    "show_splash": True,
}


class SettingsPersistence:
    """Manages the settings file in the user's config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize settings persistence.

        Args:
            config_dir: Override for the config directory (used by tests).
        """
        self._config_dir = Path(config_dir or platformdirs.user_config_dir("totepad"))
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[Dict[str, Any]] = None

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _ensure_config_dir(self) -> None:
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def _load_raw(self) -> Dict[str, Any]:
        """Load stored settings from disk.

        Returns:
            The stored dict, or an empty dict if the file is missing or unreadable.
        """
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def load_settings(self) -> Dict[str, Any]:
        """Return the defaults overlaid with every valid stored setting."""
        settings = dict(DEFAULT_SETTINGS)
        for key, value in self._load_raw().items():
            if self.validate_setting(key, value):
                settings[key] = value
            else:
                logger.warning(f"Ignoring invalid setting {key}={value!r}")
        return settings

    def save_settings(self, settings: Dict[str, Any]) -> bool:
        """Save settings to disk atomically.

        Returns:
            True if save was successful, False otherwise.
        """
        self._ensure_config_dir()
        temp_file = self._settings_file.with_suffix(TotepadConstants.ATOMIC_SAVE_SUFFIX)
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
            self._settings_cache = dict(settings)
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

    def validate_setting(self, key: str, value: Any) -> bool:
        """Check a setting value's type; unknown keys are accepted."""
        if key == "notes_dir":
            return isinstance(value, str) and bool(value.strip())
        if key == "show_splash":
            return isinstance(value, bool)
        # Forward compatibility
        return True

    def clear_cache(self) -> None:
        self._settings_cache = None


_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
