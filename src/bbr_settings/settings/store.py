"""
Store-related settings for bbr_settings.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from ..registry.store import DEFAULT_REGISTRY_SUBKEY

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

DEFAULT_BACKUP_DIR = Path.home() / ".bbr_settings" / "backups"


class StoreSettings:
    """Manages where the game's settings live and how they are backed up."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    @property
    def registry_subkey(self) -> str:
        """Get the registry key (under HKEY_CURRENT_USER) holding game settings."""
        return self._get_str("store/registry_subkey", DEFAULT_REGISTRY_SUBKEY)

    @registry_subkey.setter
    def registry_subkey(self, value: str) -> None:
        """Set the registry key holding game settings."""
        self.settings.setValue("store/registry_subkey", value)
        self.settings.sync()

    @property
    def backup_enabled(self) -> bool:
        """Check if the store is backed up before an import."""
        return self._get_bool("store/backup_enabled", True)

    @backup_enabled.setter
    def backup_enabled(self, value: bool) -> None:
        """Enable or disable backups before an import."""
        self.settings.setValue("store/backup_enabled", value)
        self.settings.sync()

    @property
    def backup_dir(self) -> Path:
        """Get the directory backups are written to."""
        path_str = self._get_str("store/backup_dir", "")
        return Path(path_str).expanduser() if path_str else DEFAULT_BACKUP_DIR

    @backup_dir.setter
    def backup_dir(self, value: Path) -> None:
        """Set the directory backups are written to."""
        self.settings.setValue("store/backup_dir", str(value) if value else "")
        self.settings.sync()
