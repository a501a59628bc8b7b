"""
Core settings management for bbr_settings.
"""

import logging
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .migration import SettingsMigrator
from .validation import SettingsValidator
from .store import StoreSettings
from .logging import LoggingSettings
from .export import ExportSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Tool configuration stored with QSettings.

    Provides type-safe access to the tool's own preferences (store location,
    backups, logging, export defaults) with cross-platform storage.
    """

    def __init__(self, profile: str = "default", settings: Optional[QSettings] = None):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
            settings: Existing QSettings to use instead of the per-user one
        """
        self.settings = settings if settings is not None else QSettings("bbr-settings", "bbr_settings")
        self.profile = profile

        # Use profile as a group to create hierarchy: bbr-settings/bbr_settings/default/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._migrator = SettingsMigrator(self.settings)
        self._validator = SettingsValidator(self)
        self._store = StoreSettings(self.settings)
        self._logging = LoggingSettings(self.settings)
        self._export = ExportSettings(self.settings)

        # Ensure version and migrate if needed
        self._migrator.ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def store(self) -> StoreSettings:
        """Access store settings subsystem."""
        return self._store

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    @property
    def export(self) -> ExportSettings:
        """Access export settings subsystem."""
        return self._export

    # === VERSION AND FIRST RUN ===

    @property
    def is_first_run(self) -> bool:
        """Check if this is the first run of the tool."""
        value = self.settings.value("app/first_run", True)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    def set_first_run_complete(self) -> None:
        """Mark first run as complete."""
        self.settings.setValue("app/first_run", False)
        self.settings.sync()

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === STORE SETTINGS (DELEGATED) ===

    @property
    def registry_subkey(self) -> str:
        """Get the registry key holding game settings."""
        return self._store.registry_subkey

    @registry_subkey.setter
    def registry_subkey(self, value: str) -> None:
        """Set the registry key holding game settings."""
        self._store.registry_subkey = value

    @property
    def backup_enabled(self) -> bool:
        """Check if the store is backed up before an import."""
        return self._store.backup_enabled

    @backup_enabled.setter
    def backup_enabled(self, value: bool) -> None:
        """Enable or disable backups before an import."""
        self._store.backup_enabled = value

    @property
    def backup_dir(self) -> Path:
        """Get the directory backups are written to."""
        return self._store.backup_dir

    @backup_dir.setter
    def backup_dir(self, value: Path) -> None:
        """Set the directory backups are written to."""
        self._store.backup_dir = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only)."""
        return self._logging.log_file_path

    # === EXPORT SETTINGS (DELEGATED) ===

    @property
    def default_filters(self) -> List[str]:
        """Get filter tokens used when an export names none."""
        return self._export.default_filters

    @default_filters.setter
    def default_filters(self, value: List[str]) -> None:
        """Set filter tokens used when an export names none."""
        self._export.default_filters = value

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
