"""
Settings validation system for bbr_settings.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        # Validate registry key
        if not self.settings.registry_subkey.strip():
            errors.append("Registry subkey is empty")

        # Validate backup directory
        backup_dir = self.settings.backup_dir
        if self.settings.backup_enabled and backup_dir.exists() and not backup_dir.is_dir():
            warnings.append(f"Backup path is not a directory: {backup_dir}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
