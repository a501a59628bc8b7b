"""
Settings package for bbr_settings.

This package provides type-safe access to the tool's own configuration
using Qt's QSettings for cross-platform storage. It does not hold game
settings; those live in the platform store (see bbr_settings.registry).

Usage:
    from bbr_settings.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ValidationResult
from .store import StoreSettings
from .export import ExportSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ValidationResult",
    "StoreSettings",
    "ExportSettings",
]
