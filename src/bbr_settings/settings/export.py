"""
Export-related settings for bbr_settings.
"""

from typing import TYPE_CHECKING, List, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings


class ExportSettings:
    """Manages defaults applied to exports."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    @property
    def default_filters(self) -> List[str]:
        """Get filter tokens used when an export names none."""
        value = self.settings.value("export/default_filters", [])
        if isinstance(value, str):
            # INI storage flattens single-item lists to a plain string
            return [value] if value else []
        if isinstance(value, list):
            return [str(item) for item in cast(list[object], value) if item]
        return []

    @default_filters.setter
    def default_filters(self, value: List[str]) -> None:
        """Set filter tokens used when an export names none."""
        self.settings.setValue("export/default_filters", list(value))
        self.settings.sync()
