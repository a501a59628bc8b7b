"""
Export, import and backup of the game's settings.

Provides the filter engine used to select settings for export, the TOML
codec for the portable settings file, and JSON backups of the raw store.
"""

from .filters import (
    Filter,
    FilterKind,
    COMMON_FILTERS,
    parse_filters,
    split_filter_tokens,
    matches_any,
)
from .toml_codec import render_toml, parse_toml, export_file, import_file, sort_recursive
from .backup import write_backup, read_backup, restore_backup

__all__ = [
    # Filters
    "Filter",
    "FilterKind",
    "COMMON_FILTERS",
    "parse_filters",
    "split_filter_tokens",
    "matches_any",
    # TOML
    "render_toml",
    "parse_toml",
    "export_file",
    "import_file",
    "sort_recursive",
    # Backups
    "write_backup",
    "read_backup",
    "restore_backup",
]
