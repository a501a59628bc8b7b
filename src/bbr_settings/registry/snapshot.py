"""
In-memory image of the game's settings store.
"""

import logging
from typing import Dict, Iterable, List

from .errors import MalformedRawNameError, StoreWriteError
from .models import RawEntry, SettingValue, store_type_tag
from .names import decode_entry, resolve_raw_name
from .store import PlatformStore
from .values import encode_binary


class StoreSnapshot:
    """Decoded store contents plus the entries staged for write-back.

    Holds three collections:
    - original_names: every raw name seen at load time, in store order
    - registry: logical name -> decoded value (read-only after loading)
    - updated_registry: resolved raw name -> value staged by an import

    Entries are only ever added or overwritten, never removed.
    """

    def __init__(self, entries: Iterable[RawEntry] = ()):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.original_names: List[str] = []
        self.registry: Dict[str, SettingValue] = {}
        self.updated_registry: Dict[str, SettingValue] = {}

        for entry in entries:
            if not entry.name:
                continue
            self.original_names.append(entry.name)
            try:
                name, value = decode_entry(entry)
            except MalformedRawNameError as e:
                self.logger.warning(f"Failed to parse registry value: {e}")
                continue
            self.registry[name] = value

        self.logger.debug(
            f"Snapshot loaded: {len(self.registry)} settings "
            f"from {len(self.original_names)} raw entries"
        )

    @classmethod
    def from_store(cls, store: PlatformStore) -> "StoreSnapshot":
        """Build a snapshot from a full store enumeration."""
        return cls(store.enumerate())

    def resolve_name(self, logical_name: str, value: SettingValue) -> str:
        """Return the raw store name a logical name will be written to."""
        return resolve_raw_name(logical_name, value, self.original_names)

    def update(self, logical_name: str, value: SettingValue) -> str:
        """Stage a value for write-back.

        Returns:
            The resolved raw store name the value was staged under
        """
        raw_name = self.resolve_name(logical_name, value)
        self.updated_registry[raw_name] = value
        return raw_name

    def save(self, store: PlatformStore) -> int:
        """Write every staged entry to the store, one write per entry.

        Not transactional: if a write fails, earlier writes stay applied.

        Returns:
            Number of entries written

        Raises:
            StoreWriteError: If the store rejects a write
        """
        written = 0
        for raw_name, value in self.updated_registry.items():
            try:
                store.write(raw_name, encode_binary(value), store_type_tag(value))
            except StoreWriteError:
                self.logger.error(
                    f"Store write failed after {written} of "
                    f"{len(self.updated_registry)} entries"
                )
                raise
            written += 1
        self.logger.debug(f"Wrote {written} entries to the store")
        return written
