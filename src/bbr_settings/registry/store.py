"""
Platform store adapters.

The game keeps its settings as raw values under a single registry key.
Store adapters only move (name, bytes, type tag) triples; every decision
about value kinds is made by the codecs.
"""

import ctypes
import logging
import sys
from typing import Dict, List, Optional, Protocol

from .errors import StoreUnavailableError, StoreWriteError
from .models import RawEntry

DEFAULT_REGISTRY_SUBKEY = "SOFTWARE\\BattleBitDevTeam\\BattleBit"


class PlatformStore(Protocol):
    """Key-value store holding the game's raw settings."""

    def enumerate(self) -> List[RawEntry]:
        """Return every raw entry, in store order."""
        ...

    def write(self, name: str, data: bytes, type_tag: int) -> None:
        """Write a single raw entry, raising StoreWriteError on failure."""
        ...


class MemoryStore:
    """In-process store, used for tests and dry runs."""

    def __init__(self, entries: Optional[List[RawEntry]] = None):
        self._entries: Dict[str, RawEntry] = {}
        for entry in entries or []:
            self._entries[entry.name] = entry

    def enumerate(self) -> List[RawEntry]:
        return list(self._entries.values())

    def write(self, name: str, data: bytes, type_tag: int) -> None:
        self._entries[name] = RawEntry(name, bytes(data), type_tag)

    def get(self, name: str) -> Optional[RawEntry]:
        """Return the entry stored under name, if any."""
        return self._entries.get(name)

    def __len__(self) -> int:
        return len(self._entries)


# Win32 constants
_HKEY_CURRENT_USER = -0x7FFFFFFF  # (HKEY)(LONG)0x80000001, sign extended
_KEY_READ = 0x20019
_KEY_SET_VALUE = 0x0002
_ERROR_SUCCESS = 0
_ERROR_NO_MORE_ITEMS = 259
_ERROR_MORE_DATA = 234

# Registry value names are limited to 16383 characters
_MAX_VALUE_NAME = 16384


class WindowsRegistryStore:
    """Store backed by ``HKEY_CURRENT_USER\\<subkey>``.

    Uses the raw advapi32 calls rather than ``winreg``: the game writes
    8-byte doubles under REG_DWORD, and ``winreg`` converts DWORD payloads
    to 4-byte integers, losing data in both directions.
    """

    def __init__(self, subkey: str = DEFAULT_REGISTRY_SUBKEY):
        self.subkey = subkey
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        if sys.platform != "win32":
            raise StoreUnavailableError(
                f"The Windows registry is not available on {sys.platform}"
            )

        self._advapi32 = ctypes.WinDLL("advapi32")  # type: ignore[attr-defined]

        # Fail early if the game never created its key
        handle = self._open(_KEY_READ)
        self._advapi32.RegCloseKey(handle)
        self.logger.debug(f"Opened registry key HKCU\\{subkey}")

    def _open(self, access: int) -> ctypes.c_void_p:
        from ctypes import wintypes

        handle = wintypes.HKEY()
        status = self._advapi32.RegOpenKeyExW(
            wintypes.HKEY(_HKEY_CURRENT_USER),
            self.subkey,
            0,
            access,
            ctypes.byref(handle),
        )
        if status != _ERROR_SUCCESS:
            raise StoreUnavailableError(
                f"Cannot open HKCU\\{self.subkey}: {ctypes.FormatError(status)}"  # type: ignore[attr-defined]
            )
        return handle

    def enumerate(self) -> List[RawEntry]:
        """Read every value under the key, keeping the raw payload bytes."""
        from ctypes import wintypes

        entries: List[RawEntry] = []
        handle = self._open(_KEY_READ)
        try:
            index = 0
            data_size = 256
            while True:
                name_buf = ctypes.create_unicode_buffer(_MAX_VALUE_NAME)
                name_len = wintypes.DWORD(_MAX_VALUE_NAME)
                data_buf = ctypes.create_string_buffer(data_size)
                data_len = wintypes.DWORD(data_size)
                type_tag = wintypes.DWORD(0)

                status = self._advapi32.RegEnumValueW(
                    handle,
                    index,
                    name_buf,
                    ctypes.byref(name_len),
                    None,
                    ctypes.byref(type_tag),
                    data_buf,
                    ctypes.byref(data_len),
                )
                if status == _ERROR_NO_MORE_ITEMS:
                    break
                if status == _ERROR_MORE_DATA:
                    # Retry the same index with a large enough buffer
                    data_size = max(data_size * 2, data_len.value)
                    continue
                if status != _ERROR_SUCCESS:
                    raise StoreUnavailableError(
                        f"Failed to enumerate registry value {index}: "
                        f"{ctypes.FormatError(status)}"  # type: ignore[attr-defined]
                    )

                entries.append(
                    RawEntry(
                        name=name_buf.value,
                        data=data_buf.raw[: data_len.value],
                        type_tag=type_tag.value,
                    )
                )
                index += 1
        finally:
            self._advapi32.RegCloseKey(handle)

        self.logger.debug(f"Enumerated {len(entries)} registry values")
        return entries

    def write(self, name: str, data: bytes, type_tag: int) -> None:
        """Write raw bytes under name with the given REG_* type tag."""
        try:
            handle = self._open(_KEY_SET_VALUE)
        except StoreUnavailableError as e:
            raise StoreWriteError(str(e)) from e

        try:
            buf = ctypes.create_string_buffer(bytes(data), len(data))
            status = self._advapi32.RegSetValueExW(
                handle, name, 0, type_tag, buf, len(data)
            )
            if status != _ERROR_SUCCESS:
                raise StoreWriteError(
                    f"Failed to write {name!r}: {ctypes.FormatError(status)}"  # type: ignore[attr-defined]
                )
        finally:
            self._advapi32.RegCloseKey(handle)
