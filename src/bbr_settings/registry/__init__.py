"""
Typed access to the game's settings store.

Decodes raw (name, bytes) store entries into typed setting values, resolves
logical names back to raw store names, and keeps the in-memory snapshot an
import stages its updates into.
"""

from .errors import (
    SettingsSyncError,
    StoreUnavailableError,
    StoreWriteError,
    MalformedRawNameError,
    TextCodecError,
    UnknownTextKindError,
    TypeMismatchError,
    InvalidKeyEncodingError,
    TextParseError,
    FileIOError,
    BackupError,
)
from .models import (
    SettingKind,
    SettingValue,
    Int,
    Float,
    Bool,
    Axis,
    Color,
    Key,
    Str,
    RawEntry,
    REG_BINARY,
    REG_DWORD,
)
from .values import decode_binary, encode_binary, decode_text, encode_text
from .names import parse_raw_name, decode_entry, resolve_raw_name
from .store import PlatformStore, MemoryStore, WindowsRegistryStore, DEFAULT_REGISTRY_SUBKEY
from .snapshot import StoreSnapshot

__all__ = [
    # Errors
    "SettingsSyncError",
    "StoreUnavailableError",
    "StoreWriteError",
    "MalformedRawNameError",
    "TextCodecError",
    "UnknownTextKindError",
    "TypeMismatchError",
    "InvalidKeyEncodingError",
    "TextParseError",
    "FileIOError",
    "BackupError",
    # Values
    "SettingKind",
    "SettingValue",
    "Int",
    "Float",
    "Bool",
    "Axis",
    "Color",
    "Key",
    "Str",
    "RawEntry",
    "REG_BINARY",
    "REG_DWORD",
    # Codecs
    "decode_binary",
    "encode_binary",
    "decode_text",
    "encode_text",
    "parse_raw_name",
    "decode_entry",
    "resolve_raw_name",
    # Store
    "PlatformStore",
    "MemoryStore",
    "WindowsRegistryStore",
    "DEFAULT_REGISTRY_SUBKEY",
    "StoreSnapshot",
]
