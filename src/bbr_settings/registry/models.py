"""
Data models for BattleBit settings.

Contains the closed set of typed setting values, the raw store entry type
and the constants shared by the codecs. Models are plain frozen dataclasses:
no store or file-system logic lives here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union, TypeAlias

# Store type tags (values match the Win32 REG_* constants)
REG_BINARY = 3
REG_DWORD = 4

# Channel letters in index order: R=0, G=1, B=2, A=3
COLOR_CHANNELS = "rgba"

# Raw names carrying this prefix in their kind position are always integers
SCREENMANAGER_PREFIX = "Screenmanager"


class SettingKind(str, Enum):
    """Kind tags used in the settings text file."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    AXIS = "axis"
    COLOR = "color"
    KEY = "key"
    STR = "str"


@dataclass(frozen=True)
class Int:
    """Signed 32-bit integer setting."""

    value: int
    kind: ClassVar[SettingKind] = SettingKind.INT


@dataclass(frozen=True)
class Float:
    """Double precision float setting."""

    value: float
    kind: ClassVar[SettingKind] = SettingKind.FLOAT


@dataclass(frozen=True)
class Bool:
    value: bool
    kind: ClassVar[SettingKind] = SettingKind.BOOL


@dataclass(frozen=True)
class Axis:
    """Controller axis binding.

    Structurally an integer, but kept apart from Int so it always
    round-trips as ``axis``.
    """

    value: int
    kind: ClassVar[SettingKind] = SettingKind.AXIS


@dataclass(frozen=True)
class Color:
    """One channel of a four channel color.

    A full color is stored as four entries sharing a base name, each with
    its own channel suffix (``_r``, ``_g``, ``_b``, ``_a``).
    """

    channel: int
    value: float
    kind: ClassVar[SettingKind] = SettingKind.COLOR

    @property
    def channel_letter(self) -> str:
        """Get the suffix letter for this channel."""
        return COLOR_CHANNELS[self.channel]


@dataclass(frozen=True)
class Key:
    """Keybinding stored as a single Unicode code point."""

    codepoint: int
    kind: ClassVar[SettingKind] = SettingKind.KEY


@dataclass(frozen=True)
class Str:
    """Raw UTF-8 text, the fallback for unrecognized kind tags."""

    value: str
    kind: ClassVar[SettingKind] = SettingKind.STR


SettingValue: TypeAlias = Union[Int, Float, Bool, Axis, Color, Key, Str]
"""Any typed setting value."""


@dataclass(frozen=True)
class RawEntry:
    """A (name, bytes, type tag) triple as read from the platform store."""

    name: str
    data: bytes
    type_tag: int = REG_BINARY


def store_type_tag(value: SettingValue) -> int:
    """Return the store type tag used when writing ``value``.

    The tag is picked from the value kind only, never from the tag the
    store previously held for the same name.
    """
    return REG_BINARY if isinstance(value, Str) else REG_DWORD
