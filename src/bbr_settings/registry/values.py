"""
Binary and text encodings for setting values.

Binary payloads are little-endian. Decoding store bytes is fail-soft: a
payload with the wrong length decodes to a zero/empty default so that one
malformed entry never stops the rest of the store from loading. Decoding
user-edited text is fail-fast and raises a TextCodecError subclass.
"""

import logging
import re
import struct
from typing import Any, Dict, Callable

from .errors import InvalidKeyEncodingError, TypeMismatchError, UnknownTextKindError
from .models import (
    COLOR_CHANNELS,
    Axis,
    Bool,
    Color,
    Float,
    Int,
    Key,
    SettingKind,
    SettingValue,
    Str,
)

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
MAX_CODEPOINT = 0x10FFFF

_INT32 = struct.Struct("<i")
_FLOAT64 = struct.Struct("<d")

# Escape prefix for key bindings that cannot be written literally
KEY_ESCAPE_PREFIX = "\\u"
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


# === BINARY ===

def _unpack_int32(data: bytes, kind: SettingKind) -> int:
    if len(data) != _INT32.size:
        logger.debug(f"Malformed {kind.value} payload ({len(data)} bytes), using 0")
        return 0
    return _INT32.unpack(data)[0]


def _unpack_float64(data: bytes, kind: SettingKind) -> float:
    if len(data) != _FLOAT64.size:
        logger.debug(f"Malformed {kind.value} payload ({len(data)} bytes), using 0.0")
        return 0.0
    return _FLOAT64.unpack(data)[0]


def _unpack_bool(data: bytes) -> bool:
    # The tool writes a single byte, the game client writes a full DWORD
    if len(data) == 1:
        return data[0] == 1
    if len(data) == _INT32.size:
        return _INT32.unpack(data)[0] == 1
    logger.debug(f"Malformed bool payload ({len(data)} bytes), using False")
    return False


def _decode_str(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Malformed str payload (invalid UTF-8), using empty string")
        return ""


def decode_binary(kind: SettingKind, data: bytes, channel: int = 0) -> SettingValue:
    """Decode a store payload into a typed value.

    Never raises for bad payloads; see the module docstring.

    Args:
        kind: Kind inferred from the raw store name
        data: Raw payload bytes
        channel: Color channel index, only used when kind is COLOR

    Returns:
        The decoded value, or the kind's default if the payload is malformed
    """
    if kind is SettingKind.INT:
        return Int(_unpack_int32(data, kind))
    if kind is SettingKind.FLOAT:
        return Float(_unpack_float64(data, kind))
    if kind is SettingKind.BOOL:
        return Bool(_unpack_bool(data))
    if kind is SettingKind.AXIS:
        return Axis(_unpack_int32(data, kind))
    if kind is SettingKind.KEY:
        return Key(_unpack_int32(data, kind))
    if kind is SettingKind.COLOR:
        return Color(channel, _unpack_float64(data, kind))
    return Str(_decode_str(data))


def encode_binary(value: SettingValue) -> bytes:
    """Encode a value into its store payload (exact inverse of decode_binary)."""
    if isinstance(value, (Int, Axis)):
        return _INT32.pack(value.value)
    if isinstance(value, Key):
        return _INT32.pack(value.codepoint)
    if isinstance(value, (Float, Color)):
        return _FLOAT64.pack(value.value)
    if isinstance(value, Bool):
        return bytes([1 if value.value else 0])
    return value.value.encode("utf-8")


# === KEY BINDINGS ===

def codepoint_to_char(codepoint: int) -> str:
    """Convert a code point to a character, rejecting invalid values.

    Raises:
        InvalidKeyEncodingError: For negative, out of range or surrogate
            code points
    """
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        raise InvalidKeyEncodingError(f"Code point out of range: {codepoint}")
    if 0xD800 <= codepoint <= 0xDFFF:
        raise InvalidKeyEncodingError(f"Surrogate code point: {codepoint:#x}")
    return chr(codepoint)


def key_to_text(key: Key) -> str:
    """Render a key binding as a printable ASCII character or a ``\\u<hex>`` escape."""
    char = codepoint_to_char(key.codepoint)
    if char.isascii() and char.isprintable():
        return char
    return f"{KEY_ESCAPE_PREFIX}{key.codepoint:x}"


def key_from_text(text: str) -> Key:
    """Parse a key binding written by key_to_text (or by hand).

    A literal string uses its first character.

    Raises:
        InvalidKeyEncodingError: If the text is empty or the escape is invalid
    """
    if not text:
        raise InvalidKeyEncodingError("Empty key binding")

    if text.startswith(KEY_ESCAPE_PREFIX) and len(text) > len(KEY_ESCAPE_PREFIX):
        digits = text[len(KEY_ESCAPE_PREFIX):]
        if not _HEX_DIGITS.fullmatch(digits):
            raise InvalidKeyEncodingError(f"Invalid key escape: {text!r}")
        codepoint = int(digits, 16)
        codepoint_to_char(codepoint)
        return Key(codepoint)

    return Key(ord(text[0]))


# === TEXT ===

def encode_text(value: SettingValue) -> Any:
    """Convert a value into the scalar stored in the settings file.

    Raises:
        InvalidKeyEncodingError: If a key binding has an invalid code point
    """
    if isinstance(value, (Int, Axis)):
        return int(value.value)
    if isinstance(value, (Float, Color)):
        return float(value.value)
    if isinstance(value, Bool):
        return bool(value.value)
    if isinstance(value, Key):
        return key_to_text(value)
    return str(value.value)


def _expect_int(text_value: Any, kind: SettingKind) -> int:
    if isinstance(text_value, bool) or not isinstance(text_value, int):
        raise TypeMismatchError(f"Invalid {kind.value} value: {text_value!r}")
    if not INT32_MIN <= text_value <= INT32_MAX:
        raise TypeMismatchError(f"{kind.value} value out of range: {text_value}")
    return text_value


def _expect_float(text_value: Any, kind: SettingKind) -> float:
    if isinstance(text_value, bool) or not isinstance(text_value, (int, float)):
        raise TypeMismatchError(f"Invalid {kind.value} value: {text_value!r}")
    return float(text_value)


def _expect_bool(text_value: Any, kind: SettingKind) -> bool:
    if not isinstance(text_value, bool):
        raise TypeMismatchError(f"Invalid {kind.value} value: {text_value!r}")
    return text_value


def _expect_str(text_value: Any, kind: SettingKind) -> str:
    if not isinstance(text_value, str):
        raise TypeMismatchError(f"Invalid {kind.value} value: {text_value!r}")
    return text_value


def color_channel(logical_name: str) -> int:
    """Derive the color channel index from the last character of a name.

    Raises:
        TypeMismatchError: If the name does not end in r, g, b or a
    """
    last = logical_name[-1:]
    if not last or last not in COLOR_CHANNELS:
        raise TypeMismatchError(f"Invalid color name: {logical_name!r}")
    return COLOR_CHANNELS.index(last)


def _decode_color(text_value: Any, logical_name: str) -> SettingValue:
    channel = color_channel(logical_name)
    return Color(channel, _expect_float(text_value, SettingKind.COLOR))


_TEXT_DECODERS: Dict[SettingKind, Callable[[Any, str], SettingValue]] = {
    SettingKind.INT: lambda v, _: Int(_expect_int(v, SettingKind.INT)),
    SettingKind.FLOAT: lambda v, _: Float(_expect_float(v, SettingKind.FLOAT)),
    SettingKind.BOOL: lambda v, _: Bool(_expect_bool(v, SettingKind.BOOL)),
    SettingKind.AXIS: lambda v, _: Axis(_expect_int(v, SettingKind.AXIS)),
    SettingKind.COLOR: _decode_color,
    SettingKind.KEY: lambda v, _: key_from_text(_expect_str(v, SettingKind.KEY)),
    SettingKind.STR: lambda v, _: Str(_expect_str(v, SettingKind.STR)),
}


def decode_text(kind_tag: str, text_value: Any, logical_name: str) -> SettingValue:
    """Rebuild a typed value from a settings file record.

    Args:
        kind_tag: The record's ``typ`` field
        text_value: The record's ``value`` field
        logical_name: The record's name (used to derive color channels)

    Raises:
        UnknownTextKindError: If kind_tag is not one of the seven kinds
        TypeMismatchError: If text_value has the wrong shape for the kind
        InvalidKeyEncodingError: If a key binding cannot be parsed
    """
    try:
        kind = SettingKind(kind_tag)
    except ValueError as e:
        raise UnknownTextKindError(f"Invalid type: {kind_tag!r}") from e
    return _TEXT_DECODERS[kind](text_value, logical_name)
