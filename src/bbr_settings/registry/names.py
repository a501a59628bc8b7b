"""
Raw store name codec.

Raw names are underscore-delimited, with the kind tag in the second to
last token and a trailing discriminator (the game's name hash) last::

    Sensitivity_float_h2071013584   -> Sensitivity        (float)
    Crouch_key_h3162467           -> Crouch_key         (key)
    CrosshairColor_r_h123         -> CrosshairColor_r   (color, channel 0)

Axis, key and color names keep their kind suffix so they never collide with
a differently typed entry sharing the same base name.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import MalformedRawNameError
from .models import (
    COLOR_CHANNELS,
    SCREENMANAGER_PREFIX,
    Axis,
    Color,
    Key,
    RawEntry,
    SettingKind,
    SettingValue,
)
from .values import decode_binary

logger = logging.getLogger(__name__)

# Kind tags that map one to one onto a SettingKind
_PLAIN_KINDS = {
    "int": SettingKind.INT,
    "float": SettingKind.FLOAT,
    "bool": SettingKind.BOOL,
}

# Kinds whose logical name keeps the kind tag as a suffix
_SUFFIXED_KINDS = {
    "axis": SettingKind.AXIS,
    "key": SettingKind.KEY,
}


@dataclass(frozen=True)
class ParsedName:
    """Logical name and kind derived from a raw store name."""

    logical_name: str
    kind: SettingKind
    channel: int = 0


def parse_raw_name(raw_name: str) -> ParsedName:
    """Derive the logical name and kind of a raw store name.

    Raises:
        MalformedRawNameError: If the name has fewer than two tokens
    """
    tokens = raw_name.split("_")
    if not raw_name or len(tokens) < 2:
        raise MalformedRawNameError(f"Cannot split raw name: {raw_name!r}")

    typ = tokens[-2]
    # Entries such as "Screenmanager Resolution Width_h182942802" only have
    # two tokens; their logical name is the whole raw name.
    name = "_".join(tokens[:-2]) or raw_name

    if typ.startswith(SCREENMANAGER_PREFIX):
        return ParsedName(name, SettingKind.INT)

    if typ in _PLAIN_KINDS:
        return ParsedName(name, _PLAIN_KINDS[typ])

    if typ in _SUFFIXED_KINDS:
        return ParsedName(f"{name}_{typ}", _SUFFIXED_KINDS[typ])

    if len(typ) == 1 and typ in COLOR_CHANNELS:
        return ParsedName(f"{name}_{typ}", SettingKind.COLOR, COLOR_CHANNELS.index(typ))

    # No kind tag recognized: keep the full raw name
    return ParsedName(raw_name, SettingKind.STR)


def decode_entry(entry: RawEntry) -> Tuple[str, SettingValue]:
    """Decode a raw store entry into (logical name, value).

    Payload problems never raise (see values.decode_binary); only a name
    that cannot be split does.
    """
    parsed = parse_raw_name(entry.name)
    value = decode_binary(parsed.kind, entry.data, parsed.channel)
    return parsed.logical_name, value


def resolve_raw_name(
    logical_name: str, value: SettingValue, original_names: Iterable[str]
) -> str:
    """Find the raw store name a logical name should be written to.

    The candidate is the logical name itself for color, key and axis values
    (their suffix is already part of it) and ``<name>_<kind>`` otherwise.
    The first original name containing the candidate wins; with no match
    the candidate is used as is, creating a new store entry.

    Args:
        logical_name: Name as it appears in the settings file
        value: Value about to be written
        original_names: Raw names observed when the store was read, in order

    Returns:
        Raw store name to write to
    """
    originals = list(original_names)
    if logical_name in originals:
        return logical_name

    if isinstance(value, (Color, Key, Axis)):
        candidate = logical_name
    else:
        candidate = f"{logical_name}_{value.kind.value}"

    # First match in enumeration order; ambiguous substrings are not resolved
    for original in originals:
        if candidate in original:
            return original

    logger.debug(f"No existing store entry for {logical_name!r}, using {candidate!r}")
    return candidate
