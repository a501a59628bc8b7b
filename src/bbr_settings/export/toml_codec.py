"""
TOML import/export of a store snapshot.

The settings file is a flat table keyed by logical setting name::

    [MasterVolume]
    typ = "float"
    value = 0.8

    [Crouch_key]
    typ = "key"
    value = "c"

Exports are sorted recursively so the same settings always produce the
same bytes.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import tomli_w

from ..registry.errors import (
    FileIOError,
    InvalidKeyEncodingError,
    TextParseError,
    TypeMismatchError,
)
from ..registry.snapshot import StoreSnapshot
from ..registry.values import decode_text, encode_text
from .filters import Filter, matches_any

logger = logging.getLogger(__name__)

TYPE_FIELD = "typ"
VALUE_FIELD = "value"


def sort_recursive(value: Any) -> Any:
    """Return a copy of value with every mapping sorted by key, at every level."""
    if isinstance(value, dict):
        return {key: sort_recursive(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [sort_recursive(item) for item in value]
    return value


def snapshot_to_entries(
    snapshot: StoreSnapshot, filters: Optional[Sequence[Filter]] = None
) -> Dict[str, Dict[str, Any]]:
    """Build the {name: {typ, value}} mapping for an export.

    Args:
        snapshot: Snapshot whose registry is exported
        filters: Active filters; None or empty exports everything

    Returns:
        Unsorted mapping ready for serialization
    """
    active = list(filters or [])
    entries: Dict[str, Dict[str, Any]] = {}

    for name, value in snapshot.registry.items():
        typ = value.kind.value
        if not matches_any(active, name, typ):
            continue
        try:
            text_value = encode_text(value)
        except InvalidKeyEncodingError as e:
            logger.warning(f"Skipping {name!r}: {e}")
            continue
        entries[name] = {TYPE_FIELD: typ, VALUE_FIELD: text_value}

    return entries


def render_toml(
    snapshot: StoreSnapshot, filters: Optional[Sequence[Filter]] = None
) -> str:
    """Serialize a snapshot (optionally filtered) to TOML text."""
    entries = snapshot_to_entries(snapshot, filters)
    logger.debug(f"Rendering {len(entries)} of {len(snapshot.registry)} settings")
    return tomli_w.dumps(sort_recursive(entries))


def parse_toml(snapshot: StoreSnapshot, text: str) -> int:
    """Parse settings text and stage every record into the snapshot.

    Records are staged in document order. The first invalid record aborts
    the parse; records staged before it stay staged.

    Returns:
        Number of records staged

    Raises:
        TextParseError: If the text is not valid TOML
        TypeMismatchError: If a record is not a table with typ and value
        UnknownTextKindError: If a record's typ is not recognized
        InvalidKeyEncodingError: If a key record cannot be parsed
    """
    try:
        document = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise TextParseError(f"Invalid TOML: {e}") from e

    staged = 0
    for name, record in document.items():
        if not isinstance(record, dict) or TYPE_FIELD not in record or VALUE_FIELD not in record:
            raise TypeMismatchError(
                f"Setting {name!r} must be a table with {TYPE_FIELD!r} and {VALUE_FIELD!r}"
            )
        value = decode_text(record[TYPE_FIELD], record[VALUE_FIELD], name)
        raw_name = snapshot.update(name, value)
        logger.debug(f"Staged {name!r} -> {raw_name!r}")
        staged += 1

    return staged


def export_file(
    snapshot: StoreSnapshot, path: Path, filters: Optional[Sequence[Filter]] = None
) -> int:
    """Write a snapshot to a TOML file.

    Returns:
        Number of settings written

    Raises:
        FileIOError: If the file cannot be written
    """
    entries = snapshot_to_entries(snapshot, filters)
    try:
        path.write_text(tomli_w.dumps(sort_recursive(entries)), encoding="utf-8")
    except OSError as e:
        raise FileIOError(f"Cannot write {path}: {e}") from e
    return len(entries)


def import_file(snapshot: StoreSnapshot, path: Path) -> int:
    """Read a TOML file and stage its records into the snapshot.

    Raises:
        FileIOError: If the file cannot be read
        TextCodecError: See parse_toml
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(f"Cannot read {path}: {e}") from e
    return parse_toml(snapshot, text)
