"""
Raw store backups.

An import rewrites store entries with no rollback, so the full raw store
image is saved as JSON first. A backup can be written back verbatim with
restore_backup().
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, List

import orjson

from ..registry.errors import BackupError, FileIOError
from ..registry.models import RawEntry
from ..registry.store import PlatformStore

logger = logging.getLogger(__name__)

BACKUP_FORMAT_VERSION = 1


def entries_to_payload(entries: List[RawEntry], subkey: str) -> Dict[str, Any]:
    """Convert raw entries to a JSON-serializable backup document."""
    return {
        "version": BACKUP_FORMAT_VERSION,
        "subkey": subkey,
        "created_at": time.strftime("%Y-%m-%dT%H:%M:%S"),
        "entries": [
            {"name": e.name, "type": e.type_tag, "data": e.data.hex()}
            for e in entries
        ],
    }


def payload_to_entries(payload: Any) -> List[RawEntry]:
    """Rebuild raw entries from a backup document.

    Raises:
        BackupError: If the document does not look like a backup
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("entries"), list):
        raise BackupError("Backup root must be an object with an 'entries' list")

    entries: List[RawEntry] = []
    for item in payload["entries"]:
        try:
            entries.append(
                RawEntry(
                    name=str(item["name"]),
                    data=bytes.fromhex(item["data"]),
                    type_tag=int(item["type"]),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise BackupError(f"Malformed backup entry {item!r}: {e}") from e
    return entries


def write_backup(store: PlatformStore, backup_dir: Path, subkey: str) -> Path:
    """Dump the current store contents to a timestamped JSON file.

    Returns:
        Path of the written backup

    Raises:
        FileIOError: If the backup cannot be written
    """
    entries = store.enumerate()
    stamp = time.strftime("%Y%m%d_%H%M%S")
    path = backup_dir / f"bbr_settings_{stamp}.json"

    try:
        backup_dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(
            orjson.dumps(entries_to_payload(entries, subkey), option=orjson.OPT_INDENT_2)
        )
    except OSError as e:
        raise FileIOError(f"Cannot write backup {path}: {e}") from e

    logger.info(f"Backed up {len(entries)} store entries to {path}")
    return path


def read_backup(path: Path) -> List[RawEntry]:
    """Load the raw entries saved in a backup file.

    Raises:
        FileIOError: If the file cannot be read
        BackupError: If the file is not a valid backup
    """
    try:
        with path.open("rb") as f:  # orjson works with bytes
            payload = orjson.loads(f.read())
    except OSError as e:
        raise FileIOError(f"Cannot read backup {path}: {e}") from e
    except orjson.JSONDecodeError as e:
        raise BackupError(f"Backup {path} is not valid JSON: {e}") from e
    return payload_to_entries(payload)


def restore_backup(path: Path, store: PlatformStore) -> int:
    """Write every entry of a backup back to the store.

    Returns:
        Number of entries written
    """
    entries = read_backup(path)
    for entry in entries:
        store.write(entry.name, entry.data, entry.type_tag)
    logger.debug(f"Restored {len(entries)} entries from {path}")
    return len(entries)
