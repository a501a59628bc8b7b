"""Tests for JSON backups of the raw store."""

import orjson
import pytest

from bbr_settings.export import read_backup, restore_backup, write_backup
from bbr_settings.export.backup import entries_to_payload, payload_to_entries
from bbr_settings.registry import BackupError, FileIOError, MemoryStore, RawEntry, REG_DWORD

from conftest import SAMPLE_ENTRIES

SUBKEY = "SOFTWARE\\BattleBitDevTeam\\BattleBit"


class TestBackupPayload:
    """Test conversion between entries and the JSON document."""

    def test_payload_layout(self) -> None:
        """Test entries are stored as name, type tag and hex data."""
        payload = entries_to_payload([RawEntry("Fov_int_h1", b"\x5a\x00\x00\x00", REG_DWORD)], SUBKEY)
        assert payload["version"] == 1
        assert payload["subkey"] == SUBKEY
        assert payload["entries"] == [{"name": "Fov_int_h1", "type": REG_DWORD, "data": "5a000000"}]

    def test_payload_round_trip(self) -> None:
        """Test entries rebuilt from a payload are unchanged."""
        assert payload_to_entries(entries_to_payload(SAMPLE_ENTRIES, SUBKEY)) == SAMPLE_ENTRIES

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"entries": "nope"},
            {"entries": [{"name": "x", "type": 4}]},
            {"entries": [{"name": "x", "type": 4, "data": "zz"}]},
        ],
    )
    def test_malformed_payload(self, payload) -> None:
        """Test documents that are not backups are rejected."""
        with pytest.raises(BackupError):
            payload_to_entries(payload)


class TestBackupFiles:
    """Test writing and restoring backup files."""

    def test_write_and_restore(self, sample_store, tmp_path) -> None:
        """Test a restored backup brings back the original bytes."""
        path = write_backup(sample_store, tmp_path / "backups", SUBKEY)
        assert path.parent == tmp_path / "backups"
        assert path.name.startswith("bbr_settings_") and path.suffix == ".json"
        assert read_backup(path) == SAMPLE_ENTRIES

        sample_store.write("FieldOfView_int_h1003", b"\x00\x00\x00\x00", REG_DWORD)
        assert restore_backup(path, sample_store) == len(SAMPLE_ENTRIES)
        assert sample_store.get("FieldOfView_int_h1003") == SAMPLE_ENTRIES[2]

    def test_restore_into_empty_store(self, sample_store, tmp_path) -> None:
        """Test restoring recreates every entry."""
        path = write_backup(sample_store, tmp_path, SUBKEY)
        target = MemoryStore()
        restore_backup(path, target)
        assert target.enumerate() == SAMPLE_ENTRIES

    def test_missing_backup(self, tmp_path) -> None:
        """Test a missing file raises FileIOError."""
        with pytest.raises(FileIOError):
            read_backup(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path) -> None:
        """Test a file that is not JSON raises BackupError."""
        path = tmp_path / "broken.json"
        path.write_bytes(b"{not json")
        with pytest.raises(BackupError):
            read_backup(path)

    def test_backup_is_indented_json(self, sample_store, tmp_path) -> None:
        """Test the file is readable JSON with the subkey recorded."""
        path = write_backup(sample_store, tmp_path, SUBKEY)
        payload = orjson.loads(path.read_bytes())
        assert payload["subkey"] == SUBKEY
        assert len(payload["entries"]) == len(SAMPLE_ENTRIES)
        assert b"\n  " in path.read_bytes()
