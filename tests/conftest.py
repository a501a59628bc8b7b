"""Shared fixtures for bbr_settings tests."""

import struct
from pathlib import Path
from typing import List

import pytest

from bbr_settings.registry import MemoryStore, RawEntry, REG_BINARY, REG_DWORD


def int32(value: int) -> bytes:
    return struct.pack("<i", value)


def float64(value: float) -> bytes:
    return struct.pack("<d", value)


SAMPLE_ENTRIES: List[RawEntry] = [
    RawEntry("MasterVolume_float_h1001", float64(0.5), REG_DWORD),
    RawEntry("MouseSensitivity_float_h1002", float64(1.25), REG_DWORD),
    RawEntry("FieldOfView_int_h1003", int32(90), REG_DWORD),
    RawEntry("ShowFPS_bool_h1004", int32(1), REG_DWORD),
    RawEntry("Crouch_key_h1005", int32(ord("c")), REG_DWORD),
    RawEntry("Horizontal_axis_h1006", int32(2), REG_DWORD),
    RawEntry("HitMarkerColor_r_h1007", float64(1.0), REG_DWORD),
    RawEntry("HitMarkerColor_g_h1008", float64(0.25), REG_DWORD),
    RawEntry("HitMarkerColor_b_h1009", float64(0.0), REG_DWORD),
    RawEntry("HitMarkerColor_a_h1010", float64(0.75), REG_DWORD),
    RawEntry("Screenmanager Resolution Width_h1011", int32(1920), REG_DWORD),
    RawEntry("PlayerName_h1012", "Soldier".encode("utf-8"), REG_BINARY),
]


@pytest.fixture
def sample_store() -> MemoryStore:
    """Store holding one entry of every kind."""
    return MemoryStore(list(SAMPLE_ENTRIES))


@pytest.fixture
def app_settings(tmp_path: Path):
    """AppSettings backed by an INI file inside tmp_path."""
    from PySide6.QtCore import QSettings

    from bbr_settings.settings import AppSettings

    qsettings = QSettings(str(tmp_path / "bbr_settings.ini"), QSettings.Format.IniFormat)
    settings = AppSettings(settings=qsettings)
    settings.backup_dir = tmp_path / "backups"
    return settings
