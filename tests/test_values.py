"""Tests for the binary and text encodings of setting values."""

import struct

import pytest

from bbr_settings.registry import (
    Axis,
    Bool,
    Color,
    Float,
    Int,
    Key,
    SettingKind,
    Str,
    InvalidKeyEncodingError,
    TypeMismatchError,
    UnknownTextKindError,
    decode_binary,
    decode_text,
    encode_binary,
    encode_text,
)
from bbr_settings.registry.values import codepoint_to_char, key_from_text, key_to_text

ALL_VALUES = [
    (Int(-42), "Volume"),
    (Float(0.3), "MasterVolume"),
    (Bool(True), "ShowFPS"),
    (Bool(False), "ShowFPS"),
    (Axis(3), "Horizontal_axis"),
    (Color(0, 0.5), "Crosshair_r"),
    (Color(1, 0.25), "Crosshair_g"),
    (Color(2, 1.0), "Crosshair_b"),
    (Color(3, 0.0), "Crosshair_a"),
    (Key(ord("w")), "Forward_key"),
    (Key(0x1F600), "Emote_key"),
    (Str("Soldier"), "PlayerName_h1"),
]


class TestBinaryEncoding:
    """Test store payload encoding."""

    @pytest.mark.parametrize("value,name", ALL_VALUES)
    def test_binary_round_trip(self, value, name) -> None:
        """Test decoding an encoded payload returns the same value."""
        channel = value.channel if isinstance(value, Color) else 0
        assert decode_binary(value.kind, encode_binary(value), channel) == value

    def test_payload_layouts(self) -> None:
        """Test payload sizes and little-endian layout."""
        assert encode_binary(Int(1)) == b"\x01\x00\x00\x00"
        assert encode_binary(Axis(-1)) == b"\xff\xff\xff\xff"
        assert encode_binary(Key(0x41)) == b"\x41\x00\x00\x00"
        assert encode_binary(Float(1.0)) == struct.pack("<d", 1.0)
        assert len(encode_binary(Color(2, 0.5))) == 8
        assert encode_binary(Bool(True)) == b"\x01"
        assert encode_binary(Bool(False)) == b"\x00"
        assert encode_binary(Str("é")) == "é".encode("utf-8")

    def test_short_int_payload_decodes_to_zero(self) -> None:
        """Test a 3-byte int payload falls back to Int(0)."""
        assert decode_binary(SettingKind.INT, b"\x01\x02\x03") == Int(0)

    def test_malformed_payloads_use_defaults(self) -> None:
        """Test every kind substitutes its default for a bad payload."""
        assert decode_binary(SettingKind.FLOAT, b"\x00" * 4) == Float(0.0)
        assert decode_binary(SettingKind.AXIS, b"") == Axis(0)
        assert decode_binary(SettingKind.KEY, b"\x00" * 8) == Key(0)
        assert decode_binary(SettingKind.COLOR, b"\x00", 2) == Color(2, 0.0)
        assert decode_binary(SettingKind.BOOL, b"\x01\x00") == Bool(False)
        assert decode_binary(SettingKind.STR, b"\xff\xfe") == Str("")

    def test_bool_accepts_dword_payload(self) -> None:
        """Test bools written by the game as 4-byte DWORDs decode."""
        assert decode_binary(SettingKind.BOOL, struct.pack("<i", 1)) == Bool(True)
        assert decode_binary(SettingKind.BOOL, struct.pack("<i", 0)) == Bool(False)
        assert decode_binary(SettingKind.BOOL, b"\x02") == Bool(False)


class TestTextEncoding:
    """Test settings file value encoding."""

    @pytest.mark.parametrize("value,name", ALL_VALUES)
    def test_text_round_trip(self, value, name) -> None:
        """Test decoding an encoded text value returns the same value."""
        assert decode_text(value.kind.value, encode_text(value), name) == value

    def test_text_scalar_types(self) -> None:
        """Test each kind maps to the expected scalar type."""
        assert encode_text(Int(5)) == 5
        assert encode_text(Axis(-2)) == -2
        assert isinstance(encode_text(Float(1.0)), float)
        assert encode_text(Color(0, 0.5)) == 0.5
        assert encode_text(Bool(True)) is True
        assert encode_text(Str("abc")) == "abc"

    def test_unknown_kind(self) -> None:
        """Test an unrecognized typ is rejected."""
        with pytest.raises(UnknownTextKindError):
            decode_text("double", 1.0, "Volume")

    @pytest.mark.parametrize(
        "kind,value",
        [
            ("int", 1.5),
            ("int", "1"),
            ("int", True),
            ("int", 2**31),
            ("axis", -(2**31) - 1),
            ("float", "0.5"),
            ("float", False),
            ("bool", "notabool"),
            ("bool", 1),
            ("str", 5),
            ("key", 65),
        ],
    )
    def test_type_mismatch(self, kind, value) -> None:
        """Test values with the wrong shape are rejected."""
        with pytest.raises(TypeMismatchError):
            decode_text(kind, value, "Setting_r")

    def test_float_accepts_integer(self) -> None:
        """Test a hand-written integer is accepted for float kinds."""
        assert decode_text("float", 1, "Volume") == Float(1.0)
        assert decode_text("color", 0, "Tint_a") == Color(3, 0.0)


class TestColorChannels:
    """Test color channel derivation from logical names."""

    @pytest.mark.parametrize("suffix,channel", [("r", 0), ("g", 1), ("b", 2), ("a", 3)])
    def test_channel_from_name(self, suffix, channel) -> None:
        """Test r/g/b/a name endings map to channels 0-3."""
        assert decode_text("color", 0.5, f"HitMarkerColor_{suffix}") == Color(channel, 0.5)

    def test_channel_letter(self) -> None:
        """Test the suffix letter of each channel."""
        assert [Color(i, 0.0).channel_letter for i in range(4)] == ["r", "g", "b", "a"]

    @pytest.mark.parametrize("name", ["HitMarkerColor_x", "HitMarkerColor_R", ""])
    def test_invalid_channel(self, name) -> None:
        """Test any other trailing character is an error."""
        with pytest.raises(TypeMismatchError):
            decode_text("color", 0.5, name)


class TestKeyBindings:
    """Test key binding text conversion."""

    def test_printable_ascii_is_literal(self) -> None:
        """Test printable ASCII keys render as the character itself."""
        assert key_to_text(Key(ord("c"))) == "c"
        assert key_to_text(Key(ord(" "))) == " "

    def test_emoji_escape(self) -> None:
        """Test 0x1F600 renders as \\u1f600 and parses back."""
        assert key_to_text(Key(0x1F600)) == "\\u1f600"
        assert key_from_text("\\u1f600") == Key(0x1F600)

    def test_control_character_escape(self) -> None:
        """Test non-printable keys render as escapes."""
        assert key_to_text(Key(0x1B)) == "\\u1b"
        assert key_from_text("\\u1B") == Key(0x1B)

    def test_literal_uses_first_character(self) -> None:
        """Test a literal string uses its first character."""
        assert key_from_text("space") == Key(ord("s"))
        assert key_from_text("é") == Key(0xE9)

    @pytest.mark.parametrize("text", ["", "\\uzz", "\\u-1", "\\u0x41", "\\u110000", "\\ud800"])
    def test_invalid_key_text(self, text) -> None:
        """Test empty text and bad escapes are rejected."""
        with pytest.raises(InvalidKeyEncodingError):
            key_from_text(text)

    @pytest.mark.parametrize("codepoint", [-1, 0x110000, 0xD800, 0xDFFF])
    def test_invalid_codepoints(self, codepoint) -> None:
        """Test checked conversion rejects surrogates and out of range values."""
        with pytest.raises(InvalidKeyEncodingError):
            codepoint_to_char(codepoint)
        with pytest.raises(InvalidKeyEncodingError):
            encode_text(Key(codepoint))

    def test_invalid_key_text_through_decode_text(self) -> None:
        """Test decode_text surfaces key errors."""
        with pytest.raises(InvalidKeyEncodingError):
            decode_text("key", "", "Crouch_key")
