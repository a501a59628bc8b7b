"""
Error types for BattleBit settings transcoding.
"""


class SettingsSyncError(Exception):
    """Base class for all errors raised by bbr_settings."""
    pass


class StoreUnavailableError(SettingsSyncError):
    """Raised when the platform store location cannot be opened."""
    pass


class StoreWriteError(SettingsSyncError):
    """Raised when a staged entry cannot be written back to the store."""
    pass


class MalformedRawNameError(SettingsSyncError):
    """Raised when a raw store name cannot be split into name and kind tokens."""
    pass


class TextCodecError(SettingsSyncError):
    """Base class for errors raised while decoding user-edited text."""
    pass


class UnknownTextKindError(TextCodecError):
    """Raised when a text record declares a kind that is not recognized."""
    pass


class TypeMismatchError(TextCodecError):
    """Raised when a text value does not have the shape its kind requires."""
    pass


class InvalidKeyEncodingError(TextCodecError):
    """Raised when a key binding cannot be converted to or from a character."""
    pass


class TextParseError(TextCodecError):
    """Raised when the settings file is not valid TOML."""
    pass


class FileIOError(SettingsSyncError):
    """Raised when a settings or backup file cannot be read or written."""
    pass


class BackupError(SettingsSyncError):
    """Raised when a backup file is malformed."""
    pass
