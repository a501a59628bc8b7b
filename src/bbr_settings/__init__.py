"""
bbr_settings: BattleBit Remastered settings sync

Exports the game's settings from the platform store to a portable TOML file
and imports them back, keeping every value's type intact.
"""

__version__ = "0.1.0"
__author__ = "bbr_settings Contributors"
