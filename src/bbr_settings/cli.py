"""
Command line interface for bbr_settings.

Three mutually exclusive commands:
    --input PATH    import a TOML settings file into the game's store
    --output PATH   export the game's settings to a TOML file
    --restore PATH  write a JSON backup back into the store

Every command asks for confirmation first unless --yes is given.
"""

import argparse
import logging
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional

from . import __version__
from .export import export_file, import_file, parse_filters, restore_backup, write_backup
from .registry import (
    PlatformStore,
    SettingsSyncError,
    StoreSnapshot,
    StoreUnavailableError,
    WindowsRegistryStore,
)
from .settings import AppSettings
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

StoreFactory = Callable[[str], PlatformStore]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bbr-settings",
        description="Import and export BattleBit Remastered settings as TOML.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    command = parser.add_mutually_exclusive_group()
    command.add_argument("-i", "--input", help="The filepath of the TOML to import")
    command.add_argument("-o", "--output", help="The filepath to export the TOML to")
    command.add_argument("-r", "--restore", help="The filepath of a JSON backup to restore")

    parser.add_argument(
        "-f",
        "--filters",
        action="append",
        default=[],
        help="Filters to include during an export (comma separated, repeatable)",
    )
    parser.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    parser.add_argument(
        "--no-backup", action="store_true", help="Do not back up the store before an import"
    )
    parser.add_argument("--subkey", help="Registry key holding the game's settings")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Console log level",
    )
    return parser


def confirm(
    message: str,
    action: Callable[[], None],
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> bool:
    """Ask a yes/no question and run action on yes.

    Empty input counts as yes. Anything that is not yes/no asks again.

    Returns:
        True if the action ran, False if the user canceled
    """
    while True:
        response = input_fn(f"{message} (Y/n): ").strip().lower()
        if response in ("", "y", "yes"):
            action()
            return True
        if response in ("n", "no"):
            output_fn("Operation canceled.")
            return False
        output_fn("Invalid input. Please enter 'Y' or 'N'.")


def import_cmd(
    store: PlatformStore,
    snapshot: StoreSnapshot,
    path: Path,
    backup_dir: Optional[Path],
    subkey: str,
) -> None:
    """Stage a TOML file into the snapshot and write it to the store."""
    staged = import_file(snapshot, path)
    logger.debug(f"Parsed {staged} settings from {path}")

    if backup_dir is not None:
        write_backup(store, backup_dir, subkey)

    written = snapshot.save(store)
    logger.info(f"Successfully imported {written} BattleBit settings from `{path}`")


def export_cmd(snapshot: StoreSnapshot, path: Path, filter_tokens: List[str]) -> None:
    """Write the snapshot (optionally filtered) to a TOML file."""
    filters = parse_filters(filter_tokens)
    if filters:
        logger.debug(f"Export filters: {', '.join(f.describe() for f in filters)}")

    count = export_file(snapshot, path, filters)
    logger.info(f"Successfully exported {count} BattleBit settings to `{path}`")


def restore_cmd(store: PlatformStore, path: Path) -> None:
    """Write every entry of a JSON backup back into the store."""
    count = restore_backup(path, store)
    logger.info(f"Successfully restored {count} store entries from `{path}`")


def run(
    argv: Optional[List[str]] = None,
    settings: Optional[AppSettings] = None,
    store_factory: StoreFactory = WindowsRegistryStore,
    input_fn: Callable[[str], str] = input,
) -> int:
    """Parse arguments and run the requested command.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
        settings: Tool configuration (defaults to the per-user QSettings)
        store_factory: Opens the platform store for a registry subkey
        input_fn: Reads confirmation answers

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.filters and not args.output:
        parser.error("--filters can only be used with --output")

    if settings is None:
        settings = AppSettings()
    setup_logging(settings, args.log_level)

    validation = settings.validate()
    for warning in validation.warnings:
        logger.warning(warning)
    if not validation.is_valid:
        for error in validation.errors:
            logger.error(f"Configuration error: {error}")
        return 1

    if not (args.input or args.output or args.restore):
        logger.warning("No command provided")
        return 0

    subkey = args.subkey or settings.registry_subkey
    try:
        store = store_factory(subkey)
        snapshot = StoreSnapshot.from_store(store)
    except StoreUnavailableError as e:
        logger.error(f"Failed to access BattleBit configuration: {e}")
        return 0

    if args.input:
        path = Path(args.input)
        backup_dir = None if args.no_backup or not settings.backup_enabled else settings.backup_dir
        message = f"Are you sure you want to import from `{path}`?"
        action = partial(import_cmd, store, snapshot, path, backup_dir, subkey)
    elif args.output:
        path = Path(args.output)
        filter_tokens = args.filters or settings.default_filters
        message = f"Are you sure you want to export to `{path}`?"
        action = partial(export_cmd, snapshot, path, filter_tokens)
    else:
        path = Path(args.restore)
        message = f"Are you sure you want to restore the backup `{path}`?"
        action = partial(restore_cmd, store, path)

    try:
        if args.yes:
            action()
        else:
            confirm(message, action, input_fn=input_fn)
    except SettingsSyncError as e:
        logger.error(f"Operation failed: {e}")
        return 1

    return 0
