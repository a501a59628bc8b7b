"""
Main entry point for bbr_settings.
Usage: python -m bbr_settings [--input FILE | --output FILE | --restore FILE]
"""

import sys
import logging

from .cli import run


def main() -> int:
    """Main application entry point."""
    logger = logging.getLogger(f"{__name__}.main")
    try:
        return run(sys.argv[1:])
    except KeyboardInterrupt:
        print()
        logger.warning("Interrupted")
        return 130
    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())
