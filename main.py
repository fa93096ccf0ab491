"""
Entry point: create the Assets directory, load the default file and run the menu.

Exit codes: 0 normal exit, 2 the Assets directory could not be created,
130 interrupted with Ctrl-C (no final save).
"""

import locale
import logging
import sys

from asset_tracker.commands import CommandLoop
from asset_tracker.config import EXIT_INTERRUPTED, EXIT_OK, EXIT_STARTUP_FAILURE
from asset_tracker.logging_setup import configure_logging
from asset_tracker.storage import ensure_assets_dir, get_assets_dir
from asset_tracker.ui import ConsoleUI

logger = logging.getLogger("asset_tracker.main")


def main() -> int:
    ui = ConsoleUI()
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass  # unknown locale in the environment; currency falls back to the configured symbol

    try:
        assets_dir = ensure_assets_dir(get_assets_dir())
    except OSError as exc:
        ui.error(f"Cannot create assets directory: {exc}")
        return EXIT_STARTUP_FAILURE
    configure_logging(assets_dir)
    logger.info("Starting with assets directory %s", assets_dir)

    try:
        CommandLoop(ui, assets_dir).run()
    except KeyboardInterrupt:
        logger.info("Interrupted; exiting without final save")
        ui.show("")
        return EXIT_INTERRUPTED
    logger.info("Exited normally")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
