"""
Design (main.py)
- Purpose: Entry point. Configure logging, seed the catalog, build the controller and the Tk UI.
- Inputs: Command line (-v/-vv for verbosity, --version); CATALOG_EDITOR_LOG env var.
- Outputs: Process exit code.
- Side effects: Opens the main window and runs the Tk event loop.
"""

import argparse
import logging
import os
import sys
import tkinter as tk
from typing import Optional

from catalog_editor.config import LOG_ENV_VAR, SEED_ENTRIES, WINDOW_TITLE
from catalog_editor.controller import CatalogController
from catalog_editor.repository import CatalogStore
from catalog_editor.ui import AppUI

__version__ = "0.1.0"

logger = logging.getLogger("catalog_editor")


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    env_level = os.environ.get(LOG_ENV_VAR)
    if env_level and not verbosity:
        level = getattr(logging, env_level.upper(), level)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="catalog-editor", description=WINDOW_TITLE)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    store = CatalogStore(SEED_ENTRIES)
    controller = CatalogController(store)
    logger.info("Starting %s with %d seed items", WINDOW_TITLE, store.count)

    root = tk.Tk()
    AppUI(root, controller)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
