"""Main module for dangerwrite."""

import logging
import os
import sys

from dangerwrite.cli import run
from dangerwrite.config.paths import get_paths


def setup_logging() -> None:
    """Configure logging to file for debugging.

    The TUI owns the terminal, so nothing is logged to stderr.
    """
    paths = get_paths()
    paths.global_state_dir.mkdir(parents=True, exist_ok=True)
    log_file = paths.debug_log

    # Set level from env var, default to INFO
    level = os.environ.get("DANGERWRITE_LOG_LEVEL", "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode="w"),
        ],
    )
    logging.info("Dangerwrite starting, logging to %s", log_file)


def main() -> None:
    """Entry point for the ``dangerwrite`` command."""
    sys.exit(run(configure_logging=setup_logging))


if __name__ == "__main__":
    main()
