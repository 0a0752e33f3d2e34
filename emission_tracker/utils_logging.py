from __future__ import annotations

"""Logging utilities.

Set up a consistent logging configuration to both console and a file
in the `logs/` directory. Streamlit re-executes the app script on every
interaction, so configuration is applied once per process.
"""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILE_NAME = "tracker.log"

_configured = False


def configure_logging(log_dir: Path, debug: bool = False) -> Path:
    """Configure root logging for the tracker and return the log file path.

    - Creates the log directory if missing
    - Streams logs to both stdout and `logs/tracker.log` (appending)
    - Uses DEBUG level if `debug=True`, otherwise INFO
    """
    global _configured

    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME
    level = logging.DEBUG if debug else logging.INFO

    if _configured:
        logging.getLogger().setLevel(level)
        return log_file

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, mode="a", encoding="utf-8"),
        ],
        force=True,
    )
    _configured = True
    return log_file
