from __future__ import annotations

"""Centralized path utilities for the tracker.

These provide absolute `Path` objects to key directories so that services
and the Streamlit app resolve data, config and logs the same way
regardless of the working directory.
"""

from pathlib import Path


# The `emission_tracker` package is one level below the project root
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Canonical directories used throughout the project
CONFIG_DIR = PROJECT_ROOT / "config"
DATA_DIR = PROJECT_ROOT / "data"
LOGS_DIR = PROJECT_ROOT / "logs"

DEFAULT_CONFIG_FILE = CONFIG_DIR / "tracker.yaml"
