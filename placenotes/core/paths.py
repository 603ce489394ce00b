#!/usr/bin/env python3
"""
paths.py
-------------------
Default filesystem locations for PlaceNotes.

    ROOT/
    ├── placenotes/        # Package source
    ├── data/              # SQLite database
    ├── logs/              # Rotating log files
    └── placenotes.yaml    # Optional settings file

Every path here is only a default: the CLI accepts --db-path, --log-dir and
--config overrides, and the PLACENOTES_HOME environment variable relocates
the data, log and settings defaults as a whole.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine the directory the defaults are relative to.

    Uses PLACENOTES_HOME when set, otherwise the checkout root
    (this file lives at ROOT/placenotes/core/paths.py).

    Returns:
        Path object for the root directory
    """
    home = os.environ.get("PLACENOTES_HOME")
    if home:
        return Path(home).expanduser().resolve()

    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()

# --- Database ---
DATA_DIR = ROOT / "data"
DB_PATH = DATA_DIR / "placenotes.db"

# --- Logs ---
LOG_DIR = ROOT / "logs"

# --- Settings ---
CONFIG_PATH = ROOT / "placenotes.yaml"
