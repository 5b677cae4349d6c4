"""Centralized environment configuration for the star catalog.

This module provides:
- Single source of truth for storage location and backend
- Log level selection and logging setup

Usage:
    from starcatalog.env_config import STORAGE_BACKEND, DATA_DIR, configure_logging

    configure_logging()
"""

import logging
import os
from pathlib import Path


# =============================================================================
# ENVIRONMENT CONFIGURATION
# =============================================================================

# Repo root directory
_REPO_ROOT = Path(__file__).resolve().parent.parent

# Storage backend for stars: "memory" or "json"
STORAGE_BACKEND = os.environ.get("STARCATALOG_STORAGE", "memory")

# Directory for the json backend (one file per star)
DATA_DIR = Path(os.environ.get(
    "STARCATALOG_DATA_DIR",
    str(_REPO_ROOT / ".starcatalog" / "stars")
))

# Optional override for the service configuration file
CONFIG_PATH = os.environ.get("STARCATALOG_CONFIG")

LOG_LEVEL = os.environ.get("STARCATALOG_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


# =============================================================================
# LOGGING
# =============================================================================

def configure_logging(level: str = None) -> None:
    """Configure root logging for the service.

    Args:
        level: Level name (e.g. 'DEBUG'). Defaults to STARCATALOG_LOG_LEVEL.
    """
    level_name = (level or LOG_LEVEL).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level_name}")

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("starcatalog").setLevel(numeric_level)
