"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest

from starcatalog.models.domain import Star
from starcatalog.services.config_service import ConfigService


@pytest.fixture
def nearby_stars():
    """Four well-known stars at increasing distance."""
    return [
        Star("Alpha Centauri", 4),
        Star("Barnard's Star", 6),
        Star("Wolf 359", 8),
        Star("Sirius", 9),
    ]


@pytest.fixture
def config_service(tmp_path):
    """Config service backed by a temporary config file."""
    config_file = tmp_path / "service_config.json"
    config_file.write_text(
        '{"validation": {"minNameLength": 3}, "server": {"host": "127.0.0.1", "port": 8000}}'
    )
    return ConfigService(config_file)
