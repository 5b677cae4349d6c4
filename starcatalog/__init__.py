"""Star Catalog service.

A small record service for stars with:
- Create, read, update and delete over a pluggable repository
- Nearest-N selection, counts per distance and de-duplication by name

Usage:
    ./start_server.py  # From repo root
"""

from .server import app

__all__ = ['app']
