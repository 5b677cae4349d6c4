"""Star repository - in-memory implementation."""

import itertools
import threading
from typing import Optional, Dict, List

from starcatalog.models.domain import Star
from starcatalog.repositories.base import Repository


class InMemoryStarRepository(Repository[Star]):
    """
    Repository for star data.

    Current implementation: In-memory (dict keyed by id)
    Rationale: Default backend for development and tests, nothing survives a restart
    """

    def __init__(self):
        self._stars: Dict[int, Star] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def get(self, star_id: int) -> Optional[Star]:
        """Get star by id."""
        return self._stars.get(star_id)

    def list(self) -> List[Star]:
        """List all stars, ordered by id."""
        with self._lock:
            return [self._stars[k] for k in sorted(self._stars)]

    def save(self, star: Star) -> Star:
        """Save star to memory, assigning an id on first save."""
        with self._lock:
            if star.id is None:
                star.id = next(self._ids)
            self._stars[star.id] = star
        return star

    def delete(self, star_id: int) -> bool:
        """Delete star from memory."""
        with self._lock:
            return self._stars.pop(star_id, None) is not None
