"""Star repository - filesystem implementation."""

import json
import threading
from pathlib import Path
from typing import Optional, List

from starcatalog.models.domain import Star
from starcatalog.repositories.base import Repository
from starcatalog.repositories.memory_repository import InMemoryStarRepository

# High-water mark of allocated ids, kept beside the star files
META_FILE = "_meta.json"


class JsonStarRepository(Repository[Star]):
    """
    Repository for star data access.

    Current implementation: Filesystem (one JSON file per star, <id>.json)
    Ids come from a persisted high-water mark (_meta.json) and are never reused.
    Future: Could swap for PostgreSQL, SQLite, etc.
    """

    def __init__(self, stars_dir: Path):
        self.stars_dir = stars_dir
        self.stars_dir.mkdir(parents=True, exist_ok=True)
        self._meta_file = self.stars_dir / META_FILE
        self._lock = threading.Lock()

    def get(self, star_id: int) -> Optional[Star]:
        """Get star by id."""
        star_file = self._star_file(star_id)

        if not star_file.exists():
            return None

        return self._load_star(star_file)

    def list(self) -> List[Star]:
        """List all stars, sorted by id."""
        stars = []

        try:
            entries = self._star_files()
        except OSError:
            return stars

        for star_file in entries:
            star = self._load_star(star_file)
            if star:
                stars.append(star)

        return sorted(stars, key=lambda s: s.id)

    def save(self, star: Star) -> Star:
        """Save star to filesystem."""
        with self._lock:
            if star.id is None:
                star.id = self._next_id()

            state = {
                "id": star.id,
                "name": star.name,
                "distance": star.distance,
            }

            with open(self._star_file(star.id), "w", encoding='utf-8') as f:
                json.dump(state, f, indent=2)

        return star

    def delete(self, star_id: int) -> bool:
        """Delete star file."""
        star_file = self._star_file(star_id)

        with self._lock:
            if star_file.exists():
                star_file.unlink()
                return True

        return False

    def _star_file(self, star_id: int) -> Path:
        return self.stars_dir / f"{star_id}.json"

    def _next_id(self) -> int:
        """Allocate the next id from the persisted high-water mark.

        Ids are never reused, even after the newest star is deleted.
        Directories written before the mark existed fall back to the
        highest id on disk.
        """
        last_id = 0
        try:
            with open(self._meta_file, encoding='utf-8') as f:
                last_id = int(json.load(f)["last_id"])
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, FileNotFoundError):
            pass

        for star_file in self._star_files():
            try:
                last_id = max(last_id, int(star_file.stem))
            except ValueError:
                pass

        next_id = last_id + 1
        with open(self._meta_file, "w", encoding='utf-8') as f:
            json.dump({"last_id": next_id}, f, indent=2)

        return next_id

    def _star_files(self) -> List[Path]:
        return [p for p in self.stars_dir.glob("*.json") if p.name != META_FILE]

    def _load_star(self, star_file: Path) -> Optional[Star]:
        """Load star from filesystem, None if the file is unreadable."""
        try:
            with open(star_file, encoding='utf-8') as f:
                state = json.load(f)

            return Star(
                id=int(state["id"]),
                name=state["name"],
                distance=int(state["distance"]),
            )
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, FileNotFoundError):
            return None


def create_star_repository(backend: str, stars_dir: Optional[Path] = None) -> Repository[Star]:
    """Build the repository for a storage backend name ('memory' or 'json')."""
    if backend == "memory":
        return InMemoryStarRepository()
    if backend == "json":
        if stars_dir is None:
            raise ValueError("The json storage backend needs a data directory")
        return JsonStarRepository(Path(stars_dir))
    raise ValueError(f"Unknown storage backend: {backend!r}. Valid: 'memory', 'json'")
