"""Star service - business logic for the star catalog."""

import logging
from collections import Counter
from typing import Dict, Iterable, KeysView, List, Optional

from starcatalog.exceptions import InvalidArgumentError, StarNotFoundError
from starcatalog.models.domain import Star
from starcatalog.repositories.base import Repository
from starcatalog.services.config_service import ConfigService, get_config_service

logger = logging.getLogger(__name__)


def _require_stars(stars: Optional[Iterable[Star]], kind: str = "list") -> List[Star]:
    """Materialize the input, rejecting None and empty collections."""
    stars = list(stars) if stars is not None else []
    if not stars:
        raise InvalidArgumentError(f"Star {kind} cannot be null or empty")
    return stars


class StarService:
    """
    Service for star catalog business logic.

    Responsibilities:
    - Enforce business rules (minimum name length)
    - Orchestrate lookups, saves and deletes against the repository
    - Analytics over caller-supplied star lists (no repository access)

    Does NOT:
    - Handle HTTP requests (that's API layer)
    - Know how stars are stored (that's repository layer)

    update_star reads then writes without a lock, so two concurrent updates
    of the same id race and the last save wins.
    """

    def __init__(self, star_repo: Repository[Star], config_service: Optional[ConfigService] = None):
        self.star_repo = star_repo
        self.config_service = config_service or get_config_service()

    def find_closest_stars(self, stars: Iterable[Star], size: int) -> List[Star]:
        """Return the `size` stars with the smallest distance.

        The sort is stable, so stars at the same distance keep their input
        order. A size larger than the input returns every star.

        Raises:
            InvalidArgumentError: If stars is None/empty or size is negative.
        """
        stars = _require_stars(stars)
        if size < 0:
            raise InvalidArgumentError(f"Size must be non-negative, got {size}")

        logger.info("Finding the closest %d stars from a list of %d stars", size, len(stars))
        return sorted(stars, key=lambda s: s.distance)[:size]

    def get_number_of_stars_by_distances(self, stars: Iterable[Star]) -> Dict[int, int]:
        """Count stars per distance.

        Returns:
            Mapping of distance to star count, iterated in ascending distance order

        Raises:
            InvalidArgumentError: If stars is None/empty.
        """
        stars = _require_stars(stars)

        logger.info("Calculating the number of stars by their distances")
        counts = Counter(star.distance for star in stars)
        return {distance: counts[distance] for distance in sorted(counts)}

    def get_unique_stars(self, stars: Iterable[Star]) -> KeysView[Star]:
        """De-duplicate stars by name.

        The first star seen for each name is kept, in first-seen order. The
        result is a set-like view, so membership tests and set operators work.

        Raises:
            InvalidArgumentError: If stars is None/empty.
        """
        stars = _require_stars(stars, kind="collection")

        logger.info("Getting unique stars from a collection of %d stars", len(stars))
        return dict.fromkeys(stars).keys()

    def list_stars(self) -> List[Star]:
        """List all stored stars."""
        return self.star_repo.list()

    def get_star_by_id(self, star_id: int) -> Star:
        """Get star by id.

        Raises:
            StarNotFoundError: If no star has this id.
        """
        logger.info("Fetching star with id: %s", star_id)
        star = self.star_repo.get(star_id)

        if star is None:
            logger.error("Star not found with id: %s", star_id)
            raise StarNotFoundError(star_id)

        return star

    def add_star(self, star: Star) -> Star:
        """
        Add a new star.

        Business rules:
        - Name must be at least minNameLength characters (3 by default)

        Returns:
            The star as returned by the repository, with its id assigned
        """
        min_length = self.config_service.get_min_name_length()
        if len(star.name) < min_length:
            raise InvalidArgumentError(
                f"Star name must be at least {min_length} characters long"
            )

        logger.info("Adding a new star with name: %s", star.name)
        return self.star_repo.save(star)

    def update_star(self, star_id: int, star: Star) -> Star:
        """Overwrite name and distance of an existing star, keeping its id."""
        existing = self.get_star_by_id(star_id)
        existing.name = star.name
        existing.distance = star.distance

        logger.info("Updating star with id: %s", star_id)
        return self.star_repo.save(existing)

    def delete_star(self, star_id: int) -> None:
        """Delete a star. Unknown ids are ignored."""
        logger.info("Deleting star with id: %s", star_id)
        self.star_repo.delete(star_id)
