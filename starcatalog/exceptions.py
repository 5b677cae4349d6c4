"""Error kinds raised by the star catalog.

The API layer maps these to HTTP responses:
- InvalidArgumentError -> 400
- StarNotFoundError -> 404
"""


class StarCatalogError(Exception):
    """Base class for star catalog errors."""


class InvalidArgumentError(StarCatalogError, ValueError):
    """Raised when caller input breaks a business rule."""


class StarNotFoundError(StarCatalogError, LookupError):
    """Raised when no star matches the requested id."""

    def __init__(self, star_id):
        self.star_id = star_id
        super().__init__(f"Star not found with id: {star_id}")
