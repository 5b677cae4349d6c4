"""Domain entities - internal representation (framework-agnostic)."""

from dataclasses import dataclass, field
from typing import Optional

from starcatalog.exceptions import InvalidArgumentError


@dataclass(eq=False)
class Star:
    """Star domain entity.

    Equality and hashing use the name only: two stars with the same name
    are the same star, whatever their id or distance.
    Do not rename a star while it sits in a set or dict (or a view of one),
    since its hash changes with the name.
    """
    name: str
    distance: int
    id: Optional[int] = field(default=None)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidArgumentError("Name is required")
        if self.distance < 0:
            raise InvalidArgumentError("Distance must be non-negative")

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Star):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)
