"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List

T = TypeVar('T')


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Abstracts data access - could be in-memory, filesystem, database, etc.
    The service layer only depends on these four operations, so tests can
    swap in a fake or a Mock.
    """

    @abstractmethod
    def get(self, id: int) -> Optional[T]:
        """Get entity by ID, or None when absent."""
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities."""
        pass

    @abstractmethod
    def save(self, entity: T) -> T:
        """Save entity (create or update). Assigns an ID on first save."""
        pass

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Delete entity by ID. Returns True if deleted, False if not found."""
        pass
