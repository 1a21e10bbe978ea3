"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar

from domain.models.database import InMemoryDatabase

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common read operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: InMemoryDatabase, model: Type[ModelType]):
        self.db = db
        self.model = model

    @abstractmethod
    def _rows(self) -> List[ModelType]:
        """Snapshot of every stored entity in insertion order"""

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by ID.

        Args:
            entity_id: Entity id

        Returns:
            Entity or None if not found
        """
        return next((row for row in self._rows() if row.id == entity_id), None)

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        """Get all entities with optional pagination"""
        rows = self._rows()[skip:]
        return rows if limit is None else rows[:limit]

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None
