"""
Base Service Class with Repository Pattern
Provides common business logic patterns for all services
"""

from typing import TypeVar, Generic, Optional, List, Any
from roster.repositories.base import BaseRepository
import logging

T = TypeVar('T')


class BaseService(Generic[T]):
    """
    Base service class providing common operations
    All services should inherit from this class

    Services stage changes in the session but never commit on their own;
    the caller decides when to call commit() or rollback().
    """

    def __init__(self, repository: BaseRepository[T]):
        """
        Initialize the service with a repository

        Args:
            repository: The repository instance for data access
        """
        self.repository = repository
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Get entity by ID

        Args:
            id: The primary key ID

        Returns:
            The entity if found, None otherwise
        """
        return self.repository.get_by_id(id)

    def get_all(self, **filters) -> List[T]:
        """
        Get all entities with optional exact-match filters

        Args:
            **filters: Optional filter criteria

        Returns:
            List of entities
        """
        return self.repository.find_all(**filters)

    def exists(self, id: Any) -> bool:
        """
        Check if entity exists by ID

        Args:
            id: The entity ID to check

        Returns:
            True if exists, False otherwise
        """
        return self.repository.exists(id)

    def count(self, **filters) -> int:
        """
        Count entities with optional filters
        """
        return self.repository.count(**filters)

    def commit(self) -> None:
        """
        Commit current transaction (rolled back and re-raised on failure)
        """
        self.repository.commit()

    def rollback(self) -> None:
        """
        Rollback current transaction
        """
        self.repository.rollback()

    def flush(self) -> None:
        """
        Flush pending changes without committing
        """
        self.repository.flush()
