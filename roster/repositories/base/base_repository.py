"""
Base Repository Class for the Volleyball Roster
Provides data access patterns and query abstractions over the ORM session
"""

from typing import TypeVar, Generic, Optional, List, Any, Iterable
from sqlalchemy import inspect
from sqlalchemy.orm import Session, Query
from models import db
import logging

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Base repository providing data access patterns
    All repositories should inherit from this class
    """

    def __init__(self, model_class: type[T], session: Optional[Session] = None):
        """
        Initialize the repository with a model class

        Args:
            model_class: The SQLAlchemy model class this repository manages
            session: Optional database session (defaults to db.session)
        """
        self.model_class = model_class
        self.db = db
        self._session = session
        mapper = inspect(model_class)
        self.key_column = mapper.primary_key[0]
        self.key_name = mapper.get_property_by_column(self.key_column).key
        self.logger = logging.getLogger(f"{__name__}.{model_class.__name__}Repository")

    @property
    def session(self) -> Session:
        """Returns the active database session"""
        return self._session if self._session is not None else self.db.session

    def primary_key_of(self, entity: T) -> Any:
        """Returns the primary key value of an entity (None if not yet assigned)"""
        return getattr(entity, self.key_name)

    def get_by_id(self, id: Any) -> Optional[T]:
        """
        Get entity by primary key

        Args:
            id: The primary key value

        Returns:
            The entity if found, None otherwise
        """
        if id is None:
            return None
        return self.session.get(self.model_class, id)

    def find_all(self, **filters) -> List[T]:
        """
        Find all entities matching exact-match filters

        Args:
            **filters: Filter criteria (attribute=value)

        Returns:
            List of matching entities, empty if nothing matches
        """
        return self.get_query().filter_by(**filters).all()

    def get_query(self) -> Query:
        """
        Get base query for advanced operations

        Returns:
            SQLAlchemy Query object
        """
        return self.session.query(self.model_class)

    def add(self, entity: T, commit: bool = False) -> T:
        """
        Insert a new entity

        Args:
            entity: The transient entity to insert
            commit: Whether to commit immediately

        Returns:
            The inserted entity
        """
        self.session.add(entity)
        self._finish(commit)

        self.logger.info(f"Inserted {self.model_class.__name__} with ID: {self.primary_key_of(entity)}")
        return entity

    def add_range(self, entities: Iterable[T], commit: bool = False) -> List[T]:
        """
        Insert multiple entities at once

        Args:
            entities: The entities to insert
            commit: Whether to commit immediately

        Returns:
            List of inserted entities
        """
        entities = list(entities)
        self.session.add_all(entities)
        self._finish(commit)

        self.logger.info(f"Inserted {len(entities)} {self.model_class.__name__} entities")
        return entities

    def merge(self, entity: T, commit: bool = False) -> T:
        """
        Insert the entity if its key is not stored yet, otherwise copy its
        loaded attributes onto the stored row

        Args:
            entity: Transient, detached or persistent entity
            commit: Whether to commit immediately

        Returns:
            The persistent instance held by the session
        """
        existed = self.get_by_id(self.primary_key_of(entity)) is not None
        merged = self.session.merge(entity)
        self._finish(commit)

        action = "Updated" if existed else "Inserted"
        self.logger.info(f"{action} {self.model_class.__name__} with ID: {self.primary_key_of(merged)}")
        return merged

    def remove(self, entity: T, commit: bool = False) -> bool:
        """
        Delete the stored row with the entity's primary key

        Args:
            entity: The entity to delete (need not be attached to the session)
            commit: Whether to commit immediately

        Returns:
            True if deleted, False if not found
        """
        key = self.primary_key_of(entity)
        stored = self.get_by_id(key)
        if stored is None:
            self.logger.warning(f"{self.model_class.__name__} with ID {key} not found for deletion")
            return False

        self.session.delete(stored)
        self._finish(commit)

        self.logger.info(f"Deleted {self.model_class.__name__} with ID: {key}")
        return True

    def exists(self, id: Any) -> bool:
        """
        Check if entity exists by primary key

        Args:
            id: The primary key value to check

        Returns:
            True if exists, False otherwise
        """
        if id is None:
            return False
        return self.session.query(
            self.get_query().filter(self.key_column == id).exists()
        ).scalar()

    def count(self, **filters) -> int:
        """
        Count entities with optional filters

        Args:
            **filters: Optional filter criteria

        Returns:
            Count of entities
        """
        query = self.get_query()
        if filters:
            query = query.filter_by(**filters)
        return query.count()

    def flush(self) -> None:
        """
        Flush pending changes to database without committing
        """
        self.session.flush()

    def commit(self) -> None:
        """
        Commit current transaction
        """
        try:
            self.session.commit()
            self.logger.debug("Transaction committed successfully")
        except Exception as e:
            self.logger.error(f"Error committing transaction: {str(e)}")
            self.rollback()
            raise

    def rollback(self) -> None:
        """
        Rollback current transaction
        """
        self.session.rollback()
        self.logger.info("Transaction rolled back")

    def _finish(self, commit: bool) -> None:
        if commit:
            self.commit()
        else:
            self.flush()
