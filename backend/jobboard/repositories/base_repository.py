"""
Base Repository Pattern Implementation

Repositories work inside the caller's AsyncSession so that several
operations can share one transaction; the session owner commits or
rolls back.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, Type

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from jobboard.core.exceptions import DatabaseException
from jobboard.utils.logger import get_logger

ModelType = TypeVar("ModelType")

logger = get_logger(__name__)


class BaseRepository(Generic[ModelType], ABC):
    """Abstract base repository bound to one session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    @abstractmethod
    def model(self) -> Type[ModelType]:
        """Return the SQLAlchemy model class."""
        pass

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """Get entity by ID."""
        try:
            return await self.session.get(self.model, id)
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.model.__name__} by ID {id}: {e}")
            raise DatabaseException(f"Failed to load {self.model.__name__} {id}") from e

    async def commit(self) -> None:
        """Commit the session's transaction now instead of at request end."""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error committing {self.model.__name__} changes: {e}")
            await self.session.rollback()
            raise DatabaseException(f"Failed to save {self.model.__name__} changes") from e
