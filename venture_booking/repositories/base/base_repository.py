"""
Base repository with standardized lookups, persistence and transaction helpers.

Provides foundation for all domain repositories with type safety and
consistent error translation.
"""

from contextlib import contextmanager
from typing import Any, Generic, Iterator, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from venture_booking.core.exceptions import BaseAppException
from venture_booking.core.logging import get_logger
from venture_booking.models.base import BaseModel
from venture_booking.repositories.base.query_result import QueryResult

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Repository base with standardized operations.

    Repositories never commit on their own; the calling service owns the
    unit of work through `transaction()`.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Transaction Management ====================

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Transaction context manager with automatic rollback.

        Application exceptions are re-raised unchanged after rollback;
        driver errors are logged and re-raised as they are so callers can
        inspect them (e.g. IntegrityError).

        Usage:
            with repository.transaction():
                repository.add(entity)
        """
        try:
            yield self.db
            self.db.commit()
        except BaseAppException:
            self.db.rollback()
            raise
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Transaction rolled back on constraint violation: {e.orig}")
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Transaction rollback: {e}", exc_info=True)
            raise
        except Exception:
            self.db.rollback()
            raise

    # ==================== Read Operations ====================

    def get(self, entity_id: Any) -> QueryResult[ModelType]:
        """Find an entity by primary key."""
        return QueryResult.single_or_empty(self.db.get(self.model, entity_id))

    def exists(self, entity_id: Any) -> bool:
        return self.db.get(self.model, entity_id) is not None

    # ==================== Write Operations ====================

    def add(self, entity: ModelType, flush: bool = True) -> ModelType:
        """Stage a new entity; flushing assigns defaults and surfaces constraint errors."""
        self.db.add(entity)
        if flush:
            self.db.flush()
        return entity

    def delete(self, entity: ModelType) -> None:
        self.db.delete(entity)
        self.db.flush()
