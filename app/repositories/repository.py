from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Generic, Type, TypeVar, List, Optional
from app.models.base import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Base repository with common CRUD operations."""

    def __init__(self, model: Type[T], db: Session):
        """
        Initialize repository with model and database session.

        Args:
            model: The SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    def get(self, id: int) -> Optional[T]:
        """Get a single record by ID."""
        return self.db.get(self.model, id)

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        """Get all records, paginated only when a limit is given."""
        query = self.db.query(self.model).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def create(self, obj: T) -> T:
        """Create a new record."""
        self.db.add(obj)
        self.commit()
        self.db.refresh(obj)
        return obj

    def save(self, obj: T) -> T:
        """Persist pending changes on an already loaded record."""
        self.commit()
        self.db.refresh(obj)
        return obj

    def delete(self, obj: T) -> None:
        """Delete a record."""
        self.db.delete(obj)
        self.commit()

    def commit(self) -> None:
        """
        Commit the unit of work.

        Rolls the session back before re-raising, so a failed write leaves
        nothing half-applied.
        """
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
