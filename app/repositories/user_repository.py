from sqlalchemy.orm import Session
from typing import List
from app.models.transaction import Transaction
from app.models.user import User
from app.repositories.repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get_transactions(self, user_id: int) -> List[Transaction]:
        """Get all transactions booked by a user."""
        return (
            self.db.query(Transaction)
            .filter(Transaction.user_id == user_id)
            .order_by(Transaction.id)
            .all()
        )
