from sqlalchemy.orm import Session
from typing import List
from app.models.transaction import Transaction
from app.repositories.repository import BaseRepository


class TransactionRepository(BaseRepository[Transaction]):
    """Repository for transaction operations."""

    def __init__(self, db: Session):
        super().__init__(Transaction, db)

    def get_by_household(self, household_id: int) -> List[Transaction]:
        """Get all transactions booked against a household, newest first."""
        return (
            self.db.query(Transaction)
            .filter(Transaction.household_id == household_id)
            .order_by(Transaction.transaction_date.desc(), Transaction.id.desc())
            .all()
        )
