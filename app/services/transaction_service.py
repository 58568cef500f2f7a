import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List
from app.models.transaction import Transaction
from app.repositories.transaction_repository import TransactionRepository
from app.repositories.user_repository import UserRepository
from app.schemas.transaction import TransactionCreate, TransactionUpdate
from app.core.exception import (
    ResourceNotFoundException,
    ForeignKeyNotEnteredException,
)

logger = logging.getLogger(__name__)

TRANSACTION_BODY = "{amount, user_id}"


class TransactionService:
    """Service layer for transaction operations."""

    def __init__(self, db: Session):
        self.db = db
        self.transaction_repo = TransactionRepository(db)
        self.user_repo = UserRepository(db)

    def find_all(self, skip: int = 0, limit: int = 100) -> List[Transaction]:
        return self.transaction_repo.get_all(skip=skip, limit=limit)

    def find_by_id(self, transaction_id: int) -> Transaction:
        transaction = self.transaction_repo.get(transaction_id)
        if not transaction:
            raise ResourceNotFoundException("Transaction", transaction_id)
        return transaction

    def create(self, data: TransactionCreate) -> Transaction:
        """
        Book a transaction for a user.

        The transaction is charged to the household the user belongs to at
        booking time, so the user must exist and be a household member.
        """
        user = self.user_repo.get(data.user_id) if data.user_id is not None else None
        if user is None or user.household_id is None:
            raise ForeignKeyNotEnteredException(TRANSACTION_BODY)

        transaction = Transaction(
            amount=data.amount,
            description=data.description,
            user_id=user.id,
            household_id=user.household_id,
        )
        if data.transaction_date is not None:
            transaction.transaction_date = data.transaction_date

        try:
            transaction = self.transaction_repo.create(transaction)
        except IntegrityError as e:
            logger.warning("Transaction rejected by the store: %s", e.orig)
            raise ForeignKeyNotEnteredException(TRANSACTION_BODY)

        logger.info("Booked transaction %s for user %s", transaction.id, user.id)
        return transaction

    def update(self, transaction_id: int, data: TransactionUpdate) -> Transaction:
        """Update transaction details. Only provided fields are changed."""
        transaction = self.find_by_id(transaction_id)

        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(transaction, key, value)

        try:
            return self.transaction_repo.save(transaction)
        except IntegrityError as e:
            logger.warning("Transaction %s update rejected by the store: %s", transaction_id, e.orig)
            raise ForeignKeyNotEnteredException(TRANSACTION_BODY)

    def delete_by_id(self, transaction_id: int) -> None:
        transaction = self.find_by_id(transaction_id)
        self.transaction_repo.delete(transaction)
        logger.info("Deleted transaction %s", transaction_id)
