import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List
from app.models.transaction import Transaction
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserUpdate
from app.core.exception import (
    ResourceNotFoundException,
    ForeignKeyNotEnteredException,
    DeleteIntegrityViolationException,
)

logger = logging.getLogger(__name__)

USER_BODY = "{name, role_id, household_id}"


class UserService:
    """Service layer for user operations."""

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository(db)

    def find_all(self, skip: int = 0, limit: int = 100) -> List[User]:
        return self.user_repo.get_all(skip=skip, limit=limit)

    def find_by_id(self, user_id: int) -> User:
        user = self.user_repo.get(user_id)
        if not user:
            raise ResourceNotFoundException("User", user_id)
        return user

    def create(self, data: UserCreate) -> User:
        """
        Create a new user.

        A user always starts inside a household; role and household must
        reference existing rows, which the store checks.
        """
        if data.household_id is None:
            raise ForeignKeyNotEnteredException(USER_BODY)

        user = User(name=data.name, role_id=data.role_id, household_id=data.household_id)
        try:
            user = self.user_repo.create(user)
        except IntegrityError as e:
            logger.warning("User rejected by the store: %s", e.orig)
            raise ForeignKeyNotEnteredException(USER_BODY)

        logger.info("Created user %s in household %s", user.id, user.household_id)
        return user

    def update(self, user_id: int, data: UserUpdate) -> User:
        """Replace name, role and household of an existing user."""
        user = self.find_by_id(user_id)
        if data.household_id is None:
            raise ForeignKeyNotEnteredException(USER_BODY)

        user.name = data.name
        user.role_id = data.role_id
        user.household_id = data.household_id
        try:
            return self.user_repo.save(user)
        except IntegrityError as e:
            logger.warning("User %s update rejected by the store: %s", user_id, e.orig)
            raise ForeignKeyNotEnteredException(USER_BODY)

    def delete_by_id(self, user_id: int) -> None:
        user = self.find_by_id(user_id)
        try:
            self.user_repo.delete(user)
        except IntegrityError as e:
            logger.warning("User %s delete blocked: %s", user_id, e.orig)
            raise DeleteIntegrityViolationException(
                "Cannot delete user: Must Delete all Transactions of the user"
            )
        logger.info("Deleted user %s", user_id)

    def find_all_transactions(self, user_id: int) -> List[Transaction]:
        self.find_by_id(user_id)
        return self.user_repo.get_transactions(user_id)
