import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List
from app.models.household import Household
from app.models.transaction import Transaction
from app.models.user import User
from app.repositories.household_repository import HouseholdRepository
from app.repositories.transaction_repository import TransactionRepository
from app.repositories.user_repository import UserRepository
from app.schemas.household import HouseholdCreate, HouseholdUpdate
from app.core.exception import (
    ResourceNotFoundException,
    ForeignKeyNotEnteredException,
    DeleteIntegrityViolationException,
    DuplicateResourceException,
    BadRequestException,
)

logger = logging.getLogger(__name__)

HOUSEHOLD_BODY = "{name, totalBalance}"


class HouseholdService:
    """Service layer for household operations."""

    def __init__(self, db: Session):
        self.db = db
        self.household_repo = HouseholdRepository(db)
        self.user_repo = UserRepository(db)
        self.transaction_repo = TransactionRepository(db)

    def find_all(self) -> List[Household]:
        """Get all households."""
        return self.household_repo.get_all()

    def find_by_id(self, household_id: int) -> Household:
        """
        Get a household by ID.

        Raises:
            ResourceNotFoundException: If household not found
        """
        household = self.household_repo.get(household_id)
        if not household:
            raise ResourceNotFoundException("Household", household_id)
        return household

    def find_by_invitation_code(self, invitation_code: str) -> Household:
        """
        Get a household by its invitation code.

        Raises:
            ResourceNotFoundException: If no household carries the code
        """
        household = self.household_repo.get_by_invitation_code(invitation_code)
        if not household:
            raise ResourceNotFoundException("Household", invitation_code, field="code")
        return household

    def create(self, data: HouseholdCreate) -> Household:
        """
        Create a new household.

        An invitation code is generated when the request does not bring one.

        Raises:
            DuplicateResourceException: If the supplied invitation code is taken
            ForeignKeyNotEnteredException: If the store rejects the write
        """
        if data.invitation_code is not None:
            if self.household_repo.invitation_code_exists(data.invitation_code):
                raise DuplicateResourceException("Household", data.invitation_code)
            invitation_code = data.invitation_code
        else:
            invitation_code = self.household_repo.generate_invitation_code()

        household = Household(
            name=data.name,
            total_balance=data.total_balance,
            invitation_code=invitation_code,
        )

        try:
            household = self.household_repo.create(household)
        except IntegrityError as e:
            logger.warning("Household rejected by the store: %s", e.orig)
            raise ForeignKeyNotEnteredException(HOUSEHOLD_BODY)

        logger.info("Created household %s", household.id)
        return household

    def update(self, household_id: int, data: HouseholdUpdate) -> Household:
        """
        Replace the details of an existing household.

        Raises:
            ResourceNotFoundException: If household not found
            DuplicateResourceException: If the new invitation code is taken
            ForeignKeyNotEnteredException: If the store rejects the write
        """
        household = self.find_by_id(household_id)

        if data.invitation_code is not None and self.household_repo.invitation_code_exists(
            data.invitation_code, exclude_id=household_id
        ):
            raise DuplicateResourceException("Household", data.invitation_code)

        household.name = data.name
        household.total_balance = data.total_balance
        if data.invitation_code is not None:
            household.invitation_code = data.invitation_code

        try:
            return self.household_repo.save(household)
        except IntegrityError as e:
            logger.warning("Household %s update rejected by the store: %s", household_id, e.orig)
            raise ForeignKeyNotEnteredException(HOUSEHOLD_BODY)

    def delete_by_id(self, household_id: int) -> None:
        """
        Delete a household.

        Members and transactions are never removed along with it; the store
        refuses the delete while any of them still reference the household.

        Raises:
            ResourceNotFoundException: If household not found
            DeleteIntegrityViolationException: If members or transactions remain
        """
        household = self.find_by_id(household_id)
        try:
            self.household_repo.delete(household)
        except IntegrityError as e:
            logger.warning("Household %s delete blocked: %s", household_id, e.orig)
            raise DeleteIntegrityViolationException(
                "Cannot delete household: "
                "Must Delete all Transactions or/and the all Members leaves the household"
            )
        logger.info("Deleted household %s", household_id)

    def find_all_members(self, household_id: int) -> List[User]:
        """Get the members of a household."""
        return self.find_by_id(household_id).members

    def find_all_transactions(self, household_id: int) -> List[Transaction]:
        """Get the transactions booked against a household."""
        self.find_by_id(household_id)
        return self.transaction_repo.get_by_household(household_id)

    def add_member(self, household_id: int, member_id: int) -> None:
        """
        Move a user into a household.

        Both sides of the membership are updated and committed together; a
        user who is already a member stays listed once.

        Raises:
            ResourceNotFoundException: If household or user not found
        """
        household = self.find_by_id(household_id)
        member = self._get_member(member_id)

        previous = member.household
        if previous is not None and previous is not household and member in previous.members:
            previous.members.remove(member)

        member.household = household
        if member not in household.members:
            household.members.append(member)

        self.household_repo.commit()
        logger.info("User %s joined household %s", member_id, household_id)

    def delete_member(self, household_id: int, member_id: int) -> None:
        """
        Remove a user from a household.

        Raises:
            ResourceNotFoundException: If household or user not found
            BadRequestException: If the user is not a member of the household
        """
        household = self.find_by_id(household_id)
        member = self._get_member(member_id)

        if member.household_id != household.id:
            raise BadRequestException(
                f"User {member_id} is not a member of household {household_id}"
            )

        member.household = None
        if member in household.members:
            household.members.remove(member)

        self.household_repo.commit()
        logger.info("User %s left household %s", member_id, household_id)

    def regenerate_invitation_code(self, household_id: int) -> str:
        """Assign a fresh invitation code to the household and return it."""
        household = self.find_by_id(household_id)
        household.invitation_code = self.household_repo.generate_invitation_code()
        self.household_repo.save(household)
        return household.invitation_code

    def _get_member(self, member_id: int) -> User:
        member = self.user_repo.get(member_id)
        if not member:
            raise ResourceNotFoundException("User", member_id)
        return member
