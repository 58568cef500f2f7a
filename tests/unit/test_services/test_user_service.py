import pytest
from decimal import Decimal
from sqlalchemy.orm import Session
from app.core.exception import (
    DeleteIntegrityViolationException,
    ForeignKeyNotEnteredException,
    ResourceNotFoundException,
)
from app.models import Transaction
from app.schemas.user import UserCreate, UserUpdate
from app.services.user_service import UserService


@pytest.mark.unit
class TestUserService:
    """Unit tests for UserService."""

    def test_create_user(self, db_session: Session, test_role, test_household):
        user = UserService(db_session).create(
            UserCreate(name="Bob", role_id=test_role.id, household_id=test_household.id)
        )

        assert user.id is not None
        assert user.name == "Bob"
        assert user.role.name == "parent"
        assert user.household.name == "Smiths"

    def test_create_without_household(self, db_session: Session, test_role):
        with pytest.raises(ForeignKeyNotEnteredException) as exc_info:
            UserService(db_session).create(UserCreate(name="Bob", role_id=test_role.id))

        assert "{name, role_id, household_id}" in str(exc_info.value)

    def test_create_with_unknown_role(self, db_session: Session, test_household):
        service = UserService(db_session)

        with pytest.raises(ForeignKeyNotEnteredException):
            service.create(UserCreate(name="Bob", role_id=404, household_id=test_household.id))

        assert service.find_all() == []

    def test_create_with_unknown_household(self, db_session: Session, test_role):
        with pytest.raises(ForeignKeyNotEnteredException):
            UserService(db_session).create(UserCreate(name="Bob", role_id=test_role.id, household_id=404))

    def test_create_without_name(self, db_session: Session, test_role, test_household):
        with pytest.raises(ForeignKeyNotEnteredException):
            UserService(db_session).create(
                UserCreate(role_id=test_role.id, household_id=test_household.id)
            )

    def test_find_by_id_unknown(self, db_session: Session):
        with pytest.raises(ResourceNotFoundException) as exc_info:
            UserService(db_session).find_by_id(5)

        assert str(exc_info.value) == "User not found with id = 5"

    def test_update_user(self, db_session: Session, test_user, test_role, test_household):
        updated = UserService(db_session).update(
            test_user.id,
            UserUpdate(name="Alice Smith", role_id=test_role.id, household_id=test_household.id),
        )

        assert updated.name == "Alice Smith"

    def test_update_unknown_role_keeps_user(self, db_session: Session, test_user, test_household):
        service = UserService(db_session)

        with pytest.raises(ForeignKeyNotEnteredException):
            service.update(
                test_user.id, UserUpdate(name="Alice", role_id=999, household_id=test_household.id)
            )

        assert service.find_by_id(test_user.id).role_id == test_user.role_id

    def test_delete_user(self, db_session: Session, test_user):
        service = UserService(db_session)

        service.delete_by_id(test_user.id)

        with pytest.raises(ResourceNotFoundException):
            service.find_by_id(test_user.id)

    def test_delete_user_with_transactions(self, db_session: Session, test_user):
        db_session.add(
            Transaction(amount=Decimal("12.30"), user_id=test_user.id, household_id=test_user.household_id)
        )
        db_session.commit()
        service = UserService(db_session)

        with pytest.raises(DeleteIntegrityViolationException):
            service.delete_by_id(test_user.id)

        assert service.find_by_id(test_user.id).name == "Alice"

    def test_find_all_transactions(self, db_session: Session, test_user):
        db_session.add_all([
            Transaction(amount=Decimal("1"), user_id=test_user.id, household_id=test_user.household_id),
            Transaction(amount=Decimal("2"), user_id=test_user.id, household_id=test_user.household_id),
        ])
        db_session.commit()

        transactions = UserService(db_session).find_all_transactions(test_user.id)

        assert [t.amount for t in transactions] == [Decimal("1"), Decimal("2")]
