import pytest
from sqlalchemy.orm import Session
from app.core.exception import (
    DeleteIntegrityViolationException,
    DuplicateResourceException,
    ForeignKeyNotEnteredException,
    ResourceNotFoundException,
)
from app.models import Role
from app.schemas.role import RoleCreate, RoleUpdate
from app.services.role_service import RoleService


@pytest.mark.unit
class TestRoleService:
    """Unit tests for RoleService."""

    def test_create_and_find(self, db_session: Session):
        service = RoleService(db_session)

        role = service.create(RoleCreate(name="child", description="Pocket money only"))

        assert service.find_by_id(role.id).description == "Pocket money only"
        assert [r.name for r in service.find_all()] == ["child"]

    def test_create_duplicate_name(self, db_session: Session, test_role):
        with pytest.raises(DuplicateResourceException):
            RoleService(db_session).create(RoleCreate(name="parent"))

    def test_create_without_name(self, db_session: Session):
        with pytest.raises(ForeignKeyNotEnteredException):
            RoleService(db_session).create(RoleCreate(description="nameless"))

    def test_update(self, db_session: Session, test_role):
        role = RoleService(db_session).update(test_role.id, RoleUpdate(name="guardian"))

        assert role.name == "guardian"
        assert role.description is None

    def test_update_unknown(self, db_session: Session):
        with pytest.raises(ResourceNotFoundException):
            RoleService(db_session).update(8, RoleUpdate(name="guardian"))

    def test_delete_unused_role(self, db_session: Session, test_role):
        service = RoleService(db_session)

        service.delete_by_id(test_role.id)

        assert service.find_all() == []

    def test_delete_role_in_use(self, db_session: Session, test_user, test_role):
        service = RoleService(db_session)

        with pytest.raises(DeleteIntegrityViolationException):
            service.delete_by_id(test_role.id)

        assert service.find_by_id(test_role.id).name == "parent"

    def test_find_all_is_not_capped(self, db_session: Session):
        db_session.add_all([Role(name=f"role-{i}") for i in range(101)])
        db_session.commit()

        assert len(RoleService(db_session).find_all()) == 101
