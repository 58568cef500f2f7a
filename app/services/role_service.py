import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List
from app.models.role import Role
from app.repositories.role_repository import RoleRepository
from app.schemas.role import RoleCreate, RoleUpdate
from app.core.exception import (
    ResourceNotFoundException,
    ForeignKeyNotEnteredException,
    DeleteIntegrityViolationException,
    DuplicateResourceException,
)

logger = logging.getLogger(__name__)

ROLE_BODY = "{name}"


class RoleService:
    """Service layer for role operations."""

    def __init__(self, db: Session):
        self.db = db
        self.role_repo = RoleRepository(db)

    def find_all(self) -> List[Role]:
        return self.role_repo.get_all()

    def find_by_id(self, role_id: int) -> Role:
        role = self.role_repo.get(role_id)
        if not role:
            raise ResourceNotFoundException("Role", role_id)
        return role

    def create(self, data: RoleCreate) -> Role:
        if data.name is not None and self.role_repo.get_by_name(data.name):
            raise DuplicateResourceException("Role", data.name)

        role = Role(name=data.name, description=data.description)
        try:
            return self.role_repo.create(role)
        except IntegrityError as e:
            logger.warning("Role rejected by the store: %s", e.orig)
            raise ForeignKeyNotEnteredException(ROLE_BODY)

    def update(self, role_id: int, data: RoleUpdate) -> Role:
        role = self.find_by_id(role_id)
        if data.name is not None:
            existing = self.role_repo.get_by_name(data.name)
            if existing and existing.id != role_id:
                raise DuplicateResourceException("Role", data.name)

        role.name = data.name
        role.description = data.description
        try:
            return self.role_repo.save(role)
        except IntegrityError as e:
            logger.warning("Role %s update rejected by the store: %s", role_id, e.orig)
            raise ForeignKeyNotEnteredException(ROLE_BODY)

    def delete_by_id(self, role_id: int) -> None:
        """Delete a role; refused while any user still holds it."""
        role = self.find_by_id(role_id)
        try:
            self.role_repo.delete(role)
        except IntegrityError as e:
            logger.warning("Role %s delete blocked: %s", role_id, e.orig)
            raise DeleteIntegrityViolationException(
                "Cannot delete role: Must reassign all Users holding the role"
            )
