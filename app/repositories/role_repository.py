from sqlalchemy.orm import Session
from typing import Optional
from app.models.role import Role
from app.repositories.repository import BaseRepository


class RoleRepository(BaseRepository[Role]):
    """Repository for Role operations."""

    def __init__(self, db: Session):
        super().__init__(Role, db)

    def get_by_name(self, name: str) -> Optional[Role]:
        return self.db.query(Role).filter(Role.name == name).first()
