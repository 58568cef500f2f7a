from sqlalchemy.orm import Session
from typing import Optional
from app.config import settings
from app.models.household import Household
from app.repositories.repository import BaseRepository
import secrets
import string


class HouseholdRepository(BaseRepository[Household]):
    """Repository for household operations."""

    def __init__(self, db: Session):
        super().__init__(Household, db)

    def get_by_invitation_code(self, code: str) -> Optional[Household]:
        """Find household by invitation code."""
        return self.db.query(Household).filter(Household.invitation_code == code).first()

    def invitation_code_exists(self, code: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether another household already carries the code."""
        query = self.db.query(Household).filter(Household.invitation_code == code)
        if exclude_id is not None:
            query = query.filter(Household.id != exclude_id)
        return query.count() > 0

    def generate_invitation_code(self) -> str:
        """
        Generate a unique invitation code.

        Returns:
            An uppercase alphanumeric code of INVITATION_CODE_LENGTH characters
        """
        alphabet = string.ascii_uppercase + string.digits
        while True:
            code = ''.join(secrets.choice(alphabet) for _ in range(settings.INVITATION_CODE_LENGTH))

            if not self.invitation_code_exists(code):
                return code
