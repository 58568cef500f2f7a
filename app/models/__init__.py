from app.models.base import Base, BaseModel
from app.models.role import Role
from app.models.household import Household
from app.models.user import User
from app.models.transaction import Transaction

__all__ = [
    # Base
    "Base",
    "BaseModel",
    # Role
    "Role",
    # Household
    "Household",
    # User
    "User",
    # Transaction
    "Transaction",
]
