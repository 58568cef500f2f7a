from fastapi import Depends
from sqlalchemy.orm import Session

from .database import get_db
from .services.household_service import HouseholdService
from .services.role_service import RoleService
from .services.transaction_service import TransactionService
from .services.user_service import UserService


def get_household_service(db: Session = Depends(get_db)) -> HouseholdService:
    """
    Dependency providing a HouseholdService bound to the request's session.

    Example:
        @router.get("/{household_id}")
        async def get_household(household_id: int, service: HouseholdService = Depends(get_household_service)):
            return service.find_by_id(household_id)
    """
    return HouseholdService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_role_service(db: Session = Depends(get_db)) -> RoleService:
    return RoleService(db)


def get_transaction_service(db: Session = Depends(get_db)) -> TransactionService:
    return TransactionService(db)
