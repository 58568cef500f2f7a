from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.dependencies import get_user_service
from app.schemas.transaction import TransactionResponse
from app.schemas.user import UserCreate, UserUpdate, UserResponse
from app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def get_all_users(
    skip: int = 0,
    limit: int = 100,
    service: UserService = Depends(get_user_service),
):
    """Get all users (paginated)."""
    return service.find_all(skip=skip, limit=limit)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return service.find_by_id(user_id)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_data: UserCreate, service: UserService = Depends(get_user_service)):
    """
    Create a user inside an existing household.

    Returns:
        UserResponse: the stored user
    """
    return service.create(user_data)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    return service.update(user_id, user_data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """
    Delete a user.

    Refused while the user still has transactions.
    """
    service.delete_by_id(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/transactions", response_model=List[TransactionResponse])
async def get_user_transactions(user_id: int, service: UserService = Depends(get_user_service)):
    return service.find_all_transactions(user_id)
