from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.dependencies import get_household_service
from app.schemas.household import (
    HouseholdCreate,
    HouseholdUpdate,
    HouseholdResponse,
    InvitationCodeResponse,
)
from app.schemas.transaction import TransactionResponse
from app.schemas.user import UserResponse
from app.services.household_service import HouseholdService

router = APIRouter()


@router.get("", response_model=List[HouseholdResponse])
async def get_households(service: HouseholdService = Depends(get_household_service)):
    """Get all households."""
    return service.find_all()


@router.get("/invitation/{invitation_code}", response_model=HouseholdResponse)
async def get_household_by_invitation_code(
    invitation_code: str,
    service: HouseholdService = Depends(get_household_service)
):
    """Look up a household by its invitation code."""
    return service.find_by_invitation_code(invitation_code)


@router.get("/{household_id}", response_model=HouseholdResponse)
async def get_household(
    household_id: int,
    service: HouseholdService = Depends(get_household_service)
):
    """Get household details."""
    return service.find_by_id(household_id)


@router.post("", response_model=HouseholdResponse, status_code=status.HTTP_201_CREATED)
async def create_household(
    household_data: HouseholdCreate,
    service: HouseholdService = Depends(get_household_service)
):
    """Create a new household."""
    return service.create(household_data)


@router.put("/{household_id}", response_model=HouseholdResponse)
async def update_household(
    household_id: int,
    household_data: HouseholdUpdate,
    service: HouseholdService = Depends(get_household_service)
):
    """Replace household details."""
    return service.update(household_id, household_data)


@router.delete("/{household_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_household(
    household_id: int,
    service: HouseholdService = Depends(get_household_service)
):
    """Delete a household. Members and transactions must be gone first."""
    service.delete_by_id(household_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{household_id}/invitation", response_model=InvitationCodeResponse)
async def regenerate_invitation_code(
    household_id: int,
    service: HouseholdService = Depends(get_household_service)
):
    """Generate a new invitation code for the household."""
    new_code = service.regenerate_invitation_code(household_id)
    return InvitationCodeResponse(invitation_code=new_code)


@router.get("/{household_id}/members", response_model=List[UserResponse])
async def get_members(
    household_id: int,
    service: HouseholdService = Depends(get_household_service)
):
    """Get all household members."""
    return service.find_all_members(household_id)


@router.post("/{household_id}/members/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def add_member(
    household_id: int,
    user_id: int,
    service: HouseholdService = Depends(get_household_service)
):
    """Move a user into the household."""
    service.add_member(household_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{household_id}/members/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_member(
    household_id: int,
    user_id: int,
    service: HouseholdService = Depends(get_household_service)
):
    """Remove a member from the household."""
    service.delete_member(household_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{household_id}/transactions", response_model=List[TransactionResponse])
async def get_household_transactions(
    household_id: int,
    service: HouseholdService = Depends(get_household_service)
):
    """Get the transactions booked against the household."""
    return service.find_all_transactions(household_id)
