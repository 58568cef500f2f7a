from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.dependencies import get_role_service
from app.schemas.role import RoleCreate, RoleUpdate, RoleResponse
from app.services.role_service import RoleService

router = APIRouter()


@router.get("", response_model=List[RoleResponse])
async def get_roles(service: RoleService = Depends(get_role_service)):
    return service.find_all()


@router.get("/{role_id}", response_model=RoleResponse)
async def get_role(role_id: int, service: RoleService = Depends(get_role_service)):
    return service.find_by_id(role_id)


@router.post("", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
async def create_role(role_data: RoleCreate, service: RoleService = Depends(get_role_service)):
    return service.create(role_data)


@router.put("/{role_id}", response_model=RoleResponse)
async def update_role(
    role_id: int,
    role_data: RoleUpdate,
    service: RoleService = Depends(get_role_service),
):
    return service.update(role_id, role_data)


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_role(role_id: int, service: RoleService = Depends(get_role_service)):
    """Delete a role that no user holds anymore."""
    service.delete_by_id(role_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
