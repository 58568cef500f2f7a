from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.dependencies import get_transaction_service
from app.schemas.transaction import TransactionCreate, TransactionUpdate, TransactionResponse
from app.services.transaction_service import TransactionService

router = APIRouter()


@router.get("", response_model=List[TransactionResponse])
async def get_transactions(
    skip: int = 0,
    limit: int = 100,
    service: TransactionService = Depends(get_transaction_service),
):
    return service.find_all(skip=skip, limit=limit)


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service),
):
    return service.find_by_id(transaction_id)


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction_data: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
):
    """Book a transaction for a user against the user's household."""
    return service.create(transaction_data)


@router.put("/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    transaction_id: int,
    transaction_data: TransactionUpdate,
    service: TransactionService = Depends(get_transaction_service),
):
    return service.update(transaction_id, transaction_data)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service),
):
    service.delete_by_id(transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
