from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.schemas.household import Money


class TransactionCreate(BaseModel):
    amount: Optional[Decimal] = None
    description: Optional[str] = Field(None, max_length=255)
    transaction_date: Optional[datetime] = None
    user_id: Optional[int] = None


class TransactionUpdate(BaseModel):
    """Only provided fields are changed; the owning user is fixed."""
    amount: Optional[Decimal] = None
    description: Optional[str] = Field(None, max_length=255)
    transaction_date: Optional[datetime] = None


class TransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: Money
    description: Optional[str] = None
    transaction_date: datetime
    user_id: int
    household_id: int
