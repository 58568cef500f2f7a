from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from typing import Annotated, Optional

# Amounts are stored as exact decimals but travel as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class HouseholdBase(BaseModel):
    """
    Base household schema with common fields.

    ``name`` and ``total_balance`` are required by the store rather than by
    the schema, so a missing value surfaces as a rejected write (409).
    """
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, max_length=100, description="Household name")
    total_balance: Optional[Decimal] = Field(None, alias="totalBalance", description="Current balance")
    invitation_code: Optional[str] = Field(
        None, alias="invitationCode", min_length=4, max_length=20,
        description="Invitation code; generated when omitted"
    )


class HouseholdCreate(HouseholdBase):
    """Schema for creating a new household."""
    pass


class HouseholdUpdate(HouseholdBase):
    """Schema for replacing household details."""
    pass


class InvitationCodeResponse(BaseModel):
    invitation_code: str = Field(..., serialization_alias="invitationCode")


class HouseholdResponse(BaseModel):
    """Schema for household response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    total_balance: Money = Field(..., serialization_alias="totalBalance")
    invitation_code: str = Field(..., serialization_alias="invitationCode")
