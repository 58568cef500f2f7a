from decimal import Decimal
from sqlalchemy import String, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, TYPE_CHECKING
from app.models.base import BaseModel

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.transaction import Transaction


class Household(BaseModel):
    """
    Household model: a shared budgeting unit.
    A household has members and transactions and is joined through its invitation code.
    """

    __tablename__ = "households"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    total_balance: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    # Invitation code for joining household
    invitation_code: Mapped[str] = mapped_column(
        String(20), unique=True, index=True, nullable=False
    )

    # Relationships
    # passive_deletes="all": the ORM never nulls out children, the store blocks the delete
    members: Mapped[List["User"]] = relationship(
        "User",
        back_populates="household",
        passive_deletes="all",
        order_by="User.id",
        lazy="selectin",
    )

    transactions: Mapped[List["Transaction"]] = relationship(
        "Transaction",
        back_populates="household",
        passive_deletes="all",
        order_by="Transaction.id",
        lazy="select",
    )
