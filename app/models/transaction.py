from datetime import datetime
from decimal import Decimal
from sqlalchemy import String, Numeric, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional, TYPE_CHECKING
from app.models.base import BaseModel

if TYPE_CHECKING:
    from app.models.household import Household
    from app.models.user import User


class Transaction(BaseModel):
    """A single income or expense entry, booked by a user against their household."""

    __tablename__ = "transactions"

    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, default=None)
    transaction_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    household_id: Mapped[int] = mapped_column(
        ForeignKey("households.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    user: Mapped["User"] = relationship("User", back_populates="transactions", lazy="selectin")
    household: Mapped["Household"] = relationship(
        "Household", back_populates="transactions", lazy="selectin"
    )

    def __repr__(self):
        return f"<Transaction amount={self.amount} user_id={self.user_id} household_id={self.household_id}>"
