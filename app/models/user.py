from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from typing import Optional, List, TYPE_CHECKING
from app.models.base import BaseModel

if TYPE_CHECKING:
    from app.models.household import Household
    from app.models.role import Role
    from app.models.transaction import Transaction


class User(BaseModel):
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    role_id: Mapped[int] = mapped_column(
        ForeignKey("roles.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    # Required when the user is created; emptied when the user leaves the household
    household_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("households.id", ondelete="RESTRICT"), nullable=True, index=True
    )

    # Relationships
    role: Mapped["Role"] = relationship("Role", back_populates="users", lazy="selectin")
    household: Mapped[Optional["Household"]] = relationship(
        "Household", back_populates="members", lazy="selectin"
    )
    transactions: Mapped[List["Transaction"]] = relationship(
        "Transaction",
        back_populates="user",
        passive_deletes="all",
        order_by="Transaction.id",
        lazy="select",
    )
