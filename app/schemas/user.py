from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class UserBase(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    role_id: Optional[int] = None
    household_id: Optional[int] = None


class UserCreate(UserBase):
    pass


class UserUpdate(UserBase):
    pass


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    role_id: int
    household_id: Optional[int] = None
