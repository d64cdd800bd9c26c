from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional

from ..config import MAX_ID


class UserCreate(BaseModel):
    username: str = Field(..., max_length=50)
    email: EmailStr

    @field_validator("username")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username is required")
        return value


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class UserReference(BaseModel):
    """Owner reference sent to the assign endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[int] = Field(None, alias="userId", ge=-MAX_ID, le=MAX_ID)
    username: Optional[str] = None
    email: Optional[str] = None
