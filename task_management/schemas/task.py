from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime, timezone
from typing import Optional

from ..models import Priority, Status


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Aware UTC datetime; naive values are taken to already be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _from_ordinal(enum_cls, value):
    # Clients may send the enum ordinal (0..n) instead of the display name
    if isinstance(value, int) and not isinstance(value, bool):
        members = list(enum_cls)
        if 0 <= value < len(members):
            return members[value]
        raise ValueError(f"{value} is not a valid {enum_cls.__name__.lower()}")
    return value


class TaskPayload(BaseModel):
    """Task fields submitted on create and update.

    Every field is optional at the schema level so that missing values are
    reported by ``TaskValidator`` as a list of failures rather than rejected
    one at a time.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = Field(None, alias="dueDate")
    priority: Optional[Priority] = None
    status: Optional[Status] = None

    @field_validator("due_date")
    @classmethod
    def _to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    @field_validator("priority", mode="before")
    @classmethod
    def _priority_ordinal(cls, value):
        return _from_ordinal(Priority, value)

    @field_validator("status", mode="before")
    @classmethod
    def _status_ordinal(cls, value):
        return _from_ordinal(Status, value)


class UserSummary(BaseModel):
    """Owner info embedded in task details."""
    username: str
    email: str


class TaskDetails(BaseModel):
    """Task as returned by the API, with enum names and the owner embedded."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str
    due_date: datetime = Field(..., alias="dueDate")
    priority: str
    status: str
    assigned_user: Optional[UserSummary] = Field(None, alias="assignedUser")
