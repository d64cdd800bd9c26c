from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime
from typing import Optional

from .enums import Priority, Status
from .user import UNASSIGNED_USER_ID


class Task(SQLModel, table=True):
    """A tracked work item.

    Every task points at exactly one owner; new tasks start out owned by the
    sentinel "Not Assigned" user.
    """
    __tablename__ = "Tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: str
    due_date: datetime
    priority: Priority = Field(default=Priority.NONE)
    status: Status = Field(default=Status.NONE)
    user_id: int = Field(default=UNASSIGNED_USER_ID, foreign_key="Users.id", index=True)

    # Relationship to the owning user
    owner: Optional["User"] = Relationship(back_populates="tasks")

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}', status='{self.status}')>"
