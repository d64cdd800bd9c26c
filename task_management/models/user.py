from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List

UNASSIGNED_USER_ID = -1
UNASSIGNED_USER_NAME = "Not Assigned"


class User(SQLModel, table=True):
    """User that tasks can be assigned to.

    The row with id -1 is the sentinel owner meaning "nobody".
    """
    __tablename__ = "Users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=50, unique=True, index=True)
    email: str = Field(unique=True, index=True)

    # Relationship to tasks
    tasks: List["Task"] = Relationship(back_populates="owner")
