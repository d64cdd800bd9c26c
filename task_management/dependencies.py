"""Per-request providers for the routers' collaborators.

Override these through ``app.dependency_overrides`` to swap implementations.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from .database import get_db
from .repositories import SqlTaskRepository, SqlUserRepository, TaskRepository, UserRepository
from .validators import TaskValidator


def get_task_repository(db: Session = Depends(get_db)) -> TaskRepository:
    return SqlTaskRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SqlUserRepository(db)


def get_task_validator() -> TaskValidator:
    return TaskValidator()
