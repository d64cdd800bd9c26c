"""Conversions between API schemas and database models. No I/O here."""
from .models import Task, User
from .schemas.task import TaskDetails, TaskPayload, UserSummary, as_utc
from .schemas.user import UserCreate, UserRead, UserReference


def to_task_entity(payload: TaskPayload) -> Task:
    # id and owner are left to the database defaults
    return Task(
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date,
        priority=payload.priority,
        status=payload.status,
    )


def to_task_details(task: Task) -> TaskDetails:
    owner = task.owner
    return TaskDetails(
        id=task.id,
        title=task.title,
        description=task.description,
        # SQLite hands stored datetimes back without tzinfo
        due_date=as_utc(task.due_date),
        priority=task.priority.value,
        status=task.status.value,
        assigned_user=UserSummary(username=owner.username, email=owner.email) if owner else None,
    )


def to_user_entity(payload) -> User:
    """Build a detached ``User`` from a create payload or an owner reference."""
    if isinstance(payload, UserReference):
        return User(id=payload.user_id, username=payload.username, email=payload.email)
    if isinstance(payload, UserCreate):
        return User(username=payload.username, email=str(payload.email))
    raise TypeError(f"Cannot map {type(payload).__name__} to User")


def to_user_read(user: User) -> UserRead:
    return UserRead(id=user.id, username=user.username, email=user.email)
