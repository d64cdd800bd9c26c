from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from ..errors import Err, ErrorKind, Ok, Result
from ..models import Task, User
from ..schemas.task import TaskPayload


def _task_not_found(task_id: int) -> Err:
    return Err(ErrorKind.NOT_FOUND, f"Task with Id {task_id} not found.")


class SqlTaskRepository:
    """Task storage backed by a SQLAlchemy session.

    Every mutating call commits before it returns.
    """

    def __init__(self, db: Session):
        self._db = db

    def _find(self, task_id: int) -> Optional[Task]:
        return self._db.query(Task).filter(Task.id == task_id).first()

    def create_task(self, task: Task) -> Task:
        self._db.add(task)
        self._db.commit()
        self._db.refresh(task)
        return task

    def get_task(self, task_id: int) -> Optional[Task]:
        return (
            self._db.query(Task)
            .options(selectinload(Task.owner))
            .filter(Task.id == task_id)
            .first()
        )

    def list_tasks(self) -> List[Task]:
        return self._db.query(Task).options(selectinload(Task.owner)).all()

    def search_tasks(
        self,
        user_id: Optional[int],
        search_query: Optional[str],
        page_number: int,
        page_size: int,
    ) -> List[Task]:
        query = self._db.query(Task).options(selectinload(Task.owner))

        if user_id is not None:
            query = query.filter(Task.user_id == user_id)

        if search_query:
            search_query = search_query.strip()
            query = query.filter(
                or_(
                    Task.title.contains(search_query, autoescape=True),
                    Task.description.contains(search_query, autoescape=True),
                )
            )

        return (
            query.order_by(Task.title.asc())
            .offset(page_size * (page_number - 1))
            .limit(page_size)
            .all()
        )

    def update_task(self, task_id: int, payload: TaskPayload) -> Result[Task]:
        task = self._find(task_id)
        if task is None:
            return _task_not_found(task_id)

        if payload.title is None or payload.description is None:
            return Err(ErrorKind.INVALID_ARGUMENT, "Title and description must be provided.")

        task.title = payload.title
        task.description = payload.description
        task.status = payload.status
        task.due_date = payload.due_date
        task.priority = payload.priority

        self._db.commit()
        self._db.refresh(task)
        return Ok(task)

    def delete_task(self, task_id: int) -> Result[None]:
        task = self._find(task_id)
        if task is None:
            # nothing to delete is a rejected operation, not a missing resource
            return Err(ErrorKind.INVALID_OPERATION, f"Task with Id {task_id} not found.")

        self._db.delete(task)
        self._db.commit()
        return Ok(None)

    def assign_task(self, task_id: int, user: User) -> Result[Task]:
        task = self._find(task_id)
        if task is None:
            return _task_not_found(task_id)

        owner = self._db.get(User, user.id) if user.id is not None else None
        if owner is None:
            return Err(ErrorKind.NOT_FOUND, f"User with Id {user.id} not found.")

        task.owner = owner
        self._db.commit()
        self._db.refresh(task)
        return Ok(task)

    def save_changes(self) -> bool:
        """Commit pending changes; True if anything was pending."""
        db = self._db
        pending = bool(db.new or db.deleted) or any(db.is_modified(obj) for obj in db.dirty)
        db.commit()
        return pending
