"""Repository interfaces the routers depend on.

Routers receive these through FastAPI dependencies, so tests and alternative
storage backends can swap the SQL implementations out.
"""
from typing import List, Optional, Protocol

from ..errors import Result
from ..models import Task, User
from ..schemas.task import TaskPayload


class TaskRepository(Protocol):
    def create_task(self, task: Task) -> Task: ...

    def get_task(self, task_id: int) -> Optional[Task]: ...

    def list_tasks(self) -> List[Task]: ...

    def search_tasks(
        self,
        user_id: Optional[int],
        search_query: Optional[str],
        page_number: int,
        page_size: int,
    ) -> List[Task]: ...

    def update_task(self, task_id: int, payload: TaskPayload) -> Result[Task]: ...

    def delete_task(self, task_id: int) -> Result[None]: ...

    def assign_task(self, task_id: int, user: User) -> Result[Task]: ...

    def save_changes(self) -> bool: ...


class UserRepository(Protocol):
    def create_user(self, user: User) -> Result[User]: ...

    def get_user(self, user_id: int) -> Optional[User]: ...

    def list_users(self) -> List[User]: ...
