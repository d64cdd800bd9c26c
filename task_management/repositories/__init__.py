from .base import TaskRepository, UserRepository
from .tasks import SqlTaskRepository
from .users import SqlUserRepository

__all__ = ["TaskRepository", "UserRepository", "SqlTaskRepository", "SqlUserRepository"]
