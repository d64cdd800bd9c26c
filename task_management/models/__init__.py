from .enums import Priority, Status
from .user import User, UNASSIGNED_USER_ID, UNASSIGNED_USER_NAME
from .task import Task

# Export all models for easy importing
__all__ = ["Priority", "Status", "Task", "User", "UNASSIGNED_USER_ID", "UNASSIGNED_USER_NAME"]
