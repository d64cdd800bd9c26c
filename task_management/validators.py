from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional

from .schemas.task import TaskPayload, as_utc


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ValidationFailure:
    field: str
    message: str


@dataclass
class ValidationResult:
    errors: List[ValidationFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_list(self) -> List[dict]:
        return [{"field": e.field, "message": e.message} for e in self.errors]


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class TaskValidator:
    """Checks a task payload before it is persisted.

    All rules run; every failure is reported, in field order.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._clock = clock

    def validate(self, payload: TaskPayload) -> ValidationResult:
        result = ValidationResult()

        def fail(field_name: str, message: str) -> None:
            result.errors.append(ValidationFailure(field_name, message))

        if _blank(payload.title):
            fail("title", "Title is required")
        if _blank(payload.description):
            fail("description", "Description is required")

        if payload.due_date is None:
            fail("dueDate", "Due date is required")
        elif as_utc(payload.due_date) < as_utc(self._clock()):
            fail("dueDate", "Due date cannot be in the past")

        if payload.priority is None:
            fail("priority", "Priority is required")
        if payload.status is None:
            fail("status", "Status is required")

        return result
