from datetime import datetime, timedelta, timezone

import pytest

from task_management.models import Priority, Status
from task_management.schemas.task import TaskPayload
from task_management.validators import TaskValidator

NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
def validator():
    return TaskValidator(clock=lambda: NOW)


def make_payload(**overrides):
    data = {
        "title": "Write report",
        "description": "Quarterly numbers",
        "due_date": NOW + timedelta(hours=1),
        "priority": Priority.HIGH,
        "status": Status.OPEN,
    }
    data.update(overrides)
    return TaskPayload(**data)


def test_valid_payload(validator):
    result = validator.validate(make_payload())
    assert result.is_valid
    assert result.to_list() == []


def test_due_date_equal_to_now_is_accepted(validator):
    assert validator.validate(make_payload(due_date=NOW)).is_valid


def test_all_missing_fields_reported_in_order(validator):
    result = validator.validate(TaskPayload())

    assert not result.is_valid
    assert result.to_list() == [
        {"field": "title", "message": "Title is required"},
        {"field": "description", "message": "Description is required"},
        {"field": "dueDate", "message": "Due date is required"},
        {"field": "priority", "message": "Priority is required"},
        {"field": "status", "message": "Status is required"},
    ]


@pytest.mark.parametrize("title", ["", "   "])
def test_blank_title_is_rejected(validator, title):
    result = validator.validate(make_payload(title=title))
    assert [e.field for e in result.errors] == ["title"]


def test_past_due_date_is_rejected(validator):
    result = validator.validate(make_payload(due_date=NOW - timedelta(seconds=1)))
    assert result.to_list() == [{"field": "dueDate", "message": "Due date cannot be in the past"}]


def test_failures_are_collected_not_short_circuited(validator):
    result = validator.validate(make_payload(description="", due_date=NOW - timedelta(days=3), status=None))
    assert [e.field for e in result.errors] == ["description", "dueDate", "status"]


def test_payload_accepts_enum_ordinals_and_aware_dates():
    payload = TaskPayload.model_validate(
        {"title": "x", "description": "y", "dueDate": "2030-05-01T12:00:00+02:00", "priority": 2, "status": 3}
    )
    assert payload.priority is Priority.MEDIUM
    assert payload.status is Status.DONE
    assert payload.due_date == datetime(2030, 5, 1, 10, 0, 0, tzinfo=timezone.utc)
    assert payload.due_date.utcoffset() == timedelta(0)


def test_payload_treats_naive_dates_as_utc():
    payload = TaskPayload.model_validate({"dueDate": "2030-05-01T12:00:00"})

    assert payload.due_date == datetime(2030, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_naive_clock_is_compared_as_utc():
    validator = TaskValidator(clock=lambda: NOW.replace(tzinfo=None))

    assert not validator.validate(make_payload(due_date=NOW - timedelta(minutes=1))).is_valid
    assert validator.validate(make_payload(due_date=NOW + timedelta(minutes=1))).is_valid


def test_payload_rejects_unknown_enum_value():
    with pytest.raises(ValueError):
        TaskPayload.model_validate({"priority": "Urgent"})
    with pytest.raises(ValueError):
        TaskPayload.model_validate({"status": 7})
