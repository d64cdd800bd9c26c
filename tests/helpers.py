from datetime import datetime, timedelta, timezone


def tomorrow() -> str:
    return (datetime.now(timezone.utc) + timedelta(days=1)).isoformat()


def yesterday() -> str:
    return (datetime.now(timezone.utc) - timedelta(days=1)).isoformat()


def task_payload(**overrides) -> dict:
    payload = {
        "title": "T",
        "description": "D",
        "dueDate": tomorrow(),
        "priority": "Medium",
        "status": "Open",
    }
    payload.update(overrides)
    return payload
