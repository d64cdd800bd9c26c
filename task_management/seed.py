import logging
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.orm import Session

from .models import Priority, Status, Task, User, UNASSIGNED_USER_ID, UNASSIGNED_USER_NAME

logger = logging.getLogger(__name__)

SEED_TASKS = (
    {
        "id": 1,
        "title": "Task 1",
        "description": "Description for Task 1",
        "due_date": datetime(2025, 3, 8, 10, 32, 32, 507000, tzinfo=timezone.utc),
        "priority": Priority.MEDIUM,
        "status": Status.NONE,
    },
    {
        "id": 2,
        "title": "Task 2",
        "description": "Description for Task 2",
        "due_date": datetime(2025, 3, 15, 10, 32, 32, 508000, tzinfo=timezone.utc),
        "priority": Priority.HIGH,
        "status": Status.NONE,
    },
)


def seed_database(db: Session) -> bool:
    """Insert the unassigned sentinel user and the example tasks.

    Rows are keyed by fixed ids and skipped when already present, so running
    this on every startup is harmless. Returns True if anything was inserted.
    """
    inserted = False

    if db.get(User, UNASSIGNED_USER_ID) is None:
        db.add(User(id=UNASSIGNED_USER_ID, username=UNASSIGNED_USER_NAME, email=UNASSIGNED_USER_NAME))
        inserted = True

    for data in SEED_TASKS:
        if db.get(Task, data["id"]) is None:
            db.add(Task(user_id=UNASSIGNED_USER_ID, **data))
            inserted = True

    if not inserted:
        return False

    db.commit()
    if db.get_bind().dialect.name == "postgresql":
        # explicit ids don't advance the serial sequence
        db.execute(text("""SELECT setval(pg_get_serial_sequence('"Tasks"', 'id'), (SELECT MAX(id) FROM "Tasks"))"""))
        db.commit()
    logger.info("Seeded database with sentinel user and %d example tasks", len(SEED_TASKS))
    return True
