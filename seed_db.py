from task_management.database import create_tables, get_session
from task_management.seed import seed_database

# Create tables if not exist
create_tables()

with get_session() as db:
    if seed_database(db):
        print("Seeded unassigned user and example tasks")
    else:
        print("Database already seeded")
