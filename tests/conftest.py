import os

# Point the app at a private in-memory database before it is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DATABASE"] = "true"

import pytest
from fastapi.testclient import TestClient

from task_management.database import create_tables, drop_tables, get_session
from task_management.main import app
from task_management.seed import seed_database


@pytest.fixture()
def client():
    """TestClient over a freshly created and seeded database."""
    drop_tables()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def db_session():
    drop_tables()
    create_tables()
    with get_session() as session:
        seed_database(session)
        yield session
