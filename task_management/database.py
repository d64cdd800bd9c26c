from contextlib import contextmanager

from sqlmodel import SQLModel, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from .config import DATABASE_URL, SQL_ECHO

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task, User  # noqa: F401


def _is_in_memory(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def _create_engine(url: str = DATABASE_URL):
    if url.startswith("sqlite"):
        kwargs = {}
        if _is_in_memory(url):
            # every connection to :memory: is a new database; share one
            kwargs["poolclass"] = StaticPool
        return create_engine(
            url,
            echo=SQL_ECHO,
            connect_args={"check_same_thread": False},
            **kwargs,
        )

    # Postgres: no pooling for serverless hosts, pre-ping stale connections
    return create_engine(
        url,
        echo=SQL_ECHO,
        pool_pre_ping=True,
        poolclass=NullPool,
    )


engine = _create_engine()

SessionLocal = sessionmaker(autoflush=False, bind=engine)


def get_db():
    """Dependency to get a request-scoped database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_session():
    """Get a database session (context manager style).

    For use outside of FastAPI dependencies, e.g. the startup seed:
        with get_session() as session:
            seed_database(session)
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_tables():
    """Create all database tables."""
    SQLModel.metadata.create_all(bind=engine)


def drop_tables():
    """Drop all database tables."""
    SQLModel.metadata.drop_all(bind=engine)
