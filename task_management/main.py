import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, LOG_LEVEL, SEED_DATABASE
from .database import create_tables, get_session
from .errors import register_exception_handlers
from .logging_setup import setup_logging
from .routers import tasks, users
from .seed import seed_database

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)


def prepare_database() -> None:
    """Create tables and seed the sentinel user."""
    create_tables()
    if SEED_DATABASE:
        with get_session() as session:
            seed_database(session)
    logger.info("Database ready")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # database drivers block, keep them off the event loop
    await run_in_threadpool(prepare_database)
    yield


# Create FastAPI app
app = FastAPI(
    title="Task Management API",
    description="Create, search and assign tasks to users",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(tasks.router)
app.include_router(users.router)


@app.get("/")
def read_root():
    return {"message": "Task Management API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
