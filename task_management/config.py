from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./task_management.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
SEED_DATABASE = os.getenv("SEED_DATABASE", "true").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

MAX_TASKS_PAGE_SIZE = 20

# Ids and page numbers beyond a 32-bit integer column are rejected as bad input
MAX_ID = 2_147_483_647

_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
