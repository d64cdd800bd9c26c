#!/usr/bin/env python
"""Script to run the Task Management API server."""
import uvicorn

from task_management.config import HOST, PORT

if __name__ == "__main__":
    uvicorn.run(
        "task_management.main:app",
        host=HOST,
        port=PORT,
        reload=True,
    )
