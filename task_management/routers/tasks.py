import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, Response, status
from fastapi.responses import JSONResponse

from ..config import MAX_ID, MAX_TASKS_PAGE_SIZE
from ..dependencies import get_task_repository, get_task_validator
from ..errors import error_response, unwrap
from ..mappers import to_task_details, to_task_entity, to_user_entity
from ..repositories import TaskRepository
from ..schemas.task import TaskDetails, TaskPayload
from ..schemas.user import UserReference
from ..validators import TaskValidator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

MISSING_USER_MESSAGE = "User ID cannot be null or empty."


def _validation_failed(validator: TaskValidator, payload: TaskPayload) -> Optional[JSONResponse]:
    result = validator.validate(payload)
    if result.is_valid:
        return None
    logger.warning("Rejected task payload: %s", result.to_list())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.to_list())


@router.post("", response_model=TaskDetails, status_code=status.HTTP_201_CREATED)
def create_task(
    payload: TaskPayload,
    response: Response,
    tasks: TaskRepository = Depends(get_task_repository),
    validator: TaskValidator = Depends(get_task_validator),
):
    """Create a new task, owned by the unassigned user."""
    rejected = _validation_failed(validator, payload)
    if rejected is not None:
        return rejected

    task = tasks.create_task(to_task_entity(payload))
    logger.info("Task created: %r", task)
    response.headers["Location"] = f"{router.prefix}/{task.id}"
    return to_task_details(task)


@router.get("", response_model=List[TaskDetails])
def get_tasks(tasks: TaskRepository = Depends(get_task_repository)):
    """Get all tasks."""
    return [to_task_details(task) for task in tasks.list_tasks()]


@router.get("/Search", response_model=List[TaskDetails])
@router.get("/search", response_model=List[TaskDetails], include_in_schema=False)
def search_tasks(
    user_id: Optional[int] = Query(None, alias="userId", ge=-MAX_ID, le=MAX_ID),
    search_query: Optional[str] = Query(None, alias="searchQuery"),
    page_number: int = Query(1, alias="pageNumber", ge=1, le=MAX_ID),
    page_size: int = Query(10, alias="pageSize", ge=1, le=MAX_ID),
    tasks: TaskRepository = Depends(get_task_repository),
):
    """Search tasks by owner and title/description text, one page at a time.

    Page size is capped at MAX_TASKS_PAGE_SIZE whatever the client asks for.
    """
    page_size = min(page_size, MAX_TASKS_PAGE_SIZE)
    found = tasks.search_tasks(user_id, search_query, page_number, page_size)
    return [to_task_details(task) for task in found]


@router.get("/{task_id}", response_model=TaskDetails)
def get_task(
    task_id: int = Path(..., ge=-MAX_ID, le=MAX_ID),
    tasks: TaskRepository = Depends(get_task_repository),
):
    """Get a task by ID; 204 with no body if it does not exist."""
    task = tasks.get_task(task_id)
    if task is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return to_task_details(task)


@router.put("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_task(
    payload: TaskPayload,
    task_id: int = Path(..., ge=-MAX_ID, le=MAX_ID),
    tasks: TaskRepository = Depends(get_task_repository),
    validator: TaskValidator = Depends(get_task_validator),
):
    """Replace a task's fields."""
    rejected = _validation_failed(validator, payload)
    if rejected is not None:
        return rejected

    unwrap(tasks.update_task(task_id, payload))
    logger.info("Task %s updated", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int = Path(..., ge=-MAX_ID, le=MAX_ID),
    tasks: TaskRepository = Depends(get_task_repository),
):
    unwrap(tasks.delete_task(task_id))
    logger.info("Task with ID deleted: %s", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{task_id}/assign", response_model=TaskDetails)
def assign_task(
    task_id: int = Path(..., ge=-MAX_ID, le=MAX_ID),
    payload: Optional[UserReference] = Body(None),
    tasks: TaskRepository = Depends(get_task_repository),
):
    """Assign a task to an existing user."""
    if payload is None or payload.user_id is None:
        return error_response(status.HTTP_400_BAD_REQUEST, MISSING_USER_MESSAGE)

    user = to_user_entity(payload)
    task = unwrap(tasks.assign_task(task_id, user))
    logger.info("Task %s assigned to user %s", task_id, user.id)
    return to_task_details(task)
