import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from ..config import MAX_ID
from ..dependencies import get_user_repository
from ..errors import DomainError, ErrorKind, unwrap
from ..mappers import to_user_entity, to_user_read
from ..repositories import UserRepository
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    response: Response,
    users: UserRepository = Depends(get_user_repository),
):
    """Register a user that tasks can be assigned to."""
    user = unwrap(users.create_user(to_user_entity(payload)))
    logger.info("User created: %s (%s)", user.username, user.id)
    response.headers["Location"] = f"{router.prefix}/{user.id}"
    return to_user_read(user)


@router.get("", response_model=List[UserRead])
def get_users(users: UserRepository = Depends(get_user_repository)):
    return [to_user_read(user) for user in users.list_users()]


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int = Path(..., ge=-MAX_ID, le=MAX_ID),
    users: UserRepository = Depends(get_user_repository),
):
    user = users.get_user(user_id)
    if user is None:
        raise DomainError(ErrorKind.NOT_FOUND, f"User with Id {user_id} not found.")
    return to_user_read(user)
