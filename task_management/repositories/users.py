from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..errors import Err, ErrorKind, Ok, Result
from ..models import User


class SqlUserRepository:
    def __init__(self, db: Session):
        self._db = db

    def create_user(self, user: User) -> Result[User]:
        existing = (
            self._db.query(User)
            .filter(or_(User.username == user.username, User.email == user.email))
            .first()
        )
        if existing is not None:
            field = "Username" if existing.username == user.username else "Email"
            return Err(ErrorKind.INVALID_OPERATION, f"{field} is already in use.")

        self._db.add(user)
        try:
            self._db.commit()
        except IntegrityError:
            # lost a race with a concurrent insert of the same name/email
            self._db.rollback()
            return Err(ErrorKind.INVALID_OPERATION, "Username or email is already in use.")
        self._db.refresh(user)
        return Ok(user)

    def get_user(self, user_id: int) -> Optional[User]:
        return self._db.get(User, user_id)

    def list_users(self) -> List[User]:
        return self._db.query(User).order_by(User.id).all()
