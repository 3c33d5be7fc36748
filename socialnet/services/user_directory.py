from typing import Optional

from sqlalchemy.orm import Session

from socialnet.crud import user as user_crud
from socialnet.models.user import User


class SqlUserDirectory:
    """UserDirectory backed by the shared users table."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> Optional[User]:
        return user_crud.get_user(self.db, user_id)
