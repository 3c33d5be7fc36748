from typing import Optional

from sqlalchemy.orm import Session
from socialnet import models


def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def create_user(
    db: Session,
    *,
    username: str,
    email: str,
    display_name: Optional[str] = None,
    avatar_url: Optional[str] = None,
    user_id: Optional[int] = None,
) -> models.User:
    """Insert a directory row; used for seeding and tests."""
    user = models.User(
        id=user_id,
        username=username,
        email=email,
        display_name=display_name or username,
        avatar_url=avatar_url,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
