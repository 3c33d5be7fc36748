from datetime import timedelta
from typing import Optional

from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from socialnet import models
from socialnet.config import settings
from socialnet.crud import user as user_crud
from socialnet.database import get_db
from socialnet.utils.clock import utcnow


# ==========================
# AUTH CONFIG
# ==========================

# Tokens are issued by the auth service; this service only verifies them.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


# ==========================
# JWT TOKEN
# ==========================

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()

    if expires_delta:
        expire = utcnow() + expires_delta
    else:
        expire = utcnow() + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    to_encode.update({"exp": expire})

    encoded_jwt = jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )

    return encoded_jwt


# ==========================
# AUTH HELPERS
# ==========================

def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> models.User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM]
        )

        subject = payload.get("sub")
        if subject is None:
            raise credentials_exception
        user_id = int(subject)

    except (JWTError, ValueError):
        raise credentials_exception

    user = user_crud.get_user(db, user_id)

    if user is None:
        raise credentials_exception

    return user
