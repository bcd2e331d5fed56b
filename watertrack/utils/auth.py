from typing import Optional
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session
from watertrack.db import get_db
from watertrack.models import User
from watertrack.utils.crypto import read_token


def _unauthorized():
    return HTTPException(
        status_code=401,
        detail="Not authorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user_id(authorization: Optional[str] = Header(None), db: Session = Depends(get_db)) -> int:
    """
    Resolve the Authorization header to the id of an existing user.

    Expected format: "Bearer <token>". Every failure (missing header, bad
    format, expired or tampered token, user gone) gets the same 401.
    """
    if not authorization:
        raise _unauthorized()

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise _unauthorized()

    user_id = read_token(parts[1])
    if user_id is None:
        raise _unauthorized()

    exists = db.query(User.id).filter_by(id=user_id).first()
    if not exists:
        raise _unauthorized()

    return user_id
