from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from watertrack.models import User
from watertrack.schemas.user_schemas import RegisterRequest, LoginRequest, UpdateProfileRequest
from watertrack.utils.crypto import hash_password, check_password, issue_token
from watertrack.utils.logging_utils import get_logger

logger = get_logger("users")


def user_to_dict(user: User):
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
    }


def _auth_response(user: User):
    return {**user_to_dict(user), "token": issue_token(user.id)}


def register_user(db: Session, req: RegisterRequest):
    email = req.email.lower()

    exists = db.query(User).filter_by(email=email).first()
    if exists:
        raise HTTPException(status_code=400, detail="Email already registered")

    new_user = User(name=req.name, email=email, password_hash=hash_password(req.password))

    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with another registration for the same email
        db.rollback()
        raise HTTPException(status_code=400, detail="Email already registered")
    db.refresh(new_user)

    logger.info(f"Registered user {new_user.id}")
    return _auth_response(new_user)


def login_user(db: Session, req: LoginRequest):
    user = db.query(User).filter_by(email=req.email.lower()).first()

    # Same answer for unknown email and wrong password
    if not user or not check_password(req.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return _auth_response(user)


def get_profile(db: Session, user_id: int):
    user = db.query(User).filter_by(id=user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user_to_dict(user)


def update_profile(db: Session, user_id: int, req: UpdateProfileRequest):
    user = db.query(User).filter_by(id=user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    if req.name:
        user.name = req.name

    if req.email:
        email = req.email.lower()
        taken = db.query(User).filter(User.email == email, User.id != user_id).first()
        if taken:
            raise HTTPException(status_code=400, detail="Email already registered")
        user.email = email

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail="Email already registered")
    db.refresh(user)

    return user_to_dict(user)
