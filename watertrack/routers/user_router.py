from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from watertrack.db import get_db
from watertrack.schemas.user_schemas import RegisterRequest, LoginRequest, UpdateProfileRequest
from watertrack.services import user_service
from watertrack.utils.auth import get_current_user_id

user_router = APIRouter(prefix="/api/users", tags=["users"])


@user_router.post("/register", status_code=201)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    return user_service.register_user(db, body)


@user_router.post("/login")
def login(body: LoginRequest, db: Session = Depends(get_db)):
    return user_service.login_user(db, body)


@user_router.get("/profile")
def get_profile(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return user_service.get_profile(db, user_id)


@user_router.patch("/profile")
def update_profile(body: UpdateProfileRequest, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return user_service.update_profile(db, user_id, body)
