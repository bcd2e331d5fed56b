from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from watertrack.db import get_db
from watertrack.schemas.water_schemas import UsageCreate, UsageUpdate
from watertrack.services import usage_service
from watertrack.utils.auth import get_current_user_id

usage_router = APIRouter(prefix="/api/usages", tags=["usages"])


@usage_router.post("", status_code=201)
def create_usage(body: UsageCreate, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return usage_service.create_usage(db, user_id, body)


@usage_router.get("")
def get_usages(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return usage_service.get_usages(db, user_id)


@usage_router.get("/device/{device_id}")
def get_usages_for_device(device_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return usage_service.get_usages_for_device(db, user_id, device_id)


@usage_router.get("/{usage_id}")
def get_usage(usage_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return usage_service.get_usage(db, user_id, usage_id)


@usage_router.patch("/{usage_id}")
def update_usage(usage_id: int, body: UsageUpdate, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return usage_service.update_usage(db, user_id, usage_id, body)


@usage_router.delete("/{usage_id}")
def delete_usage(usage_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return usage_service.delete_usage(db, user_id, usage_id)
