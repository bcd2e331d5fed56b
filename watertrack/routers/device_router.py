from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from watertrack.db import get_db
from watertrack.schemas.water_schemas import DeviceCreate, DeviceUpdate
from watertrack.services import device_service
from watertrack.utils.auth import get_current_user_id

device_router = APIRouter(prefix="/api/devices", tags=["devices"])


@device_router.post("", status_code=201)
def create_device(body: DeviceCreate, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return device_service.create_device(db, user_id, body)


@device_router.get("")
def get_devices(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return device_service.get_devices(db, user_id)


@device_router.get("/{device_id}")
def get_device(device_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return device_service.get_device(db, user_id, device_id)


@device_router.patch("/{device_id}")
def update_device(device_id: int, body: DeviceUpdate, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return device_service.update_device(db, user_id, device_id, body)


@device_router.delete("/{device_id}")
def delete_device(device_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return device_service.delete_device(db, user_id, device_id)
