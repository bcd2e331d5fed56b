from sqlalchemy import asc
from sqlalchemy.orm import Session
from watertrack.models import Device, Category
from watertrack.schemas.water_schemas import DeviceCreate, DeviceUpdate
from watertrack.services.ownership import owned_query, get_owned_or_404, apply_changes
from watertrack.utils.logging_utils import get_logger

logger = get_logger("devices")


def device_to_dict(device: Device):
    return {
        "id": device.id,
        "name": device.name,
        "description": device.description,
        "categoryId": device.category_id,
        "category": {
            "name": device.category.name,
            "icon": device.category.icon,
        },
        "createdAt": device.created_at,
        "updatedAt": device.updated_at,
    }


def create_device(db: Session, user_id: int, req: DeviceCreate):
    # The category has to belong to the same user
    get_owned_or_404(db, Category, req.category_id, user_id)

    new_device = Device(
        user_id=user_id,
        category_id=req.category_id,
        name=req.name,
        description=req.description,
    )

    db.add(new_device)
    db.commit()
    db.refresh(new_device)

    return device_to_dict(new_device)


def get_devices(db: Session, user_id: int):
    db_devices = owned_query(db, Device, user_id).order_by(asc(Device.name), asc(Device.id)).all()
    return [device_to_dict(d) for d in db_devices]


def get_device(db: Session, user_id: int, device_id: int):
    device = get_owned_or_404(db, Device, device_id, user_id)
    return device_to_dict(device)


def update_device(db: Session, user_id: int, device_id: int, req: DeviceUpdate):
    device = get_owned_or_404(db, Device, device_id, user_id)
    changes = req.model_dump(exclude_unset=True)

    if changes.get("category_id") is not None:
        get_owned_or_404(db, Category, changes["category_id"], user_id)

    apply_changes(device, changes, required=("name", "category_id"))

    db.commit()
    db.refresh(device)

    return device_to_dict(device)


def delete_device(db: Session, user_id: int, device_id: int):
    device = get_owned_or_404(db, Device, device_id, user_id)

    db.delete(device)
    db.commit()

    logger.info(f"User {user_id} deleted device {device_id}")
    return {"message": "Device deleted successfully"}
