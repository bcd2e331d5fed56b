from datetime import datetime
from sqlalchemy import desc
from sqlalchemy.orm import Session
from watertrack.models import Usage, Device
from watertrack.schemas.water_schemas import UsageCreate, UsageUpdate
from watertrack.services.ownership import owned_query, get_owned_or_404, apply_changes

UNKNOWN_DEVICE = "Unknown Device"


def usage_to_dict(usage: Usage):
    return {
        "id": usage.id,
        "deviceId": usage.device_id,
        "deviceName": usage.device.name if usage.device else UNKNOWN_DEVICE,
        "value": usage.value,
        "timestamp": usage.timestamp,
        "notes": usage.notes,
        "createdAt": usage.created_at,
        "updatedAt": usage.updated_at,
    }


def create_usage(db: Session, user_id: int, req: UsageCreate):
    get_owned_or_404(db, Device, req.device_id, user_id)

    new_usage = Usage(
        user_id=user_id,
        device_id=req.device_id,
        value=req.value,
        notes=req.notes,
        timestamp=req.timestamp or datetime.utcnow(),
    )

    db.add(new_usage)
    db.commit()
    db.refresh(new_usage)

    return usage_to_dict(new_usage)


def get_usages(db: Session, user_id: int):
    db_usages = owned_query(db, Usage, user_id).order_by(desc(Usage.timestamp), desc(Usage.id)).all()
    return [usage_to_dict(u) for u in db_usages]


def get_usages_for_device(db: Session, user_id: int, device_id: int):
    get_owned_or_404(db, Device, device_id, user_id)

    db_usages = (
        owned_query(db, Usage, user_id)
        .filter(Usage.device_id == device_id)
        .order_by(desc(Usage.timestamp), desc(Usage.id))
        .all()
    )
    return [usage_to_dict(u) for u in db_usages]


def get_usage(db: Session, user_id: int, usage_id: int):
    usage = get_owned_or_404(db, Usage, usage_id, user_id)
    return usage_to_dict(usage)


def update_usage(db: Session, user_id: int, usage_id: int, req: UsageUpdate):
    usage = get_owned_or_404(db, Usage, usage_id, user_id)
    changes = req.model_dump(exclude_unset=True)

    if changes.get("device_id") is not None:
        get_owned_or_404(db, Device, changes["device_id"], user_id)

    apply_changes(usage, changes, required=("device_id", "value", "timestamp"))

    db.commit()
    db.refresh(usage)

    return usage_to_dict(usage)


def delete_usage(db: Session, user_id: int, usage_id: int):
    usage = get_owned_or_404(db, Usage, usage_id, user_id)

    db.delete(usage)
    db.commit()

    return {"message": "Usage record deleted successfully"}
