"""
Demo data for the Test tab of the mobile app.

simulate_month fills the last 30 days with random usage so the charts have
something to show; clear_simulated_data removes it again. Simulated rows are
recognised by their notes.
"""

import random
from datetime import datetime, timedelta
from sqlalchemy.orm import Session
from watertrack.models import Category, Device, Usage
from watertrack.services.ownership import owned_query
from watertrack.utils.logging_utils import get_logger

logger = get_logger("simulation")

SIMULATED_NOTE = "Simulated data"
SIMULATED_DAYS = 30

DEFAULT_CATEGORIES = [
    {"name": "Kitchen", "icon": "restaurant"},
    {"name": "Bathroom", "icon": "water"},
    {"name": "Laundry", "icon": "shirt"},
    {"name": "Garden", "icon": "leaf"},
    {"name": "Other", "icon": "apps"},
]


def ensure_categories(db: Session, user_id: int):
    categories = owned_query(db, Category, user_id).all()
    if categories:
        return categories, 0

    for cat in DEFAULT_CATEGORIES:
        db.add(Category(user_id=user_id, name=cat["name"], icon=cat["icon"]))
    db.flush()

    return owned_query(db, Category, user_id).all(), len(DEFAULT_CATEGORIES)


def ensure_devices(db: Session, user_id: int, categories):
    created = 0
    for category in categories:
        has_device = owned_query(db, Device, user_id).filter(Device.category_id == category.id).first()
        if not has_device:
            db.add(Device(user_id=user_id, category_id=category.id, name=f"{category.name} Tap"))
            created += 1
    db.flush()

    return owned_query(db, Device, user_id).all(), created


def simulate_month(db: Session, user_id: int, rng: random.Random = None, now: datetime = None):
    rng = rng or random.Random()
    now = now or datetime.utcnow()

    categories, categories_created = ensure_categories(db, user_id)
    devices, devices_created = ensure_devices(db, user_id, categories)

    usages_created = 0
    for i in range(SIMULATED_DAYS):
        day = now - timedelta(days=i)

        # 2-5 usages per day
        for _ in range(rng.randint(2, 5)):
            device = rng.choice(devices)
            db.add(Usage(
                user_id=user_id,
                device_id=device.id,
                value=float(rng.randrange(10, 110)),
                timestamp=day,
                notes=SIMULATED_NOTE,
            ))
            usages_created += 1

    db.commit()

    logger.info(f"Simulated {usages_created} usages for user {user_id}")
    return {
        "message": "Successfully simulated one month of usage data",
        "categoriesCreated": categories_created,
        "devicesCreated": devices_created,
        "usagesCreated": usages_created,
    }


def clear_simulated_data(db: Session, user_id: int, now: datetime = None):
    now = now or datetime.utcnow()
    # From the start of the oldest simulated day
    window_start = (now - timedelta(days=SIMULATED_DAYS)).replace(hour=0, minute=0, second=0, microsecond=0)

    deleted = (
        owned_query(db, Usage, user_id)
        .filter(Usage.notes == SIMULATED_NOTE, Usage.timestamp >= window_start)
        .delete(synchronize_session=False)
    )
    db.commit()

    logger.info(f"Cleared {deleted} simulated usages for user {user_id}")
    return {"message": "Successfully cleared simulated data", "deleted": deleted}
