from collections import defaultdict
from datetime import datetime, timedelta
from typing import Optional
from fastapi import HTTPException
from sqlalchemy import asc, desc, func
from sqlalchemy.orm import Session
from watertrack.models import Usage, Device, Category
from watertrack.services.ownership import owned_query
from watertrack.services.usage_service import usage_to_dict, UNKNOWN_DEVICE

DEFAULT_WINDOW_DAYS = 10
MAX_WINDOW_DAYS = 3650
ALERT_THRESHOLD = 1000 # litres, cumulative per device
RECENT_USAGE_LIMIT = 10


def parse_category_ids(raw: Optional[str]):
    """Turn "3,7" into [3, 7]. Empty or missing means no filter."""
    if not raw:
        return []
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid category id list")


# DAILY USAGE
def get_daily_usage(db: Session, user_id: int, days: int = DEFAULT_WINDOW_DAYS, category_ids=None, now: datetime = None):
    now = now or datetime.utcnow()
    start_date = now - timedelta(days=days)

    query = owned_query(db, Usage, user_id).filter(Usage.timestamp >= start_date)

    # A usage's category is the category of its device
    if category_ids:
        query = query.join(Device, Usage.device_id == Device.id).filter(Device.category_id.in_(category_ids))

    db_usages = query.order_by(asc(Usage.timestamp), asc(Usage.id)).all()

    # Group by day, then by category within the day
    totals = defaultdict(float)
    by_category = defaultdict(lambda: defaultdict(float))
    for usage in db_usages:
        date_str = usage.timestamp.strftime("%Y-%m-%d")
        totals[date_str] += usage.value
        if usage.device is not None:
            by_category[date_str][usage.device.category_id] += usage.value

    chart_data = []
    for date_str in sorted(totals):
        day = {"date": date_str, "total": round(totals[date_str], 2)}
        for category_id, value in sorted(by_category[date_str].items()):
            day[f"category_{category_id}"] = round(value, 2)
        chart_data.append(day)

    db_categories = owned_query(db, Category, user_id).order_by(asc(Category.name), asc(Category.id)).all()
    available_categories = [
        {
            "id": c.id,
            "name": c.name,
        }
        for c in db_categories
    ]

    return {
        "chartData": chart_data,
        "availableCategories": available_categories,
    }


# DASHBOARD
def get_most_used_source(db: Session, user_id: int):
    device_totals = (
        owned_query(db, Usage, user_id)
        .filter(Usage.device_id.isnot(None))
        .with_entities(Usage.device_id, func.sum(Usage.value))
        .group_by(Usage.device_id)
        .all()
    )

    if not device_totals:
        return {"id": None, "name": "No data", "usage": 0, "alert": False}

    # Highest total wins, lowest device id on a tie
    device_id, usage = max(device_totals, key=lambda row: (row[1], -row[0]))
    device = owned_query(db, Device, user_id).filter(Device.id == device_id).first()

    return {
        "id": device_id,
        "name": device.name if device else UNKNOWN_DEVICE,
        "usage": round(usage, 2),
        "alert": usage > ALERT_THRESHOLD,
    }


def get_dashboard(db: Session, user_id: int):
    total_water_used = owned_query(db, Usage, user_id).with_entities(func.sum(Usage.value)).scalar() or 0

    db_recent = (
        owned_query(db, Usage, user_id)
        .order_by(desc(Usage.timestamp), desc(Usage.id))
        .limit(RECENT_USAGE_LIMIT)
        .all()
    )

    return {
        "totalWaterUsed": round(total_water_used, 2),
        "mostUsedSource": get_most_used_source(db, user_id),
        "last10Usages": [usage_to_dict(u) for u in db_recent],
    }
