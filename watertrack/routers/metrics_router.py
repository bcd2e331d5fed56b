from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from watertrack.db import get_db
from watertrack.services import metrics_service
from watertrack.utils.auth import get_current_user_id

metrics_router = APIRouter(prefix="/api/metrics", tags=["metrics"])


@metrics_router.get("/daily-usage")
def get_daily_usage(
    days: int = Query(metrics_service.DEFAULT_WINDOW_DAYS, ge=1, le=metrics_service.MAX_WINDOW_DAYS),
    categories: Optional[str] = None,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    category_ids = metrics_service.parse_category_ids(categories)
    return metrics_service.get_daily_usage(db, user_id, days=days, category_ids=category_ids)


# Home screen
@metrics_router.get("/dashboard")
def get_dashboard(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return metrics_service.get_dashboard(db, user_id)
