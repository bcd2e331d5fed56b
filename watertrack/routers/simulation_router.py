from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from watertrack.db import get_db
from watertrack.services import simulation_service
from watertrack.utils.auth import get_current_user_id

# Demo data endpoints used by the app's Test tab
simulation_router = APIRouter(prefix="/api/test", tags=["test"])


@simulation_router.post("/simulate-month")
def simulate_month(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return simulation_service.simulate_month(db, user_id)


@simulation_router.delete("/clear-simulated-data")
def clear_simulated_data(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return simulation_service.clear_simulated_data(db, user_id)
