# Removes simulated usages for every user
from sqlalchemy.orm import Session
from watertrack.db import engine
from watertrack.models import User
from watertrack.services.simulation_service import clear_simulated_data

with Session(engine) as session:
    user_ids = [row.id for row in session.query(User.id).all()]
    total = 0
    for user_id in user_ids:
        total += clear_simulated_data(session, user_id)["deleted"]

    print(f"Removed {total} simulated usage rows for {len(user_ids)} user(s)")
