"""
Ownership-filtered queries.

Every Category, Device, Usage and Bill row carries a user_id. All reads and
writes go through the helpers here so a user only ever sees their own rows,
and a row owned by someone else looks exactly like a row that doesn't exist.
"""

from fastapi import HTTPException
from sqlalchemy.orm import Session


def owned_query(db: Session, model, user_id: int):
    return db.query(model).filter(model.user_id == user_id)


def get_owned_or_404(db: Session, model, record_id: int, user_id: int, label: str = None):
    record = owned_query(db, model, user_id).filter(model.id == record_id).first()
    if not record:
        raise HTTPException(status_code=404, detail=f"{label or model.__name__} not found")
    return record


def apply_changes(record, changes: dict, required: tuple = ()):
    """
    Copy the fields present in a partial update onto a row.

    Fields the client left out are not in `changes` and stay as they are.
    An explicit null is only accepted for nullable columns.
    """
    for field, value in changes.items():
        if value is None and field in required:
            raise HTTPException(status_code=400, detail=f"{field} cannot be null")
        setattr(record, field, value)
