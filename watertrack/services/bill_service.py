from datetime import datetime
from typing import Optional
from fastapi import UploadFile
from sqlalchemy import desc
from sqlalchemy.orm import Session
from watertrack.models import Bill
from watertrack.schemas.water_schemas import BillCreate, BillUpdate, MarkPaidRequest
from watertrack.services.ownership import owned_query, get_owned_or_404, apply_changes
from watertrack.services.storage_service import save_upload, delete_upload
from watertrack.utils.logging_utils import get_logger

logger = get_logger("bills")


def bill_to_dict(bill: Bill):
    return {
        "id": bill.id,
        "userId": bill.user_id,
        "amount": bill.amount,
        "dueDate": bill.due_date,
        "paidDate": bill.paid_date,
        "waterUsed": bill.water_used,
        "billPeriodStart": bill.bill_period_start,
        "billPeriodEnd": bill.bill_period_end,
        "photoUrl": bill.photo_url,
        "createdAt": bill.created_at,
        "updatedAt": bill.updated_at,
    }


def create_bill(db: Session, user_id: int, req: BillCreate, photo: Optional[UploadFile] = None):
    new_bill = Bill(
        user_id=user_id,
        amount=req.amount,
        due_date=req.due_date,
        water_used=req.water_used,
        bill_period_start=req.bill_period_start,
        bill_period_end=req.bill_period_end,
    )

    if photo is not None:
        new_bill.photo_url = save_upload(photo)

    try:
        db.add(new_bill)
        db.commit()
    except Exception:
        db.rollback()
        # Don't leave a stored photo behind for a bill that was never saved
        delete_upload(new_bill.photo_url)
        raise
    db.refresh(new_bill)

    logger.info(f"User {user_id} created bill {new_bill.id}")
    return bill_to_dict(new_bill)


def get_bills(db: Session, user_id: int):
    db_bills = owned_query(db, Bill, user_id).order_by(desc(Bill.due_date), desc(Bill.id)).all()
    return {"bills": [bill_to_dict(b) for b in db_bills]}


def get_bill(db: Session, user_id: int, bill_id: int):
    bill = get_owned_or_404(db, Bill, bill_id, user_id)
    return bill_to_dict(bill)


def update_bill(db: Session, user_id: int, bill_id: int, req: BillUpdate):
    bill = get_owned_or_404(db, Bill, bill_id, user_id)

    apply_changes(bill, req.model_dump(exclude_unset=True), required=("amount", "due_date", "water_used"))

    db.commit()
    db.refresh(bill)

    return bill_to_dict(bill)


def mark_bill_paid(db: Session, user_id: int, bill_id: int, req: MarkPaidRequest):
    bill = get_owned_or_404(db, Bill, bill_id, user_id)

    bill.paid_date = req.paid_date or datetime.utcnow()

    db.commit()
    db.refresh(bill)

    return bill_to_dict(bill)


def delete_bill(db: Session, user_id: int, bill_id: int):
    bill = get_owned_or_404(db, Bill, bill_id, user_id)
    photo_url = bill.photo_url

    db.delete(bill)
    db.commit()
    delete_upload(photo_url)

    logger.info(f"User {user_id} deleted bill {bill_id}")
    return {"message": "Bill deleted successfully"}
