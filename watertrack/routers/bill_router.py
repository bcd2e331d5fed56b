from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile
from watertrack.db import get_db
from watertrack.schemas.water_schemas import BillCreate, BillUpdate, MarkPaidRequest
from watertrack.services import bill_service
from watertrack.utils.auth import get_current_user_id

bill_router = APIRouter(prefix="/api/bills", tags=["bills"])


@bill_router.post("", status_code=201)
async def create_bill(request: Request, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """
    Create a bill from a JSON body, or from a multipart form when the client
    attaches a photo of the paper bill (form field "photo").
    """
    photo = None
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid JSON body")
    else:
        form = await request.form()
        upload = form.get("photo")
        if isinstance(upload, UploadFile):
            photo = upload
        # Empty form fields mean "not given"
        payload = {k: v for k, v in form.items() if k != "photo" and v != ""}

    try:
        body = BillCreate.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    return await run_in_threadpool(bill_service.create_bill, db, user_id, body, photo)


@bill_router.get("")
def get_bills(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return bill_service.get_bills(db, user_id)


@bill_router.get("/{bill_id}")
def get_bill(bill_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return bill_service.get_bill(db, user_id, bill_id)


@bill_router.patch("/{bill_id}")
def update_bill(bill_id: int, body: BillUpdate, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return bill_service.update_bill(db, user_id, bill_id, body)


@bill_router.patch("/{bill_id}/paid")
def mark_bill_paid(bill_id: int, body: MarkPaidRequest = MarkPaidRequest(), user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return bill_service.mark_bill_paid(db, user_id, bill_id, body)


@bill_router.delete("/{bill_id}")
def delete_bill(bill_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return bill_service.delete_bill(db, user_id, bill_id)
