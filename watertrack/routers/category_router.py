from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from watertrack.db import get_db
from watertrack.schemas.water_schemas import CategoryCreate, CategoryUpdate
from watertrack.services import category_service
from watertrack.utils.auth import get_current_user_id

category_router = APIRouter(prefix="/api/categories", tags=["categories"])


@category_router.post("", status_code=201)
def create_category(body: CategoryCreate, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return category_service.create_category(db, user_id, body)


@category_router.get("")
def get_categories(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return category_service.get_categories(db, user_id)


@category_router.get("/{category_id}")
def get_category(category_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return category_service.get_category(db, user_id, category_id)


@category_router.patch("/{category_id}")
def update_category(category_id: int, body: CategoryUpdate, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return category_service.update_category(db, user_id, category_id, body)


@category_router.delete("/{category_id}")
def delete_category(category_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return category_service.delete_category(db, user_id, category_id)
