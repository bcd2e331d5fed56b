from sqlalchemy import asc
from sqlalchemy.orm import Session
from watertrack.models import Category
from watertrack.schemas.water_schemas import CategoryCreate, CategoryUpdate
from watertrack.services.ownership import owned_query, get_owned_or_404, apply_changes
from watertrack.utils.logging_utils import get_logger

logger = get_logger("categories")


def category_to_dict(category: Category, with_devices: bool = True):
    data = {
        "id": category.id,
        "name": category.name,
        "icon": category.icon,
        "createdAt": category.created_at,
        "updatedAt": category.updated_at,
    }
    if with_devices:
        data["devices"] = [
            {
                "id": d.id,
                "name": d.name,
                "description": d.description,
                "categoryId": d.category_id,
            }
            for d in category.devices
        ]
    return data


def create_category(db: Session, user_id: int, req: CategoryCreate):
    new_category = Category(user_id=user_id, name=req.name, icon=req.icon)

    db.add(new_category)
    db.commit()
    db.refresh(new_category)

    return category_to_dict(new_category)


def get_categories(db: Session, user_id: int):
    db_categories = owned_query(db, Category, user_id).order_by(asc(Category.name), asc(Category.id)).all()
    return [category_to_dict(c) for c in db_categories]


def get_category(db: Session, user_id: int, category_id: int):
    category = get_owned_or_404(db, Category, category_id, user_id)
    return category_to_dict(category)


def update_category(db: Session, user_id: int, category_id: int, req: CategoryUpdate):
    category = get_owned_or_404(db, Category, category_id, user_id)

    apply_changes(category, req.model_dump(exclude_unset=True), required=("name",))

    db.commit()
    db.refresh(category)

    return category_to_dict(category)


def delete_category(db: Session, user_id: int, category_id: int):
    category = get_owned_or_404(db, Category, category_id, user_id)
    device_count = len(category.devices)

    # Devices go with it, their usages are kept without a device
    db.delete(category)
    db.commit()

    logger.info(f"User {user_id} deleted category {category_id} and {device_count} device(s)")
    return {"message": "Category deleted successfully"}
