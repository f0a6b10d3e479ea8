# expense_api/repositories/categories.py
from typing import List, Optional
from sqlalchemy.orm import Session
from expense_api.db import models


def get(db: Session, category_id: int) -> Optional[models.Category]:
    return db.get(models.Category, category_id)


def list_for_user(db: Session, user_id: int) -> List[models.Category]:
    return (
        db.query(models.Category)
        .filter(models.Category.user_id == user_id)
        .order_by(models.Category.id)
        .all()
    )


def exists_by_name(db: Session, name: str, user_id: int) -> bool:
    q = db.query(models.Category.id).filter(models.Category.user_id == user_id, models.Category.name == name)
    return q.first() is not None


def is_referenced(db: Session, category_id: int) -> bool:
    q = db.query(models.Transaction.id).filter(models.Transaction.category_id == category_id)
    return q.first() is not None


def add(db: Session, name: str, user_id: int) -> models.Category:
    category = models.Category(name=name, user_id=user_id)
    db.add(category)
    db.flush()
    return category
