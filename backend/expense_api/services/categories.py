# expense_api/services/categories.py
import logging
from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from expense_api.core.errors import CategoryInUse, DuplicateCategory, NotFound
from expense_api.db import models
from expense_api.repositories import categories as category_repo
from expense_api.schemas.category import CategoryOut

logger = logging.getLogger(__name__)


def _owned(db: Session, category_id: int, user_id: int) -> models.Category:
    category = category_repo.get(db, category_id)
    if category is None or category.user_id != user_id:
        raise NotFound("Category not found")
    return category


def create(db: Session, name: str, user_id: int) -> CategoryOut:
    logger.info("Creating category %r for user id=%s", name, user_id)
    if category_repo.exists_by_name(db, name, user_id):
        raise DuplicateCategory(f"Category with name '{name}' already exists")
    try:
        category = category_repo.add(db, name=name, user_id=user_id)
        db.commit()
    except IntegrityError:
        # concurrent create won the (user_id, name) unique constraint
        db.rollback()
        raise DuplicateCategory(f"Category with name '{name}' already exists")
    logger.info("Category created with id=%s", category.id)
    return CategoryOut.model_validate(category)


def list_for_user(db: Session, user_id: int) -> List[CategoryOut]:
    return [CategoryOut.model_validate(c) for c in category_repo.list_for_user(db, user_id)]


def get(db: Session, category_id: int, user_id: int) -> CategoryOut:
    return CategoryOut.model_validate(_owned(db, category_id, user_id))


def delete(db: Session, category_id: int, user_id: int) -> None:
    """Remove an unused category. Raises NotFound or CategoryInUse."""
    category = _owned(db, category_id, user_id)
    if category_repo.is_referenced(db, category.id):
        raise CategoryInUse()
    try:
        db.delete(category)
        db.commit()
    except IntegrityError:
        # a transaction started referencing it after the check
        db.rollback()
        raise CategoryInUse()
    logger.info("Category deleted (id=%s)", category_id)
