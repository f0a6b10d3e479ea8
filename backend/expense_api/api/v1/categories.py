# expense_api/api/v1/categories.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List
from expense_api.schemas.category import CategoryCreate, CategoryOut
from expense_api.api.v1.deps import get_current_user
from expense_api.db import models
from expense_api.db.session import get_db
from expense_api.services import categories as category_service

router = APIRouter(tags=["categories"])


@router.get("", response_model=List[CategoryOut])
def list_categories(db: Session = Depends(get_db), current_user: models.User = Depends(get_current_user)):
    return category_service.list_for_user(db, current_user.id)


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db), current_user: models.User = Depends(get_current_user)):
    return category_service.create(db, payload.name, current_user.id)


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: int, db: Session = Depends(get_db), current_user: models.User = Depends(get_current_user)):
    return category_service.get(db, category_id, current_user.id)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_category(category_id: int, db: Session = Depends(get_db), current_user: models.User = Depends(get_current_user)):
    category_service.delete(db, category_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
