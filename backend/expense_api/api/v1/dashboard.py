# expense_api/api/v1/dashboard.py
from datetime import date
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from expense_api.api.v1.deps import get_current_user, get_today
from expense_api.db import models
from expense_api.db.session import get_db
from expense_api.schemas.dashboard import Balance, CategoryExpense
from expense_api.services import dashboard as dashboard_service

router = APIRouter(tags=["dashboard"])


@router.get("/balance", response_model=Balance)
def balance(current_user: models.User = Depends(get_current_user), db: Session = Depends(get_db)):
    return dashboard_service.get_balance(db, current_user.id)


@router.get("/expenses-by-category", response_model=List[CategoryExpense])
def expenses_by_category(
    today: date = Depends(get_today),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Expense totals per category for the current calendar month."""
    return dashboard_service.get_expenses_by_category(db, current_user.id, today)
