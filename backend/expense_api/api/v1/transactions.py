# expense_api/api/v1/transactions.py
from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional
from sqlalchemy.orm import Session
from datetime import date

from expense_api.api.v1.deps import get_current_user
from expense_api.core.errors import ValidationError
from expense_api.db import models
from expense_api.db.session import get_db
from expense_api.schemas.transaction import TransactionIn, TransactionOut, TransactionPage
from expense_api.services import transactions as txn_service

router = APIRouter(tags=["transactions"])


@router.get("", response_model=TransactionPage)
def list_transactions(
    start_date: Optional[date] = Query(None, alias="startDate", description="YYYY-MM-DD"),
    end_date: Optional[date] = Query(None, alias="endDate", description="YYYY-MM-DD"),
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1, le=200),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Paginated (0-indexed) transactions for the current user, newest first.
    The date range applies only when both startDate and endDate are given.
    """
    if start_date and end_date:
        return txn_service.list_for_user_in_range(db, current_user.id, start_date, end_date, page, size)
    if start_date or end_date:
        raise ValidationError("startDate and endDate must be given together")
    return txn_service.list_for_user(db, current_user.id, page, size)


@router.post("", response_model=TransactionOut, status_code=status.HTTP_201_CREATED)
def create_transaction(payload: TransactionIn, current_user: models.User = Depends(get_current_user), db: Session = Depends(get_db)):
    return txn_service.create(db, payload, current_user.id)


@router.get("/{txn_id}", response_model=TransactionOut)
def get_transaction(txn_id: int, current_user: models.User = Depends(get_current_user), db: Session = Depends(get_db)):
    return txn_service.get(db, txn_id, current_user.id)


@router.put("/{txn_id}", response_model=TransactionOut)
def update_transaction(txn_id: int, payload: TransactionIn, current_user: models.User = Depends(get_current_user), db: Session = Depends(get_db)):
    return txn_service.update(db, txn_id, payload, current_user.id)


@router.delete("/{txn_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_transaction(txn_id: int, current_user: models.User = Depends(get_current_user), db: Session = Depends(get_db)):
    txn_service.delete(db, txn_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
