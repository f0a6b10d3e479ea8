# expense_api/repositories/transactions.py
"""Transaction queries: paging, date range, and the two dashboard aggregates."""
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Query, Session, joinedload
from expense_api.db import models


def get(db: Session, transaction_id: int, for_update: bool = False) -> Optional[models.Transaction]:
    q = db.query(models.Transaction).filter(models.Transaction.id == transaction_id)
    if for_update:
        # row lock for check-then-mutate; SQLite drops the clause
        q = q.with_for_update()
    return q.first()


def _for_user(db: Session, user_id: int) -> Query:
    return (
        db.query(models.Transaction)
        .options(joinedload(models.Transaction.category))
        .filter(models.Transaction.user_id == user_id)
    )


def _paginate(q: Query, page: int, size: int) -> Tuple[List[models.Transaction], int]:
    total = q.count()
    items = (
        # newest first; id breaks same-date ties so pages are stable
        q.order_by(models.Transaction.date.desc(), models.Transaction.id.desc())
        .offset(page * size)
        .limit(size)
        .all()
    )
    return items, total


def page_for_user(db: Session, user_id: int, page: int, size: int) -> Tuple[List[models.Transaction], int]:
    return _paginate(_for_user(db, user_id), page, size)


def page_for_user_between(
    db: Session, user_id: int, start_date: date, end_date: date, page: int, size: int
) -> Tuple[List[models.Transaction], int]:
    q = _for_user(db, user_id).filter(models.Transaction.date >= start_date, models.Transaction.date <= end_date)
    return _paginate(q, page, size)


def sum_amount_by_type(db: Session, user_id: int, txn_type: models.TransactionType) -> Optional[Decimal]:
    q = db.query(func.coalesce(func.sum(models.Transaction.amount), 0)).filter(
        models.Transaction.user_id == user_id, models.Transaction.type == txn_type
    )
    return q.scalar()


def expenses_by_category(db: Session, user_id: int, start_date: date, end_date: date) -> list:
    """Rows of (category_name, total) for EXPENSE transactions in [start_date, end_date]."""
    total = func.sum(models.Transaction.amount).label("total")
    q = (
        db.query(models.Category.name.label("category"), total)
        .join(models.Transaction, models.Transaction.category_id == models.Category.id)
        .filter(
            models.Transaction.user_id == user_id,
            models.Transaction.type == models.TransactionType.EXPENSE,
            models.Transaction.date >= start_date,
            models.Transaction.date <= end_date,
        )
        .group_by(models.Category.id, models.Category.name)
        .order_by(total.desc(), models.Category.name)
    )
    return q.all()
