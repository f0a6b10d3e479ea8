# expense_api/services/dashboard.py
import calendar
import logging
from datetime import date
from decimal import Decimal
from typing import List, Tuple

from sqlalchemy.orm import Session

from expense_api.db.models import TransactionType
from expense_api.repositories import transactions as txn_repo
from expense_api.schemas.dashboard import Balance, CategoryExpense

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def _money(value) -> Decimal:
    if value is None:
        return Decimal("0.00")
    return Decimal(str(value)).quantize(CENT)


def month_bounds(today: date) -> Tuple[date, date]:
    """First and last day of the calendar month containing `today`."""
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def get_balance(db: Session, user_id: int) -> Balance:
    """All-time income, expense and their difference."""
    total_income = _money(txn_repo.sum_amount_by_type(db, user_id, TransactionType.INCOME))
    total_expense = _money(txn_repo.sum_amount_by_type(db, user_id, TransactionType.EXPENSE))
    balance = Balance(
        total_income=total_income,
        total_expense=total_expense,
        current_balance=total_income - total_expense,
    )
    logger.info(
        "Balance for user id=%s - income: %s, expense: %s, balance: %s",
        user_id, balance.total_income, balance.total_expense, balance.current_balance,
    )
    return balance


def get_expenses_by_category(db: Session, user_id: int, today: date) -> List[CategoryExpense]:
    """Expense totals per category for the month of `today`, largest first."""
    start, end = month_bounds(today)
    rows = txn_repo.expenses_by_category(db, user_id, start, end)
    logger.info("Found %d categories with expenses for user id=%s (%s..%s)", len(rows), user_id, start, end)
    return [CategoryExpense(category_name=r.category, total_amount=_money(r.total)) for r in rows]
