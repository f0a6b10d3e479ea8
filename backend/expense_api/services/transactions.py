# expense_api/services/transactions.py
"""Ownership-checked CRUD for transactions.

Every write resolves the referenced category and refuses it unless it belongs
to the acting user, so a transaction and its category always share an owner.
Mutations run in the request's session and commit once; failures roll back.
"""
import logging
import math
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from expense_api.core.errors import (
    CategoryNotFound,
    ForbiddenCategory,
    ForbiddenTransaction,
    TransactionNotFound,
    UserNotFound,
    ValidationError,
)
from expense_api.db import models
from expense_api.repositories import categories as category_repo
from expense_api.repositories import transactions as txn_repo
from expense_api.repositories import users as user_repo
from expense_api.schemas.transaction import TransactionIn, TransactionOut, TransactionPage

logger = logging.getLogger(__name__)


def to_out(txn: models.Transaction) -> TransactionOut:
    return TransactionOut(
        id=txn.id,
        amount=txn.amount,
        description=txn.description,
        date=txn.date,
        type=txn.type,
        category_id=txn.category_id,
        category_name=txn.category.name,
    )


def _to_page(items: List[models.Transaction], total: int, page: int, size: int) -> TransactionPage:
    return TransactionPage(
        items=[to_out(t) for t in items],
        total=total,
        page=page,
        size=size,
        total_pages=math.ceil(total / size) if size else 0,
    )


def _check_paging(page: int, size: int) -> None:
    if page < 0:
        raise ValidationError("page must be >= 0")
    if size < 1:
        raise ValidationError("size must be >= 1")


def _owned_category(db: Session, category_id: int, user_id: int) -> models.Category:
    category = category_repo.get(db, category_id)
    if category is None:
        raise CategoryNotFound()
    if category.user_id != user_id:
        logger.warning("User %s attempted to use category %s owned by another user", user_id, category_id)
        raise ForbiddenCategory()
    return category


def _owned_transaction(db: Session, transaction_id: int, user_id: int, for_update: bool = False) -> models.Transaction:
    txn = txn_repo.get(db, transaction_id, for_update=for_update)
    if txn is None:
        raise TransactionNotFound()
    if txn.user_id != user_id:
        logger.warning("User %s attempted to access transaction %s owned by another user", user_id, transaction_id)
        raise ForbiddenTransaction()
    return txn


def create(db: Session, payload: TransactionIn, user_id: int) -> TransactionOut:
    logger.info("Creating transaction for user id=%s (type=%s)", user_id, payload.type.value)
    try:
        user = user_repo.get(db, user_id)
        if user is None:
            raise UserNotFound()
        category = _owned_category(db, payload.category_id, user_id)

        txn = models.Transaction(
            user=user,
            category=category,
            amount=payload.amount,
            description=payload.description,
            date=payload.date,
            type=payload.type,
        )
        db.add(txn)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(txn)
    logger.info("Transaction created with id=%s", txn.id)
    return to_out(txn)


def get(db: Session, transaction_id: int, user_id: int) -> TransactionOut:
    return to_out(_owned_transaction(db, transaction_id, user_id))


def update(db: Session, transaction_id: int, payload: TransactionIn, user_id: int) -> TransactionOut:
    logger.info("Updating transaction id=%s for user id=%s", transaction_id, user_id)
    try:
        txn = _owned_transaction(db, transaction_id, user_id, for_update=True)
        category = _owned_category(db, payload.category_id, user_id)

        txn.amount = payload.amount
        txn.description = payload.description
        txn.date = payload.date
        txn.type = payload.type
        txn.category = category
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(txn)
    logger.info("Transaction updated (id=%s)", txn.id)
    return to_out(txn)


def delete(db: Session, transaction_id: int, user_id: int) -> None:
    logger.info("Deleting transaction id=%s for user id=%s", transaction_id, user_id)
    try:
        txn = _owned_transaction(db, transaction_id, user_id, for_update=True)
        db.delete(txn)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Transaction deleted (id=%s)", transaction_id)


def list_for_user(db: Session, user_id: int, page: int = 0, size: int = 10) -> TransactionPage:
    _check_paging(page, size)
    items, total = txn_repo.page_for_user(db, user_id, page, size)
    return _to_page(items, total, page, size)


def list_for_user_in_range(
    db: Session, user_id: int, start_date: date, end_date: date, page: int = 0, size: int = 10
) -> TransactionPage:
    _check_paging(page, size)
    if start_date > end_date:
        raise ValidationError("startDate must not be after endDate")
    items, total = txn_repo.page_for_user_between(db, user_id, start_date, end_date, page, size)
    return _to_page(items, total, page, size)
