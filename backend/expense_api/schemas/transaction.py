# expense_api/schemas/transaction.py
from pydantic import Field
from datetime import date
from typing import Optional, List
from decimal import Decimal

from expense_api.db.models import TransactionType
from .common import CamelModel


class TransactionIn(CamelModel):
    """Body of both POST and PUT; an update overwrites every field."""

    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    description: Optional[str] = Field(None, max_length=1000)
    date: date
    type: TransactionType
    category_id: int


class TransactionOut(CamelModel):
    id: int
    amount: Decimal
    description: Optional[str] = None
    date: date
    type: TransactionType
    category_id: int
    category_name: str


class TransactionPage(CamelModel):
    items: List[TransactionOut]
    total: int
    page: int
    size: int
    total_pages: int
