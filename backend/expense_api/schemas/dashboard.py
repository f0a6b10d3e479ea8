# expense_api/schemas/dashboard.py
from decimal import Decimal
from .common import CamelModel


class Balance(CamelModel):
    total_income: Decimal
    total_expense: Decimal
    current_balance: Decimal


class CategoryExpense(CamelModel):
    category_name: str
    total_amount: Decimal
