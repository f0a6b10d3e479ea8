# expense_api.api.v1 package - exports router modules so
# "from expense_api.api.v1 import auth, categories, ..." works.
from . import health, auth, categories, transactions, dashboard

__all__ = ["health", "auth", "categories", "transactions", "dashboard"]
