# expense_api/core/errors.py
"""Domain errors raised by services and turned into HTTP responses in main.py.

Not-found and not-yours share a 404 so a caller cannot probe for rows owned
by somebody else.
"""


class AppError(Exception):
    status_code = 400
    default_detail = "Bad request"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(AppError):
    status_code = 400
    default_detail = "Invalid request"


class CategoryNotFound(ValidationError):
    default_detail = "Category not found"


class ForbiddenCategory(ValidationError):
    default_detail = "You can only use your own categories"


class DuplicateEmail(AppError):
    status_code = 409
    default_detail = "Email is already in use"


class DuplicateCategory(AppError):
    status_code = 409
    default_detail = "Category with this name already exists"


class CategoryInUse(AppError):
    status_code = 409
    default_detail = "Category is referenced by transactions"


class InvalidCredentials(AppError):
    status_code = 401
    default_detail = "Invalid email or password"


class InvalidToken(AppError):
    status_code = 401
    default_detail = "Could not validate credentials"


class NotFound(AppError):
    status_code = 404
    default_detail = "Not found"


class UserNotFound(NotFound):
    default_detail = "User not found"


class TransactionNotFound(NotFound):
    default_detail = "Transaction not found"


class ForbiddenTransaction(NotFound):
    default_detail = "Transaction not found"
