# expense_api/api/v1/deps.py
from datetime import date
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from expense_api.core.errors import InvalidToken
from expense_api.db import models
from expense_api.db.session import get_db
from expense_api.services import auth as auth_service

# auto_error=False so a missing header is a 401 from us, not the scheme's own error
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> models.User:
    if credentials is None or not credentials.credentials:
        raise InvalidToken("Not authenticated")
    return auth_service.resolve_token(db, credentials.credentials)


def get_today() -> date:
    """Wall-clock date for month-bounded reports; overridden in tests."""
    return date.today()
