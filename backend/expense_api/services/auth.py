# expense_api/services/auth.py
import logging
from dataclasses import dataclass
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from expense_api.core.errors import DuplicateEmail, InvalidCredentials, InvalidToken
from expense_api.db import models
from expense_api.repositories import users as user_repo
from expense_api.services.security import (
    JWTError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    token: str
    id: int
    name: str
    email: str


def normalize_email(email: str) -> str:
    # stored and compared lowercased so uniqueness does not hinge on DB collation
    return email.strip().lower()


def register(db: Session, name: str, email: str, password: str) -> int:
    """Create a user and return its id. Raises DuplicateEmail."""
    email = normalize_email(email)
    logger.info("Registration attempt for email: %s", email)
    # fast path; the unique index on users.email is the real guard
    if user_repo.exists_by_email(db, email):
        logger.warning("Registration failed: email already exists - %s", email)
        raise DuplicateEmail()
    try:
        user = user_repo.add(db, name=name, email=email, hashed_password=hash_password(password))
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Registration lost a race on email: %s", email)
        raise DuplicateEmail()
    logger.info("User registered: %s (id=%s)", email, user.id)
    return user.id


def login(db: Session, email: str, password: str) -> LoginResult:
    email = normalize_email(email)
    user = user_repo.get_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        logger.warning("Login failed for email: %s", email)
        raise InvalidCredentials()
    token = create_access_token(user.email)
    logger.info("Login successful for user id=%s", user.id)
    return LoginResult(token=token, id=user.id, name=user.name, email=user.email)


def resolve_token(db: Session, token: str) -> models.User:
    """Map a bearer token back to its user. Raises InvalidToken."""
    try:
        payload = decode_access_token(token)
    except JWTError as e:
        logger.info("Rejected bearer token: %s", e)
        raise InvalidToken()

    sub = payload.get("sub")
    if not sub:
        raise InvalidToken("Invalid token (no sub)")

    user = user_repo.get_by_email(db, sub)
    if user is None:
        raise InvalidToken("User not found")
    return user
