# expense_api/repositories/users.py
from typing import Optional
from sqlalchemy.orm import Session
from expense_api.db import models


def get(db: Session, user_id: int) -> Optional[models.User]:
    return db.get(models.User, user_id)


def get_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email).first()


def exists_by_email(db: Session, email: str) -> bool:
    return db.query(models.User.id).filter(models.User.email == email).first() is not None


def add(db: Session, name: str, email: str, hashed_password: str) -> models.User:
    """Stage a new user and flush so the id is populated. Caller commits."""
    user = models.User(name=name, email=email, hashed_password=hashed_password)
    db.add(user)
    db.flush()
    return user
