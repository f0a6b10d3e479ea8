# expense_api/db/session.py
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker

from expense_api.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str):
    """Engine for `url`. SQLite connections are shared with the server's worker threads."""
    if not url:
        raise RuntimeError("DATABASE_URL not set in environment (.env)")
    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    logger.debug("Creating engine for %s", make_url(url).render_as_string(hide_password=True))
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args, future=True)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


def get_db():
    """
    FastAPI dependency yielding one Session per request.
    Services commit or roll back themselves; this only closes it.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
