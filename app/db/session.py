"""Database engine, session management and transaction boundaries."""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.core.errors import BadRequestError

logger = logging.getLogger(__name__)


def build_connect_args(database_url: str, timeout_seconds: int) -> dict[str, Any]:
    """Return driver arguments that bound how long a single statement may wait."""
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False, "timeout": timeout_seconds}
    if database_url.startswith("postgresql"):
        return {"options": f"-c statement_timeout={timeout_seconds * 1000}"}
    return {}


def build_engine(database_url: str, timeout_seconds: int | None = None) -> Engine:
    timeout = settings.db_timeout_seconds if timeout_seconds is None else timeout_seconds
    return create_engine(database_url, connect_args=build_connect_args(database_url, timeout))


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and ensure proper cleanup."""
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """Commit everything written inside the block, or roll all of it back."""
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("[DB] Integrity error, transaction rolled back: %s", exc.orig)
        raise BadRequestError("The request conflicts with an existing record.") from exc
    except Exception:
        db.rollback()
        raise
