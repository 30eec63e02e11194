"""Database seeding helpers."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.sale import DAYS_OF_WEEK, DayOfWeek

logger = logging.getLogger(__name__)


def ensure_days_of_week(session: Session) -> int:
    """Insert any missing weekday reference rows; returns how many were added."""
    existing_ids = set(session.scalars(select(DayOfWeek.id)))
    missing = [DayOfWeek(id=day_id, name=name) for day_id, name in DAYS_OF_WEEK if day_id not in existing_ids]
    if not missing:
        return 0
    session.add_all(missing)
    session.commit()
    logger.info("[BOOTSTRAP] Seeded %s day-of-week rows", len(missing))
    return len(missing)


def ensure_seed_data(session: Session) -> None:
    """Ensure reference data required by every restaurant is present."""
    ensure_days_of_week(session)
