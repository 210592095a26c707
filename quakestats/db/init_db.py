"""
Database initialization helpers.

Creates the earthquakes table and, when it is empty, seeds it with the
bundled sample events so a fresh database serves the same data as the
in-memory mode.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from quakestats.models.base import Base
from quakestats.models.earthquake import Earthquake
from quakestats.services.sample_data import sample_quakes

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    Base.metadata.create_all(bind=engine)


def seed_initial_data(db: Session) -> int:
    """
    Insert the sample events if the table holds no rows yet.

    Returns the number of inserted rows.
    """
    existing = db.scalar(select(func.count()).select_from(Earthquake))
    if existing:
        logger.info("earthquakes table already has %d rows, skipping seed", existing)
        return 0

    records = sample_quakes()
    db.add_all(Earthquake(**record.model_dump()) for record in records)
    db.commit()

    logger.info("Seeded %d sample earthquakes", len(records))
    return len(records)
