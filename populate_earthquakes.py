"""
Create the earthquakes table and seed it with the sample events.

Run this from the repo root, with DATABASE_URL (or DB_HOST and friends)
pointing at the target database:

    (.venv) python populate_earthquakes.py

Rows are only inserted when the table is empty.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from quakestats.core.config import settings
from quakestats.core.logging_config import configure_logging
from quakestats.db.init_db import init_db, seed_initial_data
from quakestats.db.session import check_connection, get_engine

logger = logging.getLogger("populate_earthquakes")


def main(engine: Optional[Engine] = None) -> int:
    engine = engine or get_engine()

    if not check_connection(engine):
        logger.error("Cannot reach %s, nothing populated", engine.url.render_as_string())
        return 1

    init_db(engine)
    with Session(engine) as db:
        inserted = seed_initial_data(db)

    logger.info("Inserted %d new earthquakes rows", inserted)
    return 0


if __name__ == "__main__":
    configure_logging(settings.log_level)
    raise SystemExit(main())
