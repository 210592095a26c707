# File: quakestats/db/session.py

import logging
from functools import lru_cache

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from quakestats.core.config import Settings, settings

logger = logging.getLogger(__name__)


def build_engine(cfg: Settings) -> Engine:
    url = cfg.sqlalchemy_url

    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})

    connect_args = {}
    if cfg.db_ssl and url.startswith("postgresql"):
        connect_args["sslmode"] = "require"

    return create_engine(
        url,
        pool_size=cfg.db_pool_size,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


# Built on first use so the in-memory mode never needs a database driver
@lru_cache
def get_engine() -> Engine:
    return build_engine(settings)


@lru_cache
def get_sessionmaker() -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def check_connection(engine: Engine) -> bool:
    """
    Run a trivial query and log whether the database answered.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database connection check failed for %s", engine.url.render_as_string())
        return False

    logger.info("Database connected successfully (%s)", engine.dialect.name)
    return True
