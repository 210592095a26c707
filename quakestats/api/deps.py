# File: quakestats/api/deps.py

from collections.abc import Generator
from functools import lru_cache

from quakestats.core.config import settings
from quakestats.db.session import get_sessionmaker
from quakestats.services.quake_source import InMemoryQuakeSource, QuakeSource, SqlQuakeSource


@lru_cache
def get_memory_source() -> InMemoryQuakeSource:
    return InMemoryQuakeSource()


def get_quake_source() -> Generator[QuakeSource, None, None]:
    """
    FastAPI dependency that provides the configured data source.

    Database mode opens one SQLAlchemy session per request and closes it
    afterwards. Usage in route functions:
        source: QuakeSource = Depends(get_quake_source)
    """
    if settings.resolved_data_source == "memory":
        yield get_memory_source()
        return

    db = get_sessionmaker()()
    try:
        yield SqlQuakeSource(db)
    finally:
        db.close()
