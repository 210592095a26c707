# File: tests/conftest.py

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from quakestats.api.deps import get_quake_source
from quakestats.db.init_db import init_db, seed_initial_data
from quakestats.main import app
from quakestats.services.quake_source import InMemoryQuakeSource


@pytest.fixture(autouse=True)
def memory_source():
    """
    Pin every API test to the sample dataset regardless of the environment.
    """
    source = InMemoryQuakeSource()
    app.dependency_overrides[get_quake_source] = lambda: source
    yield source
    app.dependency_overrides.clear()


@pytest.fixture
def sqlite_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def seeded_session(sqlite_engine):
    with Session(sqlite_engine) as db:
        seed_initial_data(db)
        yield db
