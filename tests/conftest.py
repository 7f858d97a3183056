# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Make sure models are imported so Base has all tables
from golf_league import models  # noqa: F401
from golf_league.db import Base, get_db
from golf_league.main import app

# Single in-memory DB shared across the whole process
TEST_DATABASE_URL = "sqlite+pysqlite://"


@pytest.fixture(scope="session")
def engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # <<< key: share the same memory DB
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def clean_golfers(db_session):
    """Start from an empty golfers table (the in-memory DB is shared by all tests)."""
    db_session.query(models.Golfer).delete()
    db_session.commit()
    yield db_session


@pytest.fixture()
def client(clean_golfers):
    # Override app DB dependency to use our shared in-memory session
    def _get_db_override():
        yield clean_golfers

    app.dependency_overrides[get_db] = _get_db_override

    from starlette.testclient import TestClient

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
