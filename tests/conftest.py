"""Shared fixtures: in-memory SQLite database and a FastAPI test client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from demo_api.database import Base, build_engine, get_db
from main import app


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager, so the lifespan never touches the real database
    yield TestClient(app)
    app.dependency_overrides.clear()
