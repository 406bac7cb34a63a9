import os

# Routes are addressed under the default prefix throughout the suite
os.environ.pop("API_PREFIX", None)
os.environ.pop("SHOWROOM_TEST_DB", None)
os.environ.setdefault("PYTEST_RUNNING", "1")

import pytest
from contextvars import ContextVar
from fastapi.testclient import TestClient

import showroom.db.database as db_module
from showroom.db import models
from showroom.api.main import app

_current_session: ContextVar[object] = ContextVar("_current_session", default=None)
# Fallback for threadpool contexts where ContextVar may not propagate
_GLOBAL_SESSION = None


@pytest.fixture(autouse=True)
def db_session():
    """Fresh schema and a shared session per test.

    Repository calls commit, so isolation comes from rebuilding the tables
    rather than rolling back a transaction.
    """
    models.Base.metadata.drop_all(bind=db_module.engine)
    models.Base.metadata.create_all(bind=db_module.engine)
    session = db_module.SessionLocal()
    token = _current_session.set(session)
    global _GLOBAL_SESSION
    _GLOBAL_SESSION = session
    try:
        yield session
    finally:
        _current_session.reset(token)
        _GLOBAL_SESSION = None
        session.close()


def _override_get_db():
    session = _current_session.get()
    if session is not None:
        yield session
        return
    if _GLOBAL_SESSION is not None:
        yield _GLOBAL_SESSION
        return
    session = db_module.SessionLocal()
    try:
        yield session
    finally:
        session.close()


app.dependency_overrides[db_module.get_db] = _override_get_db


@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def lenient_client():
    """Client that returns 500 responses instead of re-raising server errors."""
    return TestClient(app, raise_server_exceptions=False)
