"""Shared pytest fixtures for business records tests."""

import os
import tempfile

# Point the application at a throwaway database before it is imported
_default_db_dir = tempfile.mkdtemp(prefix="business-records-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_default_db_dir, 'default.db')}")
os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.core.database import build_engine
from app.core.dependencies import get_db, get_session_store
from app.core.security import InMemorySessionStore
from app.main import app
from app.services.database_service import initialize_database
from app.services.object_storage_service import ObjectStorageService, get_object_storage
from tests.factories import business_fields


@pytest.fixture
def engine(tmp_path):
    """Engine bound to a temporary SQLite file."""
    test_engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Initialized database session for service tests."""
    db = session_factory()
    initialize_database(db)
    yield db
    db.close()


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def object_storage(tmp_path):
    return ObjectStorageService(
        storage_dir=str(tmp_path / "objects"),
        public_base_url="http://testserver",
    )


@pytest.fixture
def client(db_session, session_factory, session_store, object_storage):
    """TestClient wired to the temporary database and stores."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_object_storage] = lambda: object_storage

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def admin_token(client):
    response = client.post(
        "/api/auth/login",
        json={"userType": "admin", "identifier": "quanadmin", "password": "01020811"},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def employee_token(client):
    response = client.post(
        "/api/auth/login",
        json={"userType": "employee", "identifier": "jane", "password": "royalvietnam"},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def sample_business(db_session):
    from app.services.business_service import create_business

    return create_business(db_session, business_fields())
