import os
import tempfile
import uuid

# point the app at a throwaway database before anything imports tasknotes
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(tempfile.gettempdir(), f"tasknotes_test_{os.getpid()}.db")

import pytest
from fastapi.testclient import TestClient
from tasknotes.main import app
from tasknotes.database import SessionLocal, Base, engine
from tasknotes.models import User


# Recreate all tables for each test
@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def register(client):
    """Register and log in a fresh user; returns (user_id, token)."""

    def _register(password="Pass123!"):
        email = f"user_{uuid.uuid4().hex[:8]}@example.com"
        r = client.post("/auth/register", json={"email": email, "password": password})
        assert r.status_code == 200
        user_id = r.json()["id"]
        r = client.post("/auth/login", json={"email": email, "password": password})
        assert r.status_code == 200
        return user_id, r.json()["token"]

    return _register


@pytest.fixture
def make_user(db):
    """Insert a user row directly, for service-level tests."""

    def _make_user():
        user = User(email=f"svc_{uuid.uuid4().hex[:8]}@example.com", password="x")
        db.add(user)
        db.commit()
        return user.id

    return _make_user
