"""
Pytest fixtures for the storefront API tests.
Runs the app against an in-memory SQLite database.
"""
import os

os.environ.setdefault("JWT_SECRET", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app


@pytest.fixture
def db_session():
    """Fresh database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    """API test client bound to the test database"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== Auth Helpers ==============

@pytest.fixture
def register_user(client):
    """Register a user and return its bearer headers"""
    def _register(email, password="s3cret-pass"):
        response = client.post("/api/auth/register", json={"email": email, "password": password})
        assert response.status_code == 201, response.text
        login = client.post("/api/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200, login.text
        return {"Authorization": f"Bearer {login.json()['accessToken']}"}
    return _register


@pytest.fixture
def alice(register_user):
    return register_user("alice@example.com")


@pytest.fixture
def bob(register_user):
    return register_user("bob@example.com")


@pytest.fixture
def alice_store(client, alice):
    response = client.post("/api/store", json={"name": "Alice Shop"}, headers=alice)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def bob_store(client, bob):
    response = client.post("/api/store", json={"name": "Bob Shop"}, headers=bob)
    assert response.status_code == 201, response.text
    return response.json()
