"""Shared fixtures: in-memory stores, a test client and row factories."""

from datetime import UTC, datetime, timedelta
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.core.database import Base, create_db_engine, create_session_factory, get_db
from app.main import app
from app.models.enums import PropertyType, UserRole
from app.models.property import Property
from app.models.user import User
from app.services.auth import create_token_for_user, get_password_hash
from app.services.field_codec import encode_list

BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)


def _memory_engine():
    return create_db_engine("sqlite:///:memory:", poolclass=StaticPool)


@pytest.fixture
def test_db():
    """Create an in-memory test database with the full schema."""
    engine = _memory_engine()
    Base.metadata.create_all(bind=engine)
    db = create_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def unavailable_db():
    """A session on a store whose schema was never created; every query fails."""
    engine = _memory_engine()
    db = create_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


def _client_for(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def client(test_db):
    """Create a test client backed by the in-memory database."""
    yield _client_for(test_db)
    app.dependency_overrides.clear()


@pytest.fixture
def unavailable_client(unavailable_db):
    """Create a test client whose store cannot answer queries."""
    yield _client_for(unavailable_db)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(test_db):
    """Factory for persisted users."""
    seq = count(1)

    def _make_user(role: UserRole = UserRole.BUYER, **overrides) -> User:
        n = next(seq)
        fields = {
            "email": f"user{n}@example.com",
            "hashed_password": get_password_hash("password123"),
            "name": f"User {n}",
            "phone": f"(555) 000-{n:04d}",
            "role": role,
        }
        fields.update(overrides)
        user = User(**fields)
        test_db.add(user)
        test_db.commit()
        test_db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_property(test_db):
    """Factory for persisted listings; each call is one day newer than the last."""
    seq = count(1)

    def _make_property(**overrides) -> Property:
        n = next(seq)
        fields = {
            "title": f"Listing {n}",
            "description": "A place to live",
            "price": 500000,
            "type": PropertyType.HOUSE,
            "bedrooms": 3,
            "bathrooms": 2,
            "sqft": 1800,
            "address": f"{n} Test Street",
            "city": "Austin",
            "state": "TX",
            "zip_code": "73301",
            "amenities": ["garage", "garden"],
            "images": [f"https://example.com/{n}.jpg"],
            "featured": False,
            "created_at": BASE_TIME + timedelta(days=n),
        }
        fields.update(overrides)
        for key in ("amenities", "images"):
            if isinstance(fields[key], list):
                fields[key] = encode_list(fields[key])
        prop = Property(**fields)
        test_db.add(prop)
        test_db.commit()
        test_db.refresh(prop)
        return prop

    return _make_property


@pytest.fixture
def auth_headers():
    """Build a bearer header for a user."""

    def _auth_headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_token_for_user(user)}"}

    return _auth_headers
