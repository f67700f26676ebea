"""Tests for the seed script."""

from sqlalchemy import func, select

from app.models.property import Property
from app.models.saved_property import SavedProperty
from app.models.user import User
from app.services.auth import authenticate_user
from app.services.field_codec import decode_list
from scripts.seed_data import SEED_PASSWORD, SEED_PROPERTIES, seed_database


def _count(db, model) -> int:
    return db.scalar(select(func.count()).select_from(model))


def test_seed_empty_database(test_db) -> None:
    """Test that an empty database receives users, listings and a bookmark."""
    assert seed_database(test_db) is True

    assert _count(test_db, User) == 2
    assert _count(test_db, Property) == len(SEED_PROPERTIES)
    assert _count(test_db, SavedProperty) == 1

    villa = test_db.scalars(select(Property).where(Property.price == 1250000)).one()
    assert decode_list(villa.amenities)[0] == "pool"
    assert villa.agent.email == "sarah.johnson@luxeliving.com"
    assert authenticate_user(test_db, "john.doe@example.com", SEED_PASSWORD) is not None


def test_seed_is_skipped_when_users_exist(test_db, make_user) -> None:
    """Test that seeding leaves an existing database alone."""
    make_user()
    assert seed_database(test_db) is False
    assert _count(test_db, Property) == 0
