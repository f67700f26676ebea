"""Seed script to populate the database with sample data."""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import Base, create_db_engine, create_session_factory
from app.core.logging import setup_logging
from app.models.enums import PropertyType, UserRole
from app.models.property import Property
from app.models.saved_property import SavedProperty
from app.models.user import User
from app.services.auth import get_password_hash
from app.services.field_codec import encode_list

logger = logging.getLogger(__name__)

SEED_PASSWORD = "password123"

SEED_PROPERTIES = [
    {
        "title": "Modern Villa with Ocean View",
        "description": (
            "Luxurious 5-bedroom villa with panoramic ocean views, infinity pool, and "
            "smart home features. Located in exclusive Malibu neighborhood."
        ),
        "price": 1250000,
        "type": PropertyType.VILLA,
        "bedrooms": 5,
        "bathrooms": 4,
        "sqft": 3200,
        "year_built": 2020,
        "address": "123 Ocean Drive",
        "city": "Malibu",
        "state": "CA",
        "zip_code": "90265",
        "latitude": 34.0259,
        "longitude": -118.7798,
        "amenities": ["pool", "gym", "garage", "garden", "smart-home", "security-system"],
        "images": [
            "https://images.unsplash.com/photo-1613490493576-7fde63acd811?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1518780664697-55e3ad937233?w=1200&auto=format&fit=crop",
        ],
        "virtual_tour": "https://matterport.com/tour123",
        "floor_plan": "/floorplans/villa-123.pdf",
        "featured": True,
    },
    {
        "title": "Downtown Luxury Apartment",
        "description": (
            "Modern apartment in the heart of downtown with concierge service, rooftop "
            "terrace, and premium finishes. Walking distance to restaurants and shops."
        ),
        "price": 850000,
        "type": PropertyType.APARTMENT,
        "bedrooms": 3,
        "bathrooms": 2,
        "sqft": 1800,
        "year_built": 2019,
        "address": "456 Skyline Blvd",
        "city": "San Francisco",
        "state": "CA",
        "zip_code": "94105",
        "latitude": 37.7749,
        "longitude": -122.4194,
        "amenities": ["concierge", "rooftop", "gym", "parking", "elevator", "pet-friendly"],
        "images": [
            "https://images.unsplash.com/photo-1545324418-cc1a3fa10c00?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688?w=1200&auto=format&fit=crop",
        ],
        "featured": True,
    },
    {
        "title": "Suburban Family Home",
        "description": (
            "Spacious family home in quiet neighborhood with large backyard, updated "
            "kitchen, and excellent schools nearby. Perfect for growing families."
        ),
        "price": 625000,
        "type": PropertyType.HOUSE,
        "bedrooms": 4,
        "bathrooms": 3,
        "sqft": 2400,
        "year_built": 2015,
        "address": "789 Maple Street",
        "city": "Austin",
        "state": "TX",
        "zip_code": "73301",
        "latitude": 30.2672,
        "longitude": -97.7431,
        "amenities": ["backyard", "fireplace", "garage", "patio", "deck", "garden"],
        "images": [
            "https://images.unsplash.com/photo-1568605114967-8130f3a36994?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1570129477492-45c003edd2be?w=1200&auto=format&fit=crop",
        ],
        "featured": False,
    },
    {
        "title": "Mountain View Cabin",
        "description": (
            "Cozy cabin with stunning mountain views, wood fireplace, and hiking trails. "
            "Perfect weekend getaway or vacation rental."
        ),
        "price": 450000,
        "type": PropertyType.HOUSE,
        "bedrooms": 3,
        "bathrooms": 2,
        "sqft": 1600,
        "year_built": 2010,
        "address": "101 Pine Road",
        "city": "Aspen",
        "state": "CO",
        "zip_code": "81611",
        "latitude": 39.1911,
        "longitude": -106.8175,
        "amenities": ["fireplace", "mountain-view", "hiking-trails", "deck", "wood-stove"],
        "images": [
            "https://images.unsplash.com/photo-1441974231531-c6227db76b6e?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1476820865390-c52aeebb9891?w=1200&auto=format&fit=crop",
        ],
        "featured": True,
    },
]


def seed_database(db: Session) -> bool:
    """
    Seed the database with sample data.

    Returns:
        True if data was created, False if users already existed

    """
    if db.scalar(select(func.count()).select_from(User)):
        logger.info("Database already has data. Skipping seed.")
        return False

    logger.info("Seeding database...")

    password_hash = get_password_hash(SEED_PASSWORD)
    agent = User(
        email="sarah.johnson@luxeliving.com",
        hashed_password=password_hash,
        name="Sarah Johnson",
        phone="(555) 123-4567",
        role=UserRole.AGENT,
    )
    buyer = User(
        email="john.doe@example.com",
        hashed_password=password_hash,
        name="John Doe",
        phone="(555) 987-6543",
        role=UserRole.BUYER,
    )
    db.add_all([agent, buyer])
    db.flush()
    logger.info("Created users: %s (agent), %s (buyer)", agent.email, buyer.email)

    listings = []
    for data in SEED_PROPERTIES:
        fields = dict(data)
        fields["amenities"] = encode_list(fields["amenities"])
        fields["images"] = encode_list(fields["images"])
        listings.append(Property(agent_id=agent.id, **fields))
    db.add_all(listings)
    db.flush()
    logger.info("Created %d properties", len(listings))

    db.add(
        SavedProperty(
            user_id=buyer.id,
            property_id=listings[0].id,
            note="Interested in touring this property",
        )
    )
    db.commit()
    logger.info("Created saved property for %s", buyer.email)
    return True


def main() -> None:
    """Create the schema and seed it using the configured database."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    engine = create_db_engine(settings.DATABASE_URL, timeout=settings.DB_TIMEOUT_SECONDS)
    Base.metadata.create_all(bind=engine)
    with create_session_factory(engine)() as db:
        seed_database(db)
    engine.dispose()


if __name__ == "__main__":
    main()
