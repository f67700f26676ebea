"""Fixed sample catalog served when the store cannot answer a read."""

from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from app.schemas.property import PropertyDetail
from app.services.filters import PropertyFilter


class FallbackDataset:
    """Read-only, versioned set of sample listings ordered newest first."""

    def __init__(self, version: str, records: Iterable[Mapping[str, Any]]) -> None:
        self.version = version
        items = [PropertyDetail.model_validate(dict(record)) for record in records]
        items.sort(key=lambda item: item.created_at, reverse=True)
        self._items: tuple[PropertyDetail, ...] = tuple(items)
        self._by_id = {item.id: item for item in self._items}

    def __len__(self) -> int:
        return len(self._items)

    @property
    def ids(self) -> list[str]:
        return [item.id for item in self._items]

    def get(self, property_id: str) -> PropertyDetail | None:
        return self._by_id.get(property_id)

    def featured(self, max_count: int) -> list[PropertyDetail]:
        return [item for item in self._items if item.featured][:max_count]

    def search(self, filters: PropertyFilter) -> list[PropertyDetail]:
        return [item for item in self._items if filters.matches(item)]


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=UTC)


FALLBACK_VERSION = "2023.10"

SAMPLE_LISTINGS: tuple[dict[str, Any], ...] = (
    {
        "id": "luxury-villa-1",
        "title": "Luxury Oceanfront Villa",
        "description": (
            "Stunning villa with direct beach access and panoramic ocean views. "
            "Features include infinity pool, smart home automation, gourmet kitchen, "
            "wine cellar, home theater, and private beach access."
        ),
        "price": 3200000,
        "type": "VILLA",
        "status": "ACTIVE",
        "bedrooms": 5,
        "bathrooms": 4,
        "sqft": 4500,
        "year_built": 2020,
        "address": "123 Beach Boulevard",
        "city": "Miami",
        "state": "FL",
        "zip_code": "33139",
        "latitude": 25.7617,
        "longitude": -80.1918,
        "amenities": [
            "Infinity Pool",
            "Private Beach Access",
            "Smart Home",
            "Wine Cellar",
            "Home Theater",
            "Gym",
            "Outdoor Kitchen",
        ],
        "images": [
            "https://images.unsplash.com/photo-1613977257363-707ba9348227?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1512917774080-9991f1c4c750?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1545324418-cc1a3fa10c00?w=1200&auto=format&fit=crop",
        ],
        "virtual_tour": "https://my.matterport.com/show/?m=example123",
        "floor_plan": "https://example.com/floorplans/villa-1.pdf",
        "featured": True,
        "agent_id": "agent-1",
        "agent": {
            "id": "agent-1",
            "name": "John Luxury",
            "email": "john@luxeliving.com",
            "phone": "+1 (305) 555-0123",
            "role": "AGENT",
        },
        "created_at": _ts("2023-01-15T00:00:00"),
        "updated_at": _ts("2023-06-20T00:00:00"),
    },
    {
        "id": "downtown-penthouse-2",
        "title": "Modern Downtown Penthouse",
        "description": (
            "Luxury penthouse with floor-to-ceiling windows offering breathtaking city "
            "views. Features include private rooftop access with outdoor kitchen, smart "
            "home system, heated floors, and premium finishes throughout."
        ),
        "price": 1850000,
        "type": "APARTMENT",
        "status": "ACTIVE",
        "bedrooms": 3,
        "bathrooms": 3,
        "sqft": 2800,
        "year_built": 2019,
        "address": "456 Skyline Avenue",
        "city": "New York",
        "state": "NY",
        "zip_code": "10001",
        "latitude": 40.7128,
        "longitude": -74.0060,
        "amenities": [
            "Private Rooftop",
            "Concierge",
            "Fitness Center",
            "Valet Parking",
            "Pet Spa",
            "Smart Home",
            "Heated Floors",
        ],
        "images": [
            "https://images.unsplash.com/photo-1545324418-cc1a3fa10c00?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1486406146926-c627a92ad1ab?w=1200&auto=format&fit=crop",
        ],
        "virtual_tour": "https://my.matterport.com/show/?m=example456",
        "floor_plan": "https://example.com/floorplans/penthouse-2.pdf",
        "featured": True,
        "agent_id": "agent-2",
        "agent": {
            "id": "agent-2",
            "name": "Sarah Urban",
            "email": "sarah@luxeliving.com",
            "phone": "+1 (212) 555-0456",
            "role": "AGENT",
        },
        "created_at": _ts("2023-02-10T00:00:00"),
        "updated_at": _ts("2023-07-15T00:00:00"),
    },
    {
        "id": "mountain-cabin-3",
        "title": "Mountain Retreat Cabin",
        "description": (
            "Cozy luxury cabin nestled in the mountains with panoramic views. Features "
            "include stone fireplace, outdoor hot tub, sauna, direct access to hiking "
            "trails, and custom woodwork throughout."
        ),
        "price": 950000,
        "type": "HOUSE",
        "status": "ACTIVE",
        "bedrooms": 4,
        "bathrooms": 3,
        "sqft": 3200,
        "year_built": 2018,
        "address": "789 Mountain View Road",
        "city": "Aspen",
        "state": "CO",
        "zip_code": "81611",
        "latitude": 39.1911,
        "longitude": -106.8175,
        "amenities": [
            "Stone Fireplace",
            "Outdoor Hot Tub",
            "Sauna",
            "Hiking Trail Access",
            "Garage",
            "Mountain Views",
            "Outdoor Kitchen",
            "Game Room",
        ],
        "images": [
            "https://images.unsplash.com/photo-1441974231531-c6227db76b6e?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1476820865390-c52aeebb9891?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1568605114967-8130f3a36994?w=1200&auto=format&fit=crop",
        ],
        "virtual_tour": "https://my.matterport.com/show/?m=example789",
        "floor_plan": "https://example.com/floorplans/cabin-3.pdf",
        "featured": True,
        "agent_id": "agent-3",
        "agent": {
            "id": "agent-3",
            "name": "Michael Woods",
            "email": "michael@luxeliving.com",
            "phone": "+1 (970) 555-0789",
            "role": "AGENT",
        },
        "created_at": _ts("2023-03-05T00:00:00"),
        "updated_at": _ts("2023-08-10T00:00:00"),
    },
    {
        "id": "urban-loft-4",
        "title": "Urban Loft Studio",
        "description": (
            "Modern loft in the heart of the city with exposed brick walls, high "
            "ceilings, and industrial-chic design. Perfect for urban professionals."
        ),
        "price": 650000,
        "type": "APARTMENT",
        "status": "ACTIVE",
        "bedrooms": 1,
        "bathrooms": 1,
        "sqft": 900,
        "year_built": 2015,
        "address": "101 Urban Street",
        "city": "Chicago",
        "state": "IL",
        "zip_code": "60601",
        "latitude": 41.8781,
        "longitude": -87.6298,
        "amenities": [
            "Exposed Brick",
            "14-foot Ceilings",
            "City Views",
            "Hardwood Floors",
            "Modern Kitchen",
        ],
        "images": [
            "https://images.unsplash.com/photo-1486406146926-c627a92ad1ab?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267?w=1200&auto=format&fit=crop",
        ],
        "virtual_tour": None,
        "floor_plan": "https://example.com/floorplans/loft-4.pdf",
        "featured": False,
        "agent_id": "agent-4",
        "agent": {
            "id": "agent-4",
            "name": "David City",
            "email": "david@luxeliving.com",
            "phone": "+1 (312) 555-0912",
            "role": "AGENT",
        },
        "created_at": _ts("2023-04-12T00:00:00"),
        "updated_at": _ts("2023-09-18T00:00:00"),
    },
    {
        "id": "family-home-5",
        "title": "Suburban Family Home",
        "description": (
            "Perfect family home in excellent school district with large backyard, "
            "updated kitchen, and finished basement. Great neighborhood with parks nearby."
        ),
        "price": 850000,
        "type": "HOUSE",
        "status": "ACTIVE",
        "bedrooms": 4,
        "bathrooms": 3,
        "sqft": 2800,
        "year_built": 2012,
        "address": "202 Maple Street",
        "city": "Austin",
        "state": "TX",
        "zip_code": "73301",
        "latitude": 30.2672,
        "longitude": -97.7431,
        "amenities": [
            "Large Backyard",
            "Playground",
            "2-Car Garage",
            "Updated Kitchen",
            "Finished Basement",
            "Patio",
            "Garden",
        ],
        "images": [
            "https://images.unsplash.com/photo-1568605114967-8130f3a36994?w=1200&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1570129477492-45c003edd2be?w=1200&auto=format&fit=crop",
        ],
        "virtual_tour": "https://my.matterport.com/show/?m=example012",
        "floor_plan": "https://example.com/floorplans/home-5.pdf",
        "featured": False,
        "agent_id": "agent-5",
        "agent": {
            "id": "agent-5",
            "name": "Lisa Suburbs",
            "email": "lisa@luxeliving.com",
            "phone": "+1 (512) 555-0345",
            "role": "AGENT",
        },
        "created_at": _ts("2023-05-20T00:00:00"),
        "updated_at": _ts("2023-10-25T00:00:00"),
    },
)

FALLBACK_DATASET = FallbackDataset(FALLBACK_VERSION, SAMPLE_LISTINGS)
