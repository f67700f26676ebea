"""Property Pydantic schemas for response formatting."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from app.models.enums import PropertyStatus, PropertyType, UserRole
from app.services.field_codec import decode_list


class DataSource(str, Enum):
    """Where a catalog response came from."""

    LIVE = "live"
    FALLBACK = "fallback"


class AgentSummary(BaseModel):
    """Agent projection embedded in listing results."""

    id: str
    name: str
    email: str
    phone: str | None = None

    model_config = ConfigDict(from_attributes=True, frozen=True)


class AgentDetail(AgentSummary):
    """Agent projection embedded in a single-property response."""

    role: UserRole


class PropertyRead(BaseModel):
    """Listing with its list fields decoded."""

    id: str
    title: str
    description: str
    price: int
    type: PropertyType
    status: PropertyStatus
    bedrooms: int
    bathrooms: int
    sqft: int
    year_built: int | None = None
    address: str
    city: str
    state: str
    zip_code: str
    latitude: float | None = None
    longitude: float | None = None
    amenities: list[str]
    images: list[str]
    virtual_tour: str | None = None
    floor_plan: str | None = None
    featured: bool
    agent_id: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @field_validator("amenities", "images", mode="before")
    @classmethod
    def decode_list_field(cls, v: object) -> object:
        """Decode the stored JSON text form; lists pass through unchanged."""
        if v is None or isinstance(v, str):
            return decode_list(v)
        return v


class PropertySummary(PropertyRead):
    """Listing as it appears in list and featured results."""

    agent: AgentSummary | None = None


class PropertyDetail(PropertyRead):
    """Listing as it appears on its own page."""

    agent: AgentDetail | None = None


class PropertyListResponse(BaseModel):
    """Paginated listing envelope."""

    success: bool = True
    count: int
    total: int
    page: int
    pages: int
    data: list[PropertySummary]
    source: DataSource
    fallback_version: str | None = None


class FeaturedPropertiesResponse(BaseModel):
    """Featured listings envelope."""

    success: bool = True
    count: int
    data: list[PropertySummary]
    source: DataSource
    fallback_version: str | None = None


class PropertyDetailResponse(BaseModel):
    """Single listing envelope."""

    success: bool = True
    data: PropertyDetail
    source: DataSource
    fallback_version: str | None = None
