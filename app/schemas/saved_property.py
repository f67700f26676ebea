"""SavedProperty Pydantic schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.property import PropertyRead


class SavePropertyRequest(BaseModel):
    """Optional body for saving a listing."""

    note: str | None = Field(default=None, max_length=2000)


class SavedPropertyRead(BaseModel):
    """A saved listing joined with the listing itself."""

    id: str
    user_id: str
    property_id: str
    note: str | None = None
    created_at: datetime
    property: PropertyRead

    model_config = ConfigDict(from_attributes=True)


class SavedPropertyResponse(BaseModel):
    """Envelope for a newly saved listing."""

    success: bool = True
    data: SavedPropertyRead


class SavedPropertyListResponse(BaseModel):
    """Envelope for a user's saved listings."""

    success: bool = True
    count: int
    data: list[SavedPropertyRead]


class MessageResponse(BaseModel):
    """Envelope carrying only a message."""

    success: bool = True
    message: str
