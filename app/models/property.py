"""Property database model."""

import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.models.enums import PropertyStatus, PropertyType

if TYPE_CHECKING:
    from app.models.saved_property import SavedProperty
    from app.models.user import User


class Property(Base):
    """A real-estate listing.

    ``amenities`` and ``images`` are stored as JSON array text; use
    ``app.services.field_codec`` to read or write them.
    """

    __tablename__ = "properties"

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    price: Mapped[int] = mapped_column(index=True)
    type: Mapped[PropertyType] = mapped_column(String(20), index=True)
    status: Mapped[PropertyStatus] = mapped_column(String(20), default=PropertyStatus.ACTIVE)
    bedrooms: Mapped[int] = mapped_column(default=0, index=True)
    bathrooms: Mapped[int] = mapped_column(default=0)
    sqft: Mapped[int] = mapped_column(default=0)
    year_built: Mapped[int | None] = mapped_column(nullable=True)

    # Location
    address: Mapped[str] = mapped_column(String(255))
    city: Mapped[str] = mapped_column(String(100))
    state: Mapped[str] = mapped_column(String(50))
    zip_code: Mapped[str] = mapped_column(String(20))
    latitude: Mapped[float | None] = mapped_column(nullable=True)
    longitude: Mapped[float | None] = mapped_column(nullable=True)

    # Encoded list fields
    amenities: Mapped[str] = mapped_column(Text, default="[]")
    images: Mapped[str] = mapped_column(Text, default="[]")

    virtual_tour: Mapped[str | None] = mapped_column(String(500), nullable=True)
    floor_plan: Mapped[str | None] = mapped_column(String(500), nullable=True)
    featured: Mapped[bool] = mapped_column(default=False, index=True)

    agent_id: Mapped[str | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    # Relationships
    agent: Mapped["User | None"] = relationship(back_populates="properties")
    saved_by: Mapped[list["SavedProperty"]] = relationship(
        back_populates="property",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
