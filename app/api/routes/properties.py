"""Property API routes."""

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_catalog_service, get_current_user, get_saved_property_service
from app.core.config import settings
from app.models.user import User
from app.schemas.property import (
    FeaturedPropertiesResponse,
    PropertyDetailResponse,
    PropertyListResponse,
)
from app.schemas.saved_property import (
    MessageResponse,
    SavePropertyRequest,
    SavedPropertyListResponse,
    SavedPropertyRead,
    SavedPropertyResponse,
)
from app.services.catalog import CatalogService
from app.services.filters import build_listing_query
from app.services.saved_properties import SavedPropertyService

router = APIRouter(prefix="/properties", tags=["properties"])


@router.get("", response_model=PropertyListResponse)
def list_properties(
    type: str | None = None,
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    bedrooms: str | None = None,
    featured: str | None = None,
    page: str | None = None,
    limit: str | None = None,
    catalog: CatalogService = Depends(get_catalog_service),
) -> PropertyListResponse:
    """
    List properties matching every supplied filter, newest first.

    Parameters are accepted as text; unknown types and non-numeric values are
    ignored instead of rejected.
    """
    query = build_listing_query(
        type=type,
        min_price=min_price,
        max_price=max_price,
        bedrooms=bedrooms,
        featured=featured,
        page=page,
        limit=limit,
    )
    result = catalog.list_properties(query)
    return PropertyListResponse(
        count=len(result.items),
        total=result.total,
        page=result.window.page,
        pages=result.window.pages,
        data=result.items,
        source=result.source,
        fallback_version=result.fallback_version,
    )


@router.get("/featured", response_model=FeaturedPropertiesResponse)
def list_featured_properties(
    limit: int = Query(settings.FEATURED_LIMIT, ge=1, le=50),
    catalog: CatalogService = Depends(get_catalog_service),
) -> FeaturedPropertiesResponse:
    """List featured properties, newest first."""
    result = catalog.list_featured(limit)
    return FeaturedPropertiesResponse(
        count=len(result.items),
        data=result.items,
        source=result.source,
        fallback_version=result.fallback_version,
    )


@router.get("/saved", response_model=SavedPropertyListResponse)
def list_saved_properties(
    current_user: User = Depends(get_current_user),
    service: SavedPropertyService = Depends(get_saved_property_service),
) -> SavedPropertyListResponse:
    """List the current user's saved properties, newest first."""
    saved = service.list_for_user(current_user.id)
    data = [SavedPropertyRead.model_validate(row) for row in saved]
    return SavedPropertyListResponse(count=len(data), data=data)


@router.delete("/saved/{saved_id}", response_model=MessageResponse)
def remove_saved_property(
    saved_id: str,
    current_user: User = Depends(get_current_user),
    service: SavedPropertyService = Depends(get_saved_property_service),
) -> MessageResponse:
    """Remove one of the current user's saved properties."""
    service.remove(current_user.id, saved_id)
    return MessageResponse(message="Property removed from saved")


@router.get("/{property_id}", response_model=PropertyDetailResponse)
def get_property(
    property_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
) -> PropertyDetailResponse:
    """Get a property by ID."""
    result = catalog.get_property(property_id)
    return PropertyDetailResponse(
        data=result.item,
        source=result.source,
        fallback_version=result.fallback_version,
    )


@router.post(
    "/{property_id}/save",
    response_model=SavedPropertyResponse,
    status_code=status.HTTP_201_CREATED,
)
def save_property(
    property_id: str,
    payload: SavePropertyRequest | None = None,
    current_user: User = Depends(get_current_user),
    service: SavedPropertyService = Depends(get_saved_property_service),
) -> SavedPropertyResponse:
    """Save a property for the current user."""
    note = payload.note if payload else None
    saved = service.save(current_user.id, property_id, note)
    return SavedPropertyResponse(data=SavedPropertyRead.model_validate(saved))
