"""Catalog query service - listing reads with fallback to sample data."""

import logging
from dataclasses import dataclass

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from app.core.exceptions import NotFoundError
from app.models.property import Property
from app.schemas.property import DataSource, PropertyDetail, PropertySummary
from app.services.fallback import FALLBACK_DATASET, FallbackDataset
from app.services.filters import ListingQuery, PropertyFilter
from app.services.pagination import PageWindow, paginate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogResult:
    """Listings plus the source that produced them."""

    items: list[PropertySummary]
    source: DataSource
    fallback_version: str | None = None


@dataclass(frozen=True)
class CatalogPage:
    """One page of listings with the full match count."""

    items: list[PropertySummary]
    total: int
    window: PageWindow
    source: DataSource
    fallback_version: str | None = None


@dataclass(frozen=True)
class CatalogItem:
    """A single listing with the source that produced it."""

    item: PropertyDetail
    source: DataSource
    fallback_version: str | None = None


def filter_clauses(filters: PropertyFilter) -> list[ColumnElement[bool]]:
    """Translate a PropertyFilter into SQL conditions, one per set field."""
    clauses: list[ColumnElement[bool]] = []
    if filters.type is not None:
        clauses.append(Property.type == filters.type)
    if filters.min_price is not None:
        clauses.append(Property.price >= filters.min_price)
    if filters.max_price is not None:
        clauses.append(Property.price <= filters.max_price)
    if filters.min_bedrooms is not None:
        clauses.append(Property.bedrooms >= filters.min_bedrooms)
    if filters.featured is not None:
        clauses.append(Property.featured.is_(filters.featured))
    return clauses


class CatalogService:
    """
    Read-side access to listings.

    Every read is answered: when the store raises, the session is rolled back
    and the same query runs against the fallback dataset instead. Results are
    tagged with their DataSource so clients can tell sample data apart.
    """

    def __init__(self, db: Session, fallback: FallbackDataset = FALLBACK_DATASET) -> None:
        self.db = db
        self.fallback = fallback

    def _degrade(self, operation: str, exc: SQLAlchemyError) -> None:
        self.db.rollback()
        logger.warning(
            "Store unavailable during %s, serving fallback dataset %s: %s",
            operation,
            self.fallback.version,
            exc,
        )

    def list_featured(self, max_count: int) -> CatalogResult:
        """Return up to ``max_count`` featured listings, newest first."""
        stmt = (
            select(Property)
            .options(joinedload(Property.agent))
            .where(Property.featured.is_(True))
            .order_by(Property.created_at.desc())
            .limit(max_count)
        )
        try:
            rows = self.db.scalars(stmt).all()
        except SQLAlchemyError as exc:
            self._degrade("list_featured", exc)
            items = [
                PropertySummary.model_validate(item.model_dump())
                for item in self.fallback.featured(max_count)
            ]
            return CatalogResult(items, DataSource.FALLBACK, self.fallback.version)

        return CatalogResult(
            [PropertySummary.model_validate(row) for row in rows],
            DataSource.LIVE,
        )

    def list_properties(self, query: ListingQuery) -> CatalogPage:
        """Return one page of listings matching ``query`` and the total match count."""
        clauses = filter_clauses(query.filters)
        count_stmt = select(func.count()).select_from(Property).where(*clauses)
        try:
            total = self.db.scalar(count_stmt) or 0
            window = paginate(total, query.page, query.limit)
            stmt = (
                select(Property)
                .options(joinedload(Property.agent))
                .where(*clauses)
                .order_by(Property.created_at.desc())
                .offset(window.skip)
                .limit(window.limit)
            )
            rows = self.db.scalars(stmt).all()
        except SQLAlchemyError as exc:
            self._degrade("list_properties", exc)
            return self._fallback_page(query)

        return CatalogPage(
            items=[PropertySummary.model_validate(row) for row in rows],
            total=total,
            window=window,
            source=DataSource.LIVE,
        )

    def _fallback_page(self, query: ListingQuery) -> CatalogPage:
        matches = self.fallback.search(query.filters)
        window = paginate(len(matches), query.page, query.limit)
        page_items = matches[window.skip : window.skip + window.limit]
        return CatalogPage(
            items=[PropertySummary.model_validate(item.model_dump()) for item in page_items],
            total=len(matches),
            window=window,
            source=DataSource.FALLBACK,
            fallback_version=self.fallback.version,
        )

    def get_property(self, property_id: str) -> CatalogItem:
        """
        Return a single listing.

        The store is asked first; if it has no such row or cannot be reached,
        the fallback dataset is checked by id before reporting NotFoundError.
        """
        stmt = (
            select(Property)
            .options(joinedload(Property.agent))
            .where(Property.id == property_id)
        )
        try:
            row = self.db.scalars(stmt).first()
        except SQLAlchemyError as exc:
            self._degrade("get_property", exc)
            row = None

        if row is not None:
            return CatalogItem(PropertyDetail.model_validate(row), DataSource.LIVE)

        sample = self.fallback.get(property_id)
        if sample is not None:
            return CatalogItem(sample, DataSource.FALLBACK, self.fallback.version)

        raise NotFoundError(
            f"Property not found: {property_id}",
            available_ids=self.fallback.ids,
        )
