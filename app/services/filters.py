"""Translate raw listing query parameters into a typed filter."""

import re
from dataclasses import dataclass
from typing import Any

from app.core.config import settings
from app.models.enums import PropertyType

# Bound parameters must fit a signed 64-bit SQL INTEGER
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class PropertyFilter:
    """Conjunctive listing filter; ``None`` fields are not applied."""

    type: PropertyType | None = None
    min_price: int | None = None
    max_price: int | None = None
    min_bedrooms: int | None = None
    featured: bool | None = None

    def matches(self, record: Any) -> bool:
        """Evaluate every clause against an object exposing listing attributes."""
        if self.type is not None and record.type != self.type:
            return False
        if self.min_price is not None and record.price < self.min_price:
            return False
        if self.max_price is not None and record.price > self.max_price:
            return False
        if self.min_bedrooms is not None and record.bedrooms < self.min_bedrooms:
            return False
        if self.featured is not None and record.featured != self.featured:
            return False
        return True


@dataclass(frozen=True)
class ListingQuery:
    """A validated listing request: filter plus page number and page size."""

    filters: PropertyFilter
    page: int = 1
    limit: int = 10


def parse_int(value: str | None) -> int | None:
    """
    Parse base-10 integer text, returning None for anything else.

    Only ASCII digits with an optional sign are accepted, and values that do
    not fit in 64 bits are treated as absent.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _INTEGER_TEXT.fullmatch(text):
        return None
    number = int(text)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def parse_property_type(value: str | None) -> PropertyType | None:
    """Return the matching PropertyType, or None for unknown values."""
    if value is None:
        return None
    try:
        return PropertyType(value)
    except ValueError:
        return None


def _positive_or_one(value: str | None, default: int) -> int:
    parsed = parse_int(value) if value is not None else default
    if parsed is None or parsed < 1:
        return 1
    return parsed


def build_listing_query(
    type: str | None = None,
    min_price: str | None = None,
    max_price: str | None = None,
    bedrooms: str | None = None,
    featured: str | None = None,
    page: str | None = None,
    limit: str | None = None,
) -> ListingQuery:
    """
    Build a ListingQuery from untyped query parameters.

    Unknown types and non-numeric numbers are dropped rather than rejected.
    ``featured`` only filters when it is the literal string "true". Page and
    limit fall back to 1 when missing a usable positive value, and limit is
    capped at MAX_PAGE_SIZE. Page is capped so its row offset fits in 64 bits.
    """
    filters = PropertyFilter(
        type=parse_property_type(type),
        min_price=parse_int(min_price),
        max_price=parse_int(max_price),
        min_bedrooms=parse_int(bedrooms),
        featured=True if featured == "true" else None,
    )
    limit_num = min(_positive_or_one(limit, settings.DEFAULT_PAGE_SIZE), settings.MAX_PAGE_SIZE)
    # keeps the offset (page - 1) * limit inside 64 bits
    page_num = min(_positive_or_one(page, 1), INT64_MAX // limit_num)
    return ListingQuery(filters=filters, page=page_num, limit=limit_num)
