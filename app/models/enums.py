"""Enum definitions for listings and accounts."""

from enum import Enum


class PropertyType(str, Enum):
    """Kind of dwelling a listing describes."""

    HOUSE = "HOUSE"
    APARTMENT = "APARTMENT"
    VILLA = "VILLA"
    CONDO = "CONDO"
    TOWNHOUSE = "TOWNHOUSE"
    LAND = "LAND"


class PropertyStatus(str, Enum):
    """Market status of a listing."""

    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    SOLD = "SOLD"


class UserRole(str, Enum):
    """Account role."""

    ADMIN = "ADMIN"
    AGENT = "AGENT"
    BUYER = "BUYER"
