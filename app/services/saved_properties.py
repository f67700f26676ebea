"""Saved-property service - a user's bookmarks of listings."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.core.exceptions import (
    ConflictError,
    NotFoundError,
    StoreUnavailableError,
    StoreWriteError,
)
from app.models.property import Property
from app.models.saved_property import SavedProperty

logger = logging.getLogger(__name__)

ALREADY_SAVED = "Property already saved"
SAVED_NOT_FOUND = "Saved property not found"


def get_saved_property(db: Session, user_id: str, property_id: str) -> SavedProperty | None:
    """Get the saved row for a (user, property) pair, if any."""
    return db.scalars(
        select(SavedProperty).where(
            SavedProperty.user_id == user_id,
            SavedProperty.property_id == property_id,
        )
    ).first()


class SavedPropertyService:
    """
    Create, list and remove saved listings.

    A (user, property) pair is either absent or saved. ``save`` on a saved pair
    and ``remove`` on an absent one are both rejected. The unique constraint on
    the table is what guarantees one row per pair; the lookup before insert
    only answers the common duplicate early.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, user_id: str, property_id: str, note: str | None = None) -> SavedProperty:
        """
        Save a listing for a user.

        Raises:
            NotFoundError: If the property does not exist
            ConflictError: If the user already saved this property
            StoreWriteError: If the row could not be committed

        """
        try:
            if self.db.get(Property, property_id) is None:
                raise NotFoundError("Property not found")

            if get_saved_property(self.db, user_id, property_id) is not None:
                raise ConflictError(ALREADY_SAVED)

            saved = SavedProperty(user_id=user_id, property_id=property_id, note=note)
            self.db.add(saved)
            self.db.commit()
            self.db.refresh(saved)
        except IntegrityError:
            self.db.rollback()
            logger.info("Concurrent save of property %s for user %s", property_id, user_id)
            raise ConflictError(ALREADY_SAVED) from None
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Failed to save property %s for user %s: %s", property_id, user_id, exc)
            raise StoreWriteError("Failed to save property, please try again") from exc

        return saved

    def list_for_user(self, user_id: str) -> list[SavedProperty]:
        """Get a user's saved listings, newest first, with their properties loaded."""
        stmt = (
            select(SavedProperty)
            .options(selectinload(SavedProperty.property))
            .where(SavedProperty.user_id == user_id)
            .order_by(SavedProperty.created_at.desc())
        )
        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Failed to list saved properties for user %s: %s", user_id, exc)
            raise StoreUnavailableError("Failed to get saved properties") from exc

    def remove(self, user_id: str, saved_id: str) -> None:
        """
        Remove a saved listing owned by ``user_id``.

        Rows belonging to other users are reported exactly like missing rows.
        """
        try:
            saved = self.db.get(SavedProperty, saved_id)
            if saved is None or saved.user_id != user_id:
                raise NotFoundError(SAVED_NOT_FOUND)

            self.db.delete(saved)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Failed to remove saved property %s: %s", saved_id, exc)
            raise StoreWriteError("Failed to remove saved property, please try again") from exc
