"""API dependencies for authentication and service wiring."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import AuthenticationError, StoreUnavailableError
from app.models.user import User
from app.services.auth import INVALID_CREDENTIALS, decode_token, get_user
from app.services.catalog import CatalogService
from app.services.saved_properties import SavedPropertyService

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer token to a user, or fail with 401."""
    if credentials is None:
        raise AuthenticationError(INVALID_CREDENTIALS)
    token_data = decode_token(credentials.credentials)
    try:
        user = get_user(db, token_data.user_id)
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreUnavailableError("Authentication is temporarily unavailable") from exc
    if user is None:
        raise AuthenticationError(INVALID_CREDENTIALS)
    return user


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    """Catalog service bound to the request's session."""
    return CatalogService(db)


def get_saved_property_service(db: Session = Depends(get_db)) -> SavedPropertyService:
    """Saved-property service bound to the request's session."""
    return SavedPropertyService(db)
