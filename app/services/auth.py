"""Authentication service: password hashing, JWT tokens and user accounts."""

from datetime import UTC, datetime, timedelta

import bcrypt
import jwt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import AuthenticationError, ConflictError, InvalidInputError
from app.models.enums import UserRole
from app.models.user import User
from app.schemas.user import TokenData, UserCreate

INVALID_CREDENTIALS = "Could not validate credentials"


def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Create a signed JWT carrying ``data`` and an expiry claim."""
    to_encode = data.copy()
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> TokenData:
    """Decode and validate a JWT, raising 401 if it is unusable."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.InvalidTokenError:
        raise AuthenticationError(INVALID_CREDENTIALS) from None

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError(INVALID_CREDENTIALS)
    return TokenData(user_id=user_id, role=payload.get("role"))


def create_token_for_user(user: User) -> str:
    """Issue an access token identifying ``user``."""
    return create_access_token(data={"sub": user.id, "role": UserRole(user.role).value})


def get_user(db: Session, user_id: str) -> User | None:
    """Get a user by ID."""
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email address."""
    return db.scalars(select(User).where(User.email == email.lower())).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Return the user if the credentials match, else None."""
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


def create_user(db: Session, user_data: UserCreate) -> User:
    """
    Register a new account.

    Raises:
        InvalidInputError: If the account asks for the ADMIN role
        ConflictError: If the email is already registered

    """
    if user_data.role == UserRole.ADMIN:
        raise InvalidInputError("Cannot self-register as an administrator")

    if get_user_by_email(db, user_data.email):
        raise ConflictError("Email already registered")

    user = User(
        email=user_data.email.lower(),
        hashed_password=get_password_hash(user_data.password),
        name=user_data.name,
        phone=user_data.phone,
        role=user_data.role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email already registered") from None
    db.refresh(user)
    return user
