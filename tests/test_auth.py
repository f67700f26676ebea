"""Tests for authentication endpoints and services."""

from datetime import timedelta

import pytest

from app.core.exceptions import AuthenticationError, ConflictError, InvalidInputError
from app.models.enums import UserRole
from app.schemas.user import UserCreate
from app.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    decode_token,
    get_password_hash,
    get_user_by_email,
    verify_password,
)


@pytest.fixture
def test_user(make_user):
    """Create a test user whose password is "testpassword123"."""
    return make_user(
        email="test@example.com",
        name="Test User",
        hashed_password=get_password_hash("testpassword123"),
    )


# =============================================================================
# Unit Tests: Password Hashing
# =============================================================================


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_get_password_hash_returns_bcrypt_format(self):
        """Test that hash is in bcrypt format."""
        hashed = get_password_hash("password123")
        assert hashed.startswith("$2")

    def test_get_password_hash_different_for_same_input(self):
        """Test that same password produces different hashes (due to salt)."""
        assert get_password_hash("password123") != get_password_hash("password123")

    def test_verify_password_correct(self):
        """Test verify_password returns True for correct password."""
        hashed = get_password_hash("mysecretpassword")
        assert verify_password("mysecretpassword", hashed) is True

    def test_verify_password_incorrect(self):
        """Test verify_password returns False for wrong password."""
        hashed = get_password_hash("correctpassword")
        assert verify_password("wrongpassword", hashed) is False

    def test_verify_password_malformed_hash(self):
        """Test verify_password returns False for a stored value that is not a hash."""
        assert verify_password("password", "plain-text") is False

    def test_verify_password_too_long_for_bcrypt(self):
        """Test verify_password returns False rather than raising past 72 bytes."""
        hashed = get_password_hash("password123")
        assert verify_password("x" * 80, hashed) is False


# =============================================================================
# Unit Tests: JWT Tokens
# =============================================================================


class TestJWTTokens:
    """Tests for JWT token functions."""

    def test_decode_token_valid(self):
        """Test decode_token with valid token."""
        token = create_access_token(data={"sub": "user-1", "role": "AGENT"})
        token_data = decode_token(token)
        assert token_data.user_id == "user-1"
        assert token_data.role == UserRole.AGENT

    def test_decode_token_invalid(self):
        """Test decode_token with invalid token."""
        with pytest.raises(AuthenticationError) as exc_info:
            decode_token("invalid.token.here")
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Could not validate credentials"

    def test_decode_token_expired(self):
        """Test decode_token with an expired token."""
        token = create_access_token(data={"sub": "user-1"}, expires_delta=timedelta(seconds=-5))
        with pytest.raises(AuthenticationError) as exc_info:
            decode_token(token)
        assert exc_info.value.status_code == 401

    def test_decode_token_missing_subject(self):
        """Test decode_token with token missing subject."""
        token = create_access_token(data={"other": "data"})
        with pytest.raises(AuthenticationError) as exc_info:
            decode_token(token)
        assert exc_info.value.status_code == 401


# =============================================================================
# Unit Tests: User Database Operations
# =============================================================================


class TestUserDatabaseOperations:
    """Tests for user database operations."""

    def test_get_user_by_email_is_case_insensitive(self, test_db, test_user):
        """Test get_user_by_email matches regardless of case."""
        user = get_user_by_email(test_db, "Test@Example.com")
        assert user is not None
        assert user.id == test_user.id

    def test_authenticate_user_valid(self, test_db, test_user):
        """Test authenticate_user with valid credentials."""
        user = authenticate_user(test_db, "test@example.com", "testpassword123")
        assert user is not None
        assert user.id == test_user.id

    def test_authenticate_user_wrong_password(self, test_db, test_user):
        """Test authenticate_user with wrong password."""
        assert authenticate_user(test_db, "test@example.com", "wrongpassword") is None

    def test_authenticate_user_nonexistent_user(self, test_db):
        """Test authenticate_user with non-existent user."""
        assert authenticate_user(test_db, "nobody@example.com", "password") is None

    def test_create_user_success(self, test_db):
        """Test create_user hashes the password and defaults to BUYER."""
        user = create_user(
            test_db,
            UserCreate(email="New@Example.com", name="New User", password="newpassword123"),
        )
        assert user.email == "new@example.com"
        assert user.role == UserRole.BUYER
        assert user.hashed_password != "newpassword123"

    def test_create_user_duplicate_email(self, test_db, test_user):
        """Test create_user with duplicate email."""
        with pytest.raises(ConflictError, match="Email already registered"):
            create_user(
                test_db,
                UserCreate(email="test@example.com", name="Someone", password="password123"),
            )

    def test_create_admin_rejected(self, test_db):
        """Test that nobody can register themselves as an administrator."""
        with pytest.raises(InvalidInputError):
            create_user(
                test_db,
                UserCreate(
                    email="boss@example.com",
                    name="Boss",
                    password="password123",
                    role=UserRole.ADMIN,
                ),
            )


# =============================================================================
# Integration Tests: Endpoints
# =============================================================================


class TestRegisterEndpoint:
    """Tests for POST /api/auth/register endpoint."""

    def test_register_success(self, client):
        """Test successful user registration."""
        response = client.post(
            "/api/auth/register",
            json={
                "email": "agent@example.com",
                "password": "password123",
                "name": "Agent Smith",
                "role": "AGENT",
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "agent@example.com"
        assert data["role"] == "AGENT"
        assert "id" in data
        assert "password" not in data
        assert "hashed_password" not in data

    def test_register_duplicate_email(self, client, test_user):
        """Test registration with duplicate email."""
        response = client.post(
            "/api/auth/register",
            json={"email": "test@example.com", "password": "password123", "name": "Dup"},
        )
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Email already registered"}

    def test_register_invalid_email(self, client):
        """Test registration with invalid email format."""
        response = client.post(
            "/api/auth/register",
            json={"email": "not-an-email", "password": "password123", "name": "X"},
        )
        assert response.status_code == 422

    def test_register_missing_password(self, client):
        """Test registration with missing password."""
        response = client.post(
            "/api/auth/register",
            json={"email": "someone@example.com", "name": "X"},
        )
        assert response.status_code == 422

    @pytest.mark.parametrize("password", ["x" * 73, "é" * 37])
    def test_register_password_longer_than_72_bytes(self, client, password):
        """Test that passwords bcrypt cannot hash are rejected as invalid input."""
        response = client.post(
            "/api/auth/register",
            json={"email": "long@example.com", "password": password, "name": "Long"},
        )
        assert response.status_code == 422

    def test_register_password_of_exactly_72_bytes(self, client):
        """Test that the longest hashable password is accepted."""
        response = client.post(
            "/api/auth/register",
            json={"email": "edge@example.com", "password": "x" * 72, "name": "Edge"},
        )
        assert response.status_code == 201


class TestLoginEndpoint:
    """Tests for POST /api/auth/login and GET /api/auth/me."""

    def test_login_then_me(self, client, test_user):
        """Test that a login token identifies the user."""
        response = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "testpassword123"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert decode_token(data["access_token"]).user_id == test_user.id

        me = client.get(
            "/api/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"}
        )
        assert me.status_code == 200
        assert me.json()["email"] == "test@example.com"

    def test_login_wrong_password(self, client, test_user):
        """Test login with wrong password."""
        response = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "wrongpassword"},
        )
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Incorrect email or password"}

    def test_login_with_overlong_password(self, client, test_user):
        """Test that an overlong password is just a failed login."""
        response = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "x" * 100},
        )
        assert response.status_code == 401

    def test_me_for_deleted_user(self, client, test_db, test_user, auth_headers):
        """Test that a token for a removed account is rejected."""
        headers = auth_headers(test_user)
        test_db.delete(test_user)
        test_db.commit()
        assert client.get("/api/auth/me", headers=headers).status_code == 401
