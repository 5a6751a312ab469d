"""Unit tests for the authentication gate."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from src.core.auth import Role, create_access_token
from src.core.config import Settings
from src.domain import AuthClaims
from src.domain.errors import (
    DuplicateEmailError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)
from src.domain.services.auth_service import (
    AuthService,
    authorize,
    hash_password,
    validate_token,
    verify_password,
)
from src.infrastructure.db.models import UserStatus
from src.infrastructure.repositories import AccountRepository
from tests.utils import DEFAULT_PASSWORD, create_account


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_hash_password_returns_bcrypt_hash(self) -> None:
        hashed = hash_password("test_password_123")

        assert hashed.startswith("$2b$")
        assert len(hashed) == 60

    def test_hash_password_is_not_plaintext(self) -> None:
        password = "test_password_123"

        assert password not in hash_password(password)

    def test_hash_password_unique_per_call(self) -> None:
        """Same password should produce different hashes (due to salt)."""
        password = "test_password_123"

        assert hash_password(password) != hash_password(password)

    def test_verify_password(self) -> None:
        hashed = hash_password("TestPassword123")

        assert verify_password("TestPassword123", hashed) is True
        assert verify_password("testpassword123", hashed) is False
        assert verify_password("wrong_password", hashed) is False


class TestRegister:
    async def test_register_defaults_role_and_status(
        self, session_factory: async_sessionmaker[AsyncSession], settings: Settings
    ) -> None:
        async with session_factory() as session:
            account = await AuthService(session, settings).register(
                name="Ada", email="ada@example.com", password="secret-pass"
            )

        assert account.role is Role.USER
        assert account.status is UserStatus.ACTIVE
        assert account.hashed_password != "secret-pass"
        assert verify_password("secret-pass", account.hashed_password)

    async def test_register_duplicate_email_leaves_first_account_untouched(
        self, session_factory: async_sessionmaker[AsyncSession], settings: Settings
    ) -> None:
        async with session_factory() as session:
            first = await AuthService(session, settings).register(
                name="First", email="dup@example.com", password="first-pass", role=Role.ADMIN
            )

        async with session_factory() as session:
            with pytest.raises(DuplicateEmailError):
                await AuthService(session, settings).register(
                    name="Second", email="dup@example.com", password="second-pass"
                )

        async with session_factory() as session:
            repo = AccountRepository(session)
            stored = await repo.find_by_email("dup@example.com")
            assert await repo.count() == 1

        assert stored is not None
        assert stored.id == first.id
        assert stored.name == "First"
        assert stored.role is Role.ADMIN
        assert verify_password("first-pass", stored.hashed_password)


class TestAuthenticate:
    @pytest.mark.parametrize("status", [UserStatus.ACTIVE, UserStatus.INACTIVE])
    @pytest.mark.parametrize("role", [Role.ADMIN, Role.USER])
    async def test_valid_credentials_issue_token_with_stored_role(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        settings: Settings,
        status: UserStatus,
        role: Role,
    ) -> None:
        account = await create_account(
            session_factory, email="member@example.com", role=role, status=status
        )

        async with session_factory() as session:
            result = await AuthService(session, settings).authenticate(
                email="member@example.com", password=DEFAULT_PASSWORD
            )

        claims = validate_token(result.token, settings=settings)
        assert claims.user_id == account.id
        assert claims.role is role
        assert claims.email == "member@example.com"
        assert result.user.id == account.id

    async def test_unknown_email_and_wrong_password_fail_identically(
        self, session_factory: async_sessionmaker[AsyncSession], settings: Settings
    ) -> None:
        await create_account(session_factory, email="known@example.com")

        async with session_factory() as session:
            service = AuthService(session, settings)
            with pytest.raises(InvalidCredentialsError) as unknown:
                await service.authenticate(email="unknown@example.com", password=DEFAULT_PASSWORD)
            with pytest.raises(InvalidCredentialsError) as wrong:
                await service.authenticate(email="known@example.com", password="wrong-password")

        assert type(unknown.value) is type(wrong.value)
        assert unknown.value.message == wrong.value.message == "Invalid credentials"
        assert unknown.value.status_code == wrong.value.status_code == 400


class TestValidateToken:
    def test_missing_token(self, settings: Settings) -> None:
        with pytest.raises(MissingTokenError):
            validate_token(None, settings=settings)
        with pytest.raises(MissingTokenError):
            validate_token("", settings=settings)

    def test_valid_immediately_after_issuance(self, settings: Settings) -> None:
        token = create_access_token("user-1", role="User", email="u@example.com", settings=settings)

        claims = validate_token(token, settings=settings)

        assert claims == AuthClaims(
            user_id="user-1",
            role=Role.USER,
            email="u@example.com",
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )
        assert claims.expires_at - claims.issued_at == timedelta(hours=24)

    def test_still_valid_just_before_expiry(self, settings: Settings) -> None:
        issued_at = datetime.now(UTC) - timedelta(hours=23, minutes=59)
        token = create_access_token("user-1", role="User", issued_at=issued_at, settings=settings)

        assert validate_token(token, settings=settings).user_id == "user-1"

    def test_invalid_after_twenty_four_hours(self, settings: Settings) -> None:
        issued_at = datetime.now(UTC) - timedelta(hours=24, seconds=1)
        token = create_access_token("user-1", role="User", issued_at=issued_at, settings=settings)

        with pytest.raises(InvalidTokenError):
            validate_token(token, settings=settings)

    def test_token_from_another_secret_is_invalid(self, settings: Settings) -> None:
        other = settings.model_copy(update={"jwt_secret": "some-other-secret"})
        token = create_access_token("user-1", role="Admin", settings=other)

        with pytest.raises(InvalidTokenError):
            validate_token(token, settings=settings)

    def test_malformed_token_is_invalid(self, settings: Settings) -> None:
        with pytest.raises(InvalidTokenError):
            validate_token("abc.def.ghi", settings=settings)


class TestAuthorize:
    def test_matching_role_passes(self) -> None:
        claims = AuthClaims(user_id="admin-1", role=Role.ADMIN)

        assert authorize(claims, Role.ADMIN) is claims

    def test_mismatched_role_is_forbidden(self) -> None:
        claims = AuthClaims(user_id="user-1", role=Role.USER)

        with pytest.raises(ForbiddenError) as exc_info:
            authorize(claims, Role.ADMIN)

        assert exc_info.value.status_code == 403
