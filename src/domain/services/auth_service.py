"""Authentication gate: credential checks, token issuance and role enforcement."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime

import structlog
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession
from src.core.auth import Role, TokenError, create_access_token, decode_access_token
from src.core.config import Settings
from src.domain.errors import (
    DuplicateEmailError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)
from src.domain.models import AuthClaims
from src.infrastructure.db.models import UserModel, UserStatus
from src.infrastructure.repositories import AccountRepository, DuplicateKeyError

logger = structlog.get_logger()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


@dataclass(slots=True)
class AuthResult:
    token: str
    user: UserModel


class AuthService:
    """Register accounts and exchange credentials for access tokens."""

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        self.accounts = AccountRepository(session)
        self.settings = settings

    async def register(
        self,
        *,
        name: str,
        email: str,
        password: str,
        role: Role | None = None,
        status: UserStatus = UserStatus.ACTIVE,
    ) -> UserModel:
        """Create a new account.

        Raises:
            DuplicateEmailError: an account with ``email`` already exists.
        """
        role = role or Role.USER
        await logger.ainfo("register_attempt", email=email, role=role.value)

        hashed_password = await asyncio.to_thread(hash_password, password)
        account = UserModel(
            name=name,
            email=email,
            hashed_password=hashed_password,
            role=role,
            status=status,
        )

        try:
            account = await self.accounts.insert(account)
        except DuplicateKeyError as exc:
            await logger.awarning("register_duplicate_email", email=email)
            raise DuplicateEmailError() from exc

        await logger.ainfo("register_success", user_id=account.id, email=email)
        return account

    async def authenticate(self, *, email: str, password: str) -> AuthResult:
        """Verify credentials and issue a token.

        Unknown email and wrong password both raise ``InvalidCredentialsError``.
        Inactive accounts may still log in.
        """
        await logger.ainfo("login_attempt", email=email)

        account = await self.accounts.find_by_email(email)
        if account is None:
            # Burn a hash verification so both failure paths cost the same.
            await asyncio.to_thread(pwd_context.dummy_verify)
            await logger.awarning("login_failed", email=email)
            raise InvalidCredentialsError()

        if not await asyncio.to_thread(verify_password, password, account.hashed_password):
            await logger.awarning("login_failed", email=email)
            raise InvalidCredentialsError()

        token = self.issue_token(account)
        await logger.ainfo("login_success", user_id=account.id, email=email)
        return AuthResult(token=token, user=account)

    def issue_token(self, account: UserModel) -> str:
        return create_access_token(
            account.id,
            role=account.role.value,
            email=account.email,
            settings=self.settings,
        )


def validate_token(token: str | None, *, settings: Settings) -> AuthClaims:
    """Decode a bearer token into claims.

    The account store is not consulted: a token stays valid until it expires,
    even if its account has since been changed or removed.
    """
    if not token:
        raise MissingTokenError()

    try:
        payload = decode_access_token(token, settings=settings)
    except TokenError as exc:
        logger.info("token_rejected", reason=str(exc))
        raise InvalidTokenError() from exc

    return AuthClaims(
        user_id=str(payload["sub"]),
        role=Role(payload["role"]),
        email=payload.get("email", ""),
        issued_at=_from_timestamp(payload.get("iat")),
        expires_at=_from_timestamp(payload.get("exp")),
    )


def authorize(claims: AuthClaims, required_role: Role) -> AuthClaims:
    """Require an exact role match."""
    if claims.role is not required_role:
        logger.info(
            "access_forbidden",
            user_id=claims.user_id,
            role=claims.role.value,
            required_role=required_role.value,
        )
        raise ForbiddenError()
    return claims


def _from_timestamp(value: int | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value, UTC)
