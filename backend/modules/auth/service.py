"""
Authentication service implementation.

Creates accounts with bcrypt-hashed passwords and issues/validates
HS256 access tokens with PyJWT.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from starlette.concurrency import run_in_threadpool

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    SignupResponse,
    TokenPayload,
    UserPublic,
    UserRecord,
)
from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    TokenSecretNotConfiguredError,
)
from .repository import UserRepository

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with a per-password salt."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash. Never raises on bad hashes."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Stores users through UserRepository and signs tokens with the
    configured JWT secret.
    """

    def __init__(
        self,
        repository: UserRepository,
        settings: Optional[Settings] = None,
    ):
        self._repository = repository
        self._settings = settings or get_settings()

    async def signup(self, request: SignupRequest) -> SignupResponse:
        """Create a user; the unique index catches signups that race this check."""
        email = str(request.email)
        if self._repository.email_exists(email):
            raise EmailAlreadyRegisteredError(email)

        # bcrypt is CPU-bound; keep it off the event loop
        password_hash = await run_in_threadpool(
            hash_password, request.password, self._settings.bcrypt_rounds
        )
        user = self._repository.create_user(
            email=email,
            password_hash=password_hash,
            name=request.name,
        )
        logger.info("User signed up: %s", user.id)
        return SignupResponse(user=UserPublic.from_record(user))

    async def login(self, request: LoginRequest) -> LoginResponse:
        user = self._repository.get_by_email(request.email)
        if user is None or not await run_in_threadpool(
            verify_password, request.password, user.password_hash
        ):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()

        token = self.issue_token(user)
        logger.info("User logged in: %s", user.id)
        return LoginResponse(token=token, user=UserPublic.from_record(user))

    def issue_token(self, user: UserRecord) -> str:
        """Sign an access token binding the user's ID, valid for jwt_expire_days."""
        secret = self._require_secret()
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user.id,
            "email": user.email,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(days=self._settings.jwt_expire_days)).timestamp()),
        }
        return jwt.encode(payload, secret, algorithm=self._settings.jwt_algorithm)

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate an access token and return the authenticated user.

        Every failure mode raises an error with the same message.
        """
        if not token:
            raise MissingTokenError()

        secret = self._require_secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
            token_payload = TokenPayload(**payload)
            return AuthenticatedUser(
                id=token_payload.sub,
                email=token_payload.email,
                issued_at=datetime.fromtimestamp(token_payload.iat, tz=timezone.utc),
            )
        except jwt.PyJWTError:
            raise InvalidTokenError()
        except ValueError:
            # payload claims did not fit TokenPayload/AuthenticatedUser
            raise InvalidTokenError()

    async def get_user_by_id(self, user_id: str) -> Optional[UserPublic]:
        user = self._repository.get_by_id(user_id)
        return UserPublic.from_record(user) if user else None

    def _require_secret(self) -> str:
        if not self._settings.jwt_secret:
            raise TokenSecretNotConfiguredError()
        return self._settings.jwt_secret
