"""
Authentication primitives: password hashing, bearer tokens, and the Access Guard.

- Passwords are hashed with bcrypt (random salt per record).
- Bearer tokens are HS256 JWTs signed with the shared JWT_SECRET, carrying the
  user ID in "sub" and expiring after JWT_EXPIRY_HOURS (24 by default).
- authenticate_bearer() verifies an Authorization header without touching the
  credential store; trust rests entirely on the signature.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from application.exceptions import AuthenticationError, InternalError, ValidationError
from backend.settings import Settings

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_ISSUER = "workout-tracker"

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """bcrypt wrapper with a configurable cost factor."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            # Corrupt or non-bcrypt hash in the store
            logger.warning("Stored password hash could not be parsed")
            return False


class TokenService:
    """Issues and verifies signed bearer tokens."""

    def __init__(self, secret: str, expiry_hours: int = 24):
        self._secret = secret
        self._expiry = timedelta(hours=expiry_hours)

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        """
        Sign a token binding user_id.

        Args:
            user_id: Identity to encode in the "sub" claim
            now: Issue time (defaults to the current UTC time)

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iss": JWT_ISSUER,
            "iat": issued_at,
            "exp": issued_at + self._expiry,
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
        except jwt.PyJWTError as e:
            logger.error(f"JWT sign error: {e}")
            raise InternalError("Error creating token", str(e)) from e

    def verify(self, token: str) -> str:
        """
        Verify signature, issuer and expiry, and return the user ID.

        Raises:
            AuthenticationError: If the token is expired, forged or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                issuer=JWT_ISSUER,
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token expired")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Token verification failed: {e}")
            raise AuthenticationError("Token is not valid", str(e))

        user_id = payload.get("sub")
        if not user_id:
            raise AuthenticationError("Token missing user ID")
        return str(user_id)


def authenticate_bearer(authorization: Optional[str], token_service: TokenService) -> str:
    """
    Access Guard: validate an Authorization header and return the user ID.

    Expects "Bearer <token>".

    Raises:
        AuthenticationError: If the header or token is absent or invalid
    """
    if not authorization:
        raise AuthenticationError("No token, authorization denied")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        raise AuthenticationError("Invalid authorization header format")

    token = token.strip()
    if not token:
        raise AuthenticationError("No token, authorization denied")

    return token_service.verify(token)


def build_token_service(settings: Settings) -> TokenService:
    return TokenService(secret=settings.jwt_secret, expiry_hours=settings.jwt_expiry_hours)


def build_password_hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)
