"""
Login User Use Case.

Checks an email/password pair against the credential store and issues a
bearer token. Unknown emails and wrong passwords fail identically.
"""
import logging
from typing import Any

from application.exceptions import InvalidCredentialsError, ValidationError
from application.ports import UserRepository
from backend.auth import PasswordHasher, TokenService
from domain.models import AuthResult, UserProfile

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for logging in with email and password."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._token_service = token_service

    def execute(self, email: Any, password: Any) -> AuthResult:
        """
        Authenticate and issue a token.

        Raises:
            ValidationError: If email or password is missing
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        email = email.strip() if isinstance(email, str) else ""
        if not email or not isinstance(password, str) or not password:
            raise ValidationError("Please provide email and password")

        record = self._user_repo.get_by_email(email)
        if record is None:
            logger.warning("Login failed: unknown email")
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, record["password_hash"]):
            logger.warning(f"Login failed: wrong password for user {record['id']}")
            raise InvalidCredentialsError()

        user = UserProfile.from_record(record)
        logger.info(f"Login successful for user {user.id}")
        return AuthResult(token=self._token_service.issue(user.id), user=user)
