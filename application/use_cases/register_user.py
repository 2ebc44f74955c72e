"""
Register User Use Case.

Creates a user record with a bcrypt-hashed password and signs a bearer
token for the new account.
"""
import logging
from typing import Any

from application.exceptions import ConflictError, ValidationError
from application.ports import UserRepository
from backend.auth import PasswordHasher, TokenService
from domain.models import AuthResult, UserProfile

logger = logging.getLogger(__name__)


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


class RegisterUserUseCase:
    """
    Use case for signing up.

    Orchestrates the following workflow:
    1. Require name, email and password
    2. Reject an email that is already registered
    3. Hash the password and persist the user
    4. Issue a token bound to the new user ID

    Usage:
        >>> use_case = RegisterUserUseCase(user_repo, password_hasher, token_service)
        >>> result = use_case.execute(name="Ann", email="ann@x.com", password="secret1")
        >>> result.user.email
        'ann@x.com'
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._token_service = token_service

    def execute(self, name: Any, email: Any, password: Any) -> AuthResult:
        """
        Register a new user.

        Raises:
            ValidationError: If a field is missing or empty
            ConflictError: If the email is already registered
        """
        name = _clean(name)
        email = _clean(email)
        if not name or not email or not isinstance(password, str) or not password:
            raise ValidationError("Please provide all required fields")

        if self._user_repo.get_by_email(email) is not None:
            raise ConflictError("User already exists")

        password_hash = self._password_hasher.hash(password)
        # The store's unique constraint still guards concurrent signups.
        record = self._user_repo.create(name=name, email=email, password_hash=password_hash)

        user = UserProfile.from_record(record)
        logger.info(f"User created: {user.id}")
        return AuthResult(token=self._token_service.issue(user.id), user=user)
