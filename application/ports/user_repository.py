"""
User Repository Interface (Port).

This module defines the abstract interface for the credential store.
"""
from typing import Any, Dict, Optional, Protocol


class UserRepository(Protocol):
    """
    Abstract interface for user identity records.

    Records are plain dicts with the keys id, name, email and password_hash.
    Users are created and read; no operation updates or deletes them.
    """

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """
        Look up a user by exact (case-sensitive) email.

        Returns:
            User record or None if no user has that email
        """
        ...

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Look up a user by ID.

        Returns:
            User record or None if not found
        """
        ...

    def create(self, name: str, email: str, password_hash: str) -> Dict[str, Any]:
        """
        Persist a new user.

        Raises:
            ConflictError: If the email is already registered
            InternalError: On store failure

        Returns:
            The stored user record including its generated id
        """
        ...

    def ping(self) -> None:
        """
        Check that the store is reachable.

        Raises:
            InternalError: If the store cannot be queried
        """
        ...
