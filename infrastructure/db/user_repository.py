"""
Supabase implementation of UserRepository.

The users table carries a unique constraint on email; a violation surfaces
from PostgREST as Postgres error code 23505 and is reported as ConflictError.
"""
import logging
import uuid
from typing import Any, Dict, Optional

from supabase import Client

from application.exceptions import ConflictError, InternalError

logger = logging.getLogger(__name__)

TABLE = "users"
UNIQUE_VIOLATION = "23505"


class SupabaseUserRepository:
    """
    Supabase implementation of UserRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Get a user by exact email."""
        try:
            result = (
                self._client.table(TABLE)
                .select("*")
                .eq("email", email)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to look up user by email: {e}")
            raise InternalError("Error looking up user", str(e)) from e
        return result.data[0] if result.data else None

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get a user by ID."""
        try:
            uuid.UUID(str(user_id))
        except ValueError:
            return None

        try:
            result = (
                self._client.table(TABLE)
                .select("*")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get user {user_id}: {e}")
            raise InternalError("Error looking up user", str(e)) from e
        return result.data[0] if result.data else None

    def create(self, name: str, email: str, password_hash: str) -> Dict[str, Any]:
        """Insert a new user row."""
        data = {
            "name": name,
            "email": email,
            "password_hash": password_hash,
        }
        try:
            result = self._client.table(TABLE).insert(data).execute()
        except Exception as e:
            if getattr(e, "code", None) == UNIQUE_VIOLATION:
                raise ConflictError("User already exists") from e
            logger.error(f"Failed to create user: {e}")
            error_msg = str(e)
            if "PGRST" in error_msg or "row-level security" in error_msg.lower():
                logger.error("RLS/Permissions error: use SUPABASE_SERVICE_ROLE_KEY for the backend API")
            raise InternalError("Error creating user", error_msg) from e

        if not result.data:
            raise InternalError("Error creating user", "insert returned no rows")
        return result.data[0]

    def ping(self) -> None:
        """Run a trivial query to prove the store answers."""
        try:
            self._client.table(TABLE).select("id").limit(1).execute()
        except Exception as e:
            logger.error(f"Store ping failed: {e}")
            raise InternalError("Store unreachable", str(e)) from e
