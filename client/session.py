"""
Client session state.

The logged-in state is an explicit SessionContext value that callers pass
around; nothing is kept in module globals. SessionStore persists it to a
JSON file between runs, and bootstrap_session re-validates a persisted token
against the API before any protected command runs.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

from client.api_client import ApiError, WorkoutTrackerClient
from domain.models import AuthResult, UserProfile

logger = logging.getLogger(__name__)


class SessionContext(BaseModel):
    """Token and user of the current session; both None when logged out."""

    token: Optional[str] = None
    user: Optional[UserProfile] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token) and self.user is not None

    @classmethod
    def from_auth(cls, result: AuthResult) -> "SessionContext":
        return cls(token=result.token, user=result.user)


class SessionStore:
    """JSON-file persistence for a SessionContext."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SessionContext:
        """
        Read the persisted session.

        A missing or unreadable file yields an anonymous session.
        """
        if not self._path.exists():
            return SessionContext()
        try:
            return SessionContext.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable session file {self._path}: {e}")
            return SessionContext()

    def save(self, context: SessionContext) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        # The file holds a bearer token; it is never readable by others
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(context.model_dump(mode="json"), indent=2))

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


def bootstrap_session(store: SessionStore, api: WorkoutTrackerClient) -> SessionContext:
    """
    Restore the persisted session, confirming the token with GET /auth/user.

    A rejected token (401) or a vanished user (404) clears the persisted
    session and returns an anonymous one. Other failures, including
    ApiUnavailable, propagate and leave the file untouched.
    """
    context = store.load()
    if not context.token:
        return SessionContext()

    try:
        user = api.get_user(context.token)
    except ApiError as e:
        if e.is_auth_error or e.status_code == 404:
            logger.info(f"Stored session rejected ({e.message}); logging out")
            store.clear()
            return SessionContext()
        raise

    refreshed = SessionContext(token=context.token, user=user)
    if refreshed.user != context.user:
        store.save(refreshed)
    return refreshed


def login(store: SessionStore, api: WorkoutTrackerClient, email: str, password: str) -> SessionContext:
    """Log in and persist the new session."""
    context = SessionContext.from_auth(api.login(email, password))
    store.save(context)
    return context


def signup(
    store: SessionStore,
    api: WorkoutTrackerClient,
    name: str,
    email: str,
    password: str,
) -> SessionContext:
    """Register, then persist the session exactly like a login."""
    context = SessionContext.from_auth(api.signup(name, email, password))
    store.save(context)
    return context


def logout(store: SessionStore) -> SessionContext:
    """Forget the persisted session. The token itself stays valid until it expires."""
    store.clear()
    return SessionContext()
