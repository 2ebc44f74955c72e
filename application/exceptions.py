"""
Application-layer exceptions.

These exceptions are used across the application and infrastructure layers.
Each carries the HTTP status it renders as; the mapping to a JSON response
lives in backend/main.py so use cases never import FastAPI.
"""
from typing import Optional


class WorkoutTrackerError(Exception):
    """Base class for every error the API reports to a caller."""

    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(WorkoutTrackerError):
    """Malformed or missing input."""

    status_code = 400


class AuthenticationError(WorkoutTrackerError):
    """Missing, invalid or expired bearer token."""

    status_code = 401


class InvalidCredentialsError(AuthenticationError):
    """
    Login failed.

    Raised for an unknown email and for a wrong password alike, so a caller
    cannot tell which accounts exist.
    """

    status_code = 400

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Invalid credentials", detail)


class NotFoundError(WorkoutTrackerError):
    """
    Resource absent or not owned by the caller.

    The two cases are deliberately indistinguishable.
    """

    status_code = 404


class ConflictError(WorkoutTrackerError):
    """A unique field (user email) is already taken."""

    status_code = 400


class InternalError(WorkoutTrackerError):
    """Store or primitive failure."""

    status_code = 500
