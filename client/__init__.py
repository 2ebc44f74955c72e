"""
Client for the Workout Tracker API.

- api_client: HTTP calls over httpx
- session: persisted login state and its bootstrap check
- forms: parsing user-typed workout and login forms
- cli: the `workout-tracker` command
"""

from client.api_client import ApiError, ApiUnavailable, WorkoutTrackerClient
from client.session import SessionContext, SessionStore

__all__ = [
    "ApiError",
    "ApiUnavailable",
    "WorkoutTrackerClient",
    "SessionContext",
    "SessionStore",
]
