"""
HTTP client for the Workout Tracker API.

Wraps every endpoint the user-facing application needs. Responses are
parsed into the same domain models the server returns, so callers work with
Workout and UserProfile rather than raw dicts.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from domain.models import AuthResult, UserProfile, Workout

logger = logging.getLogger(__name__)


class ApiClientError(Exception):
    """Base exception for Workout Tracker client errors."""

    pass


class ApiUnavailable(ApiClientError):
    """Raised when the API cannot be reached or times out."""

    pass


class ApiError(ApiClientError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_auth_error(self) -> bool:
        return self.status_code == 401


class WorkoutTrackerClient:
    """
    Synchronous client for the Workout Tracker API.

    Usage:
        with WorkoutTrackerClient("http://localhost:8001") as api:
            result = api.login("ann@x.com", "secret1")
            workouts = api.list_workouts(result.token)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8001")
            timeout: Request timeout in seconds
            transport: Optional transport, e.g. httpx.MockTransport in tests
        """
        self._base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self._base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "WorkoutTrackerClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # =========================================================================
    # Transport
    # =========================================================================

    def _request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            response = self._http.request(method, path, json=json, headers=headers)
        except httpx.ConnectError as e:
            logger.error(f"Workout Tracker API unavailable: {e}")
            raise ApiUnavailable(
                f"Workout Tracker API is not available at {self._base_url}"
            ) from e
        except httpx.TimeoutException as e:
            logger.error(f"Workout Tracker API timeout: {e}")
            raise ApiUnavailable("Workout Tracker API request timed out") from e

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                logger.error(f"{method} {path} returned a non-JSON body: {e}")
                raise ApiError(
                    "Workout Tracker API returned an invalid response",
                    response.status_code,
                ) from e

        message = _error_message(response)
        logger.debug(f"{method} {path} -> {response.status_code}: {message}")
        raise ApiError(message, response.status_code)

    # =========================================================================
    # Auth
    # =========================================================================

    def signup(self, name: str, email: str, password: str) -> AuthResult:
        data = self._request(
            "POST",
            "/auth/signup",
            json={"name": name, "email": email, "password": password},
        )
        return AuthResult.model_validate(data)

    def login(self, email: str, password: str) -> AuthResult:
        data = self._request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password},
        )
        return AuthResult.model_validate(data)

    def get_user(self, token: str) -> UserProfile:
        """Fetch the token's profile; a 401 means the token is no longer usable."""
        return UserProfile.model_validate(self._request("GET", "/auth/user", token=token))

    # =========================================================================
    # Workouts
    # =========================================================================

    def list_workouts(self, token: str) -> List[Workout]:
        data = self._request("GET", "/workouts", token=token)
        return [Workout.model_validate(item) for item in data]

    def create_workout(
        self,
        token: str,
        name: str,
        exercises: List[Dict[str, Any]],
    ) -> Workout:
        data = self._request(
            "POST",
            "/workouts",
            token=token,
            json={"name": name, "exercises": exercises},
        )
        return Workout.model_validate(data)

    def update_workout(
        self,
        token: str,
        workout_id: str,
        name: str,
        exercises: List[Dict[str, Any]],
    ) -> Workout:
        data = self._request(
            "PUT",
            f"/workouts/{workout_id}",
            token=token,
            json={"name": name, "exercises": exercises},
        )
        return Workout.model_validate(data)

    def delete_workout(self, token: str, workout_id: str) -> str:
        data = self._request("DELETE", f"/workouts/{workout_id}", token=token)
        return data["id"]


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {response.status_code}"
