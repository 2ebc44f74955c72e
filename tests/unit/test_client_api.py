"""
Unit tests for client/api_client.py using httpx.MockTransport.
"""
import json

import httpx
import pytest

from client.api_client import ApiError, ApiUnavailable, WorkoutTrackerClient

pytestmark = pytest.mark.unit

USER = {"id": "u1", "name": "Ann", "email": "ann@x.com"}
WORKOUT = {
    "id": "w1",
    "user_id": "u1",
    "name": "Leg Day",
    "exercises": [{"name": "Squat", "sets": 3, "reps": 8, "weight": 60.0}],
    "created_at": "2024-01-01T10:00:00+00:00",
    "updated_at": None,
}


def _client(handler) -> WorkoutTrackerClient:
    return WorkoutTrackerClient("http://api.test/", transport=httpx.MockTransport(handler))


class TestAuthCalls:

    def test_signup_posts_fields(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"token": "t", "user": USER})

        result = _client(handler).signup("Ann", "ann@x.com", "secret1")

        assert seen == {
            "path": "/auth/signup",
            "body": {"name": "Ann", "email": "ann@x.com", "password": "secret1"},
        }
        assert result.token == "t"
        assert result.user.name == "Ann"

    def test_login_failure_raises_api_error_with_server_message(self):
        def handler(request):
            return httpx.Response(400, json={"message": "Invalid credentials"})

        with pytest.raises(ApiError) as exc_info:
            _client(handler).login("ann@x.com", "wrong")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Invalid credentials"
        assert not exc_info.value.is_auth_error

    def test_get_user_sends_bearer_token(self):
        def handler(request):
            assert request.headers["Authorization"] == "Bearer tok"
            return httpx.Response(200, json=USER)

        assert _client(handler).get_user("tok").email == "ann@x.com"

    def test_unauthorized(self):
        def handler(request):
            return httpx.Response(401, json={"message": "Token expired"})

        with pytest.raises(ApiError) as exc_info:
            _client(handler).get_user("tok")
        assert exc_info.value.is_auth_error


class TestWorkoutCalls:

    def test_list_workouts(self):
        def handler(request):
            assert request.method == "GET"
            assert request.url.path == "/workouts"
            return httpx.Response(200, json=[WORKOUT])

        workouts = _client(handler).list_workouts("tok")
        assert workouts[0].exercises[0].weight == 60.0

    def test_create_workout(self):
        def handler(request):
            assert request.method == "POST"
            assert json.loads(request.content)["name"] == "Leg Day"
            return httpx.Response(201, json=WORKOUT)

        workout = _client(handler).create_workout("tok", "Leg Day", WORKOUT["exercises"])
        assert workout.id == "w1"

    def test_update_workout(self):
        def handler(request):
            assert request.method == "PUT"
            assert request.url.path == "/workouts/w1"
            return httpx.Response(200, json={**WORKOUT, "updated_at": "2024-01-02T10:00:00+00:00"})

        workout = _client(handler).update_workout("tok", "w1", "Leg Day", WORKOUT["exercises"])
        assert workout.updated_at is not None

    def test_delete_workout(self):
        def handler(request):
            assert request.method == "DELETE"
            return httpx.Response(200, json={"message": "Workout deleted", "id": "w1"})

        assert _client(handler).delete_workout("tok", "w1") == "w1"

    def test_not_found(self):
        def handler(request):
            return httpx.Response(404, json={"message": "Workout not found"})

        with pytest.raises(ApiError) as exc_info:
            _client(handler).delete_workout("tok", "w1")
        assert exc_info.value.status_code == 404


class TestTransportFailures:

    def test_connect_error_is_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(ApiUnavailable):
            _client(handler).list_workouts("tok")

    def test_timeout_is_unavailable(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        with pytest.raises(ApiUnavailable):
            _client(handler).list_workouts("tok")

    def test_non_json_error_body(self):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(ApiError) as exc_info:
            _client(handler).list_workouts("tok")
        assert exc_info.value.message == "Bad Gateway"

    def test_non_json_success_body(self):
        def handler(request):
            return httpx.Response(200, text="<html>captive portal</html>")

        with pytest.raises(ApiError) as exc_info:
            _client(handler).list_workouts("tok")
        assert exc_info.value.status_code == 200
        assert exc_info.value.message == "Workout Tracker API returned an invalid response"
