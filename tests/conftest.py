"""
Shared fixtures: a test-environment app wired to in-memory fakes.

Repositories are swapped through app.dependency_overrides; bcrypt runs at its
minimum cost so signup and login stay fast.
"""
from typing import Callable, Dict

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.deps import get_user_repo, get_workout_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeUserRepository, FakeWorkoutRepository
from tests.helpers import TEST_JWT_SECRET


@pytest.fixture
def settings() -> Settings:
    return Settings(
        environment="test",
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
        supabase_url="https://example.supabase.co",
        supabase_service_role_key="service-role-key",
        _env_file=None,
    )


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def workout_repo() -> FakeWorkoutRepository:
    return FakeWorkoutRepository()


@pytest.fixture
def app(settings, user_repo, workout_repo) -> FastAPI:
    app = create_app(settings=settings)
    app.dependency_overrides[get_user_repo] = lambda: user_repo
    app.dependency_overrides[get_workout_repo] = lambda: workout_repo
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def signup(client) -> Callable[..., Dict]:
    """Register through the API and return the response body."""

    def _signup(name: str = "Ann", email: str = "ann@x.com", password: str = "secret1") -> Dict:
        response = client.post(
            "/auth/signup",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _signup
