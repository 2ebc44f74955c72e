"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient
from unittest.mock import MagicMock, patch

from application.exceptions import InternalError, NotFoundError
from backend.main import _configure_cors, _init_sentry, _verify_store, create_app
from backend.settings import Settings


def _app_with_failing_routes(settings: Settings) -> FastAPI:
    app = create_app(settings=settings)
    router = APIRouter()

    @router.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    @router.get("/missing")
    def missing():
        raise NotFoundError("Workout not found", "no row matched")

    app.include_router(router)
    return app


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(environment="test", _env_file=None)

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        assert app.title == "Workout Tracker API"
        assert app.version == "1.0.0"

    def test_create_app_stores_settings_on_state(self):
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert app.state.settings is settings

    def test_routes_are_registered(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        paths = {route.path for route in app.routes}
        assert {"/", "/health", "/auth/signup", "/auth/login", "/auth/user",
                "/workouts", "/workouts/{workout_id}"} <= paths


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None,
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="test",
                traces_sample_rate=0.1,
                profiles_sample_rate=0.1,
                enable_tracing=True,
            )


@pytest.mark.unit
class TestConfigureCors:
    """Test CORS configuration."""

    def test_configure_cors_adds_middleware(self):
        app = FastAPI()
        initial_middleware_count = len(app.user_middleware)

        _configure_cors(app, Settings(_env_file=None))

        assert len(app.user_middleware) == initial_middleware_count + 1

    def test_allowed_origin_gets_cors_headers(self):
        settings = Settings(
            environment="test",
            cors_allowed_origins="http://app.test",
            _env_file=None,
        )
        client = TestClient(create_app(settings=settings))
        response = client.get("/health", headers={"Origin": "http://app.test"})
        assert response.headers["access-control-allow-origin"] == "http://app.test"


@pytest.mark.unit
class TestExceptionHandlers:
    """Errors are rendered as {"message", "error"} JSON."""

    def test_unknown_route_returns_json_404(self):
        client = TestClient(create_app(settings=Settings(environment="test", _env_file=None)))
        response = client.get("/nope")
        assert response.status_code == 404
        assert response.json() == {"message": "Route not found", "path": "/nope"}

    def test_taxonomy_error_includes_detail_outside_production(self):
        app = _app_with_failing_routes(Settings(environment="test", _env_file=None))
        response = TestClient(app).get("/missing")
        assert response.status_code == 404
        assert response.json() == {"message": "Workout not found", "error": "no row matched"}

    def test_taxonomy_error_hides_detail_in_production(self):
        settings = Settings(environment="production", jwt_secret="s3cret", _env_file=None)
        app = _app_with_failing_routes(settings)
        response = TestClient(app).get("/missing")
        assert response.json() == {"message": "Workout not found"}

    def test_unhandled_exception_returns_500(self):
        app = _app_with_failing_routes(Settings(environment="test", _env_file=None))
        response = TestClient(app, raise_server_exceptions=False).get("/boom")
        assert response.status_code == 500
        assert response.json()["message"] == "Something went wrong!"
        assert "kaboom" in response.json()["error"]

    def test_malformed_json_body_returns_400(self):
        client = TestClient(create_app(settings=Settings(environment="test", _env_file=None)))
        response = client.post(
            "/auth/login",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid JSON body"


@pytest.mark.unit
class TestVerifyStore:
    """Startup store check."""

    def test_skipped_in_test_environment(self):
        with patch("infrastructure.SupabaseUserRepository") as mock_repo:
            _verify_store(Settings(environment="test", _env_file=None))
            mock_repo.assert_not_called()

    def test_skipped_when_disabled(self):
        settings = Settings(verify_store_on_startup=False, _env_file=None)
        with patch("infrastructure.SupabaseUserRepository") as mock_repo:
            _verify_store(settings)
            mock_repo.assert_not_called()

    def test_missing_credentials_abort_startup(self, monkeypatch):
        for var in ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY", "SUPABASE_ANON_KEY"):
            monkeypatch.delenv(var, raising=False)
        with pytest.raises(RuntimeError):
            _verify_store(Settings(environment="development", _env_file=None))

    def test_failed_ping_aborts_startup(self):
        settings = Settings(
            environment="development",
            supabase_url="https://proj.supabase.co",
            supabase_service_role_key="key",
            _env_file=None,
        )
        repo = MagicMock()
        repo.ping.side_effect = InternalError("Store unreachable", "connection refused")
        with patch("api.deps._create_supabase_client") as mock_create, \
                patch("infrastructure.SupabaseUserRepository", return_value=repo):
            with pytest.raises(RuntimeError):
                _verify_store(settings)
            mock_create.assert_called_once_with("https://proj.supabase.co", "key")

    def test_successful_ping_allows_startup(self):
        settings = Settings(
            environment="development",
            supabase_url="https://proj.supabase.co",
            supabase_service_role_key="key",
            _env_file=None,
        )
        repo = MagicMock()
        with patch("api.deps._create_supabase_client"), \
                patch("infrastructure.SupabaseUserRepository", return_value=repo):
            _verify_store(settings)
        repo.ping.assert_called_once()
