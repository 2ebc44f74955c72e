"""
FastAPI Dependency Providers for the Workout Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings come from app.state (set by create_app) or the cached get_settings()
- The Supabase client is cached per-process (lru_cache)
- Repository and use case providers create new instances per-request
- get_current_user is the Access Guard for protected routes

Usage in routers:
    from api.deps import get_current_user, get_list_workouts_use_case

    @router.get("/workouts")
    def list_workouts(
        user_id: str = Depends(get_current_user),
        use_case: ListWorkoutsUseCase = Depends(get_list_workouts_use_case),
    ):
        return use_case.execute(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import UserRepository, WorkoutRepository
from application.use_cases import (
    DeleteWorkoutUseCase,
    GetProfileUseCase,
    ListWorkoutsUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
    SaveWorkoutUseCase,
)

# Concrete implementations
from infrastructure import SupabaseUserRepository, SupabaseWorkoutRepository

from backend.auth import (
    PasswordHasher,
    TokenService,
    authenticate_bearer,
    build_password_hasher,
    build_token_service,
)
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings(request: Request) -> Settings:
    """
    Get application settings.

    Prefers the Settings instance the app was created with, falling back to
    the cached environment-derived instance.

    Returns:
        Settings: Application settings instance
    """
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def _create_supabase_client(url: str, key: str) -> Client:
    return create_client(url, key)


def get_supabase_client(settings: Settings = Depends(get_settings)) -> Optional[Client]:
    """
    Get Supabase client instance (cached per URL/key pair).

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    if not settings.supabase_url or not settings.supabase_key:
        return None
    return _create_supabase_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required(
    client: Optional[Client] = Depends(get_supabase_client),
) -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserRepository:
    """
    Get UserRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabaseUserRepository(client)


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    """
    Get WorkoutRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabaseWorkoutRepository(client)


# =============================================================================
# Auth Primitive Providers
# =============================================================================


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return build_token_service(settings)


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return build_password_hasher(settings)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_register_user_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> RegisterUserUseCase:
    return RegisterUserUseCase(user_repo, password_hasher, token_service)


def get_login_user_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> LoginUserUseCase:
    return LoginUserUseCase(user_repo, password_hasher, token_service)


def get_profile_use_case(
    user_repo: UserRepository = Depends(get_user_repo),
) -> GetProfileUseCase:
    return GetProfileUseCase(user_repo)


def get_list_workouts_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> ListWorkoutsUseCase:
    return ListWorkoutsUseCase(workout_repo)


def get_save_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> SaveWorkoutUseCase:
    return SaveWorkoutUseCase(workout_repo)


def get_delete_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
) -> DeleteWorkoutUseCase:
    return DeleteWorkoutUseCase(workout_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    token_service: TokenService = Depends(get_token_service),
) -> str:
    """
    Access Guard for protected routes.

    Verifies the "Authorization: Bearer <token>" header and returns the user ID
    encoded in it. The ID is also placed on request.state.user_id.

    Raises:
        AuthenticationError: 401 if the header is missing or the token is invalid
    """
    user_id = authenticate_bearer(authorization, token_service)
    request.state.user_id = user_id
    return user_id


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_user_repo",
    "get_workout_repo",
    # Auth primitives
    "get_token_service",
    "get_password_hasher",
    # Use cases
    "get_register_user_use_case",
    "get_login_user_use_case",
    "get_profile_use_case",
    "get_list_workouts_use_case",
    "get_save_workout_use_case",
    "get_delete_workout_use_case",
    # Authentication
    "get_current_user",
]
