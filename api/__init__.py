"""
API package for the Workout Tracker API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_user_repo,
    get_workout_repo,
    get_token_service,
    get_password_hasher,
    get_current_user,
)

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
    # Authentication
    "get_current_user",
]
