"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use cases
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseUserRepository, SupabaseWorkoutRepository

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    user_repo = SupabaseUserRepository(client)
    workout_repo = SupabaseWorkoutRepository(client)
"""

from infrastructure.db.user_repository import SupabaseUserRepository
from infrastructure.db.workout_repository import SupabaseWorkoutRepository

__all__ = [
    # Credential store
    "SupabaseUserRepository",

    # Workout store
    "SupabaseWorkoutRepository",
]
