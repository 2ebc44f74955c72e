"""
Infrastructure Layer for the Workout Tracker API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseUserRepository,
    SupabaseWorkoutRepository,
)

__all__ = [
    "SupabaseUserRepository",
    "SupabaseWorkoutRepository",
]
