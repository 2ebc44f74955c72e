"""
Auth router for signup, login and the current user's profile.

This router contains endpoints for:
- /auth/signup - Register and receive a token
- /auth/login - Exchange email/password for a token
- /auth/user - Profile of the bearer token's user
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.deps import (
    get_current_user,
    get_login_user_use_case,
    get_profile_use_case,
    get_register_user_use_case,
)
from application.use_cases import GetProfileUseCase, LoginUserUseCase, RegisterUserUseCase
from domain.models import AuthResult, UserProfile

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


# =============================================================================
# Request Models
# =============================================================================


class SignupRequest(BaseModel):
    """Signup form. Presence is checked by the use case, not here."""
    name: Any = None
    email: Any = None
    password: Any = None


class LoginRequest(BaseModel):
    """Login form."""
    email: Any = None
    password: Any = None


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/signup", response_model=AuthResult, status_code=201)
def signup(
    request: SignupRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> AuthResult:
    """Register a new user and return a token plus profile."""
    return use_case.execute(
        name=request.name,
        email=request.email,
        password=request.password,
    )


@router.post("/login", response_model=AuthResult)
def login(
    request: LoginRequest,
    use_case: LoginUserUseCase = Depends(get_login_user_use_case),
) -> AuthResult:
    """Authenticate with email and password."""
    return use_case.execute(email=request.email, password=request.password)


@router.get("/user", response_model=UserProfile)
def current_user(
    user_id: str = Depends(get_current_user),
    use_case: GetProfileUseCase = Depends(get_profile_use_case),
) -> UserProfile:
    """Profile of the authenticated user; used by clients to validate a stored session."""
    return use_case.execute(user_id)
