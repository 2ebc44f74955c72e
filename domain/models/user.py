"""
User profile and authentication result models.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    """
    Public view of a user.

    Built from a credential-store record; the password hash is dropped here
    and never leaves the auth use cases.
    """

    id: str = Field(..., description="User identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address, as stored")

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "UserProfile":
        return cls(id=str(record["id"]), name=record["name"], email=record["email"])


class AuthResult(BaseModel):
    """Token plus profile returned by signup and login."""

    token: str
    user: UserProfile
