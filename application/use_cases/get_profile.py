"""
Get Profile Use Case.

Resolves the identity from a verified token back to a user profile.
"""
from application.exceptions import NotFoundError
from application.ports import UserRepository
from domain.models import UserProfile


class GetProfileUseCase:
    """Use case for reading the acting user's profile."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    def execute(self, user_id: str) -> UserProfile:
        """
        Raises:
            NotFoundError: If the token's user no longer exists
        """
        record = self._user_repo.get_by_id(user_id)
        if record is None:
            raise NotFoundError("User not found")
        return UserProfile.from_record(record)
