"""Request helpers shared by API tests."""
from typing import Dict

TEST_JWT_SECRET = "test-jwt-secret"


def auth_headers(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def leg_day(weight=60) -> Dict:
    """Create/update body for a two-exercise workout."""
    return {
        "name": "Leg Day",
        "exercises": [
            {"name": "Squat", "sets": 3, "reps": 8, "weight": weight},
            {"name": "Lunge", "sets": 3, "reps": 12},
        ],
    }
