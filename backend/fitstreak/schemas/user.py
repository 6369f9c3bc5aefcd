from pydantic import BaseModel
from typing import Optional

from fitstreak.schemas.workout_preferences import WorkoutPreferencesBase

class UserContext(BaseModel):
    """Caller identity resolved from the bearer token for one request."""
    token: str
    email: str = "user@example.com"
    joined: str = "2024-01-15"

class UserResponse(BaseModel):
    email: str
    joined: str
    preferences: Optional[WorkoutPreferencesBase] = None
