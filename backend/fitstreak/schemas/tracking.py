from pydantic import BaseModel
from typing import Optional

class CompleteWorkoutRequest(BaseModel):
    date: Optional[str] = None
    day_name: Optional[str] = None
    notes: Optional[str] = None

class CompleteWorkoutResponse(BaseModel):
    message: str
    completed_at: str
    streak_updated: bool

class StreakResponse(BaseModel):
    days: int
    lastWorkout: str

class NudgeResponse(BaseModel):
    show: bool
    message: Optional[str] = None
    cta: Optional[str] = None
