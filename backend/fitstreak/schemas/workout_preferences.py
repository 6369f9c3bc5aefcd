from pydantic import BaseModel, Field
from typing import List, Literal, Optional

DayKey = Literal["mon", "tue", "wed", "thu", "fri", "sat", "sun"]

class WorkoutPreferencesBase(BaseModel):
    fitness_level: Optional[str] = Field(None, description="beginner, intermediate, advanced")
    goal: Optional[str] = Field(None, description="strength, weight_loss, general")
    available_days: Optional[List[DayKey]] = Field(None, description="Day keys the user can train on")
    workout_duration: Optional[int] = Field(None, ge=20, le=90, description="Session duration in minutes")
    equipment: Optional[List[str]] = Field(None, description="dumbbells, machines, bodyweight")

class WorkoutPreferencesCreate(WorkoutPreferencesBase):
    pass

class WorkoutPreferencesUpdate(WorkoutPreferencesBase):
    pass

class WorkoutPreferencesResponse(BaseModel):
    message: str
    preferences: Optional[WorkoutPreferencesBase] = None

DEFAULT_PREFERENCES = WorkoutPreferencesBase(
    fitness_level="intermediate",
    goal="strength",
    available_days=["mon", "wed", "fri"],
    workout_duration=45,
    equipment=["dumbbells", "bodyweight"],
)
