from pydantic import BaseModel, Field
from typing import List, Optional

class Exercise(BaseModel):
    name: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    duration: Optional[str] = None  # e.g. "2 min", "30 sec"
    equipment: Optional[str] = None  # "bodyweight", "dumbbells"

class DayPlan(BaseModel):
    title: str
    exercises: List[Exercise]
    completed: bool = False

class DayWorkout(DayPlan):
    date: str

class RegeneratedWorkout(DayWorkout):
    """A one-off alternative workout built from a single exercise category."""

class RegenerateRequest(BaseModel):
    date: Optional[str] = Field(None, description="Date the new workout is for (YYYY-MM-DD)")
