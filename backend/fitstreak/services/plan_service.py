import logging
import random
from typing import Dict, List, Optional

from fitstreak.schemas.plan import DayPlan, DayWorkout, Exercise, RegeneratedWorkout
from fitstreak.utils.dates import today_iso

logger = logging.getLogger(__name__)

"""
Plan Service
------------
Serves the static weekly workout plan and builds "regenerated" alternative
workouts on demand.
1. The week plan maps each day key to a workout, or to None for the rest day.
2. Regeneration picks one exercise category, shuffles its exercises and
   keeps the first 3 or 4 of them.
Nothing here is persisted; every call only reads the catalogs below.
"""

DAY_KEYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

REST_DAY_MESSAGE = "rest day - no workout planned"

WEEK_PLAN = {
    "mon": {
        "title": "push day",
        "exercises": [
            {"name": "push-ups", "sets": 3, "reps": 12, "equipment": "bodyweight"},
            {"name": "overhead press", "sets": 4, "reps": 8, "equipment": "dumbbells"},
            {"name": "chest press", "sets": 3, "reps": 10, "equipment": "dumbbells"},
            {"name": "tricep dips", "sets": 3, "reps": 15, "equipment": "bodyweight"},
        ],
        "completed": False,
    },
    "tue": {
        "title": "cardio",
        "exercises": [
            {"name": "jumping jacks", "duration": "2 min", "equipment": "bodyweight"},
            {"name": "burpees", "sets": 3, "reps": 10, "equipment": "bodyweight"},
            {"name": "mountain climbers", "duration": "1 min", "equipment": "bodyweight"},
            {"name": "high knees", "duration": "30 sec", "equipment": "bodyweight"},
        ],
        "completed": True,
    },
    "wed": {
        "title": "pull day",
        "exercises": [
            {"name": "bent-over rows", "sets": 4, "reps": 10, "equipment": "dumbbells"},
            {"name": "pull-ups", "sets": 3, "reps": 8, "equipment": "bodyweight"},
            {"name": "bicep curls", "sets": 3, "reps": 12, "equipment": "dumbbells"},
            {"name": "reverse flies", "sets": 3, "reps": 15, "equipment": "dumbbells"},
        ],
        "completed": False,
    },
    "thu": {
        "title": "active recovery",
        "exercises": [
            {"name": "walking", "duration": "20 min", "equipment": "bodyweight"},
            {"name": "stretching", "duration": "10 min", "equipment": "bodyweight"},
            {"name": "foam rolling", "duration": "5 min", "equipment": "bodyweight"},
        ],
        "completed": False,
    },
    "fri": {
        "title": "legs",
        "exercises": [
            {"name": "squats", "sets": 4, "reps": 15, "equipment": "bodyweight"},
            {"name": "lunges", "sets": 3, "reps": 12, "equipment": "bodyweight"},
            {"name": "calf raises", "sets": 3, "reps": 20, "equipment": "bodyweight"},
            {"name": "glute bridges", "sets": 3, "reps": 15, "equipment": "bodyweight"},
        ],
        "completed": False,
    },
    "sat": {
        "title": "full body",
        "exercises": [
            {"name": "deadlifts", "sets": 3, "reps": 8, "equipment": "dumbbells"},
            {"name": "thrusters", "sets": 3, "reps": 10, "equipment": "dumbbells"},
            {"name": "plank", "duration": "1 min", "equipment": "bodyweight"},
            {"name": "russian twists", "sets": 3, "reps": 20, "equipment": "bodyweight"},
        ],
        "completed": False,
    },
    "sun": None,  # rest day
}

ALTERNATIVE_EXERCISES = {
    "push": [
        {"name": "incline push-ups", "sets": 3, "reps": 10, "equipment": "bodyweight"},
        {"name": "diamond push-ups", "sets": 2, "reps": 8, "equipment": "bodyweight"},
        {"name": "shoulder press", "sets": 3, "reps": 12, "equipment": "dumbbells"},
        {"name": "chest flies", "sets": 3, "reps": 10, "equipment": "dumbbells"},
    ],
    "pull": [
        {"name": "inverted rows", "sets": 3, "reps": 10, "equipment": "bodyweight"},
        {"name": "face pulls", "sets": 3, "reps": 15, "equipment": "dumbbells"},
        {"name": "hammer curls", "sets": 3, "reps": 12, "equipment": "dumbbells"},
        {"name": "lat pulldowns", "sets": 3, "reps": 10, "equipment": "dumbbells"},
    ],
    "legs": [
        {"name": "goblet squats", "sets": 3, "reps": 12, "equipment": "dumbbells"},
        {"name": "step-ups", "sets": 3, "reps": 10, "equipment": "bodyweight"},
        {"name": "single-leg deadlifts", "sets": 3, "reps": 8, "equipment": "dumbbells"},
        {"name": "wall sits", "duration": "45 sec", "equipment": "bodyweight"},
    ],
    "cardio": [
        {"name": "jump rope", "duration": "3 min", "equipment": "bodyweight"},
        {"name": "squat jumps", "sets": 3, "reps": 15, "equipment": "bodyweight"},
        {"name": "plank jacks", "sets": 3, "reps": 20, "equipment": "bodyweight"},
        {"name": "running in place", "duration": "2 min", "equipment": "bodyweight"},
    ],
}

CATEGORIES = tuple(ALTERNATIVE_EXERCISES.keys())

MIN_REGENERATED_EXERCISES = 3
MAX_REGENERATED_EXERCISES = 4


class PlanNotFoundError(LookupError):
    """No workout exists for the requested slot."""


class RestDayError(PlanNotFoundError):
    def __init__(self, day: str):
        super().__init__(REST_DAY_MESSAGE)
        self.day = day


class PlanValidationError(ValueError):
    """Required plan input is missing or malformed."""


def is_day_key(value: Optional[str]) -> bool:
    return value in DAY_KEYS


def get_week_plan() -> Dict[str, Optional[DayPlan]]:
    """
    Full static week plan. Every day key is present exactly once;
    the rest day maps to None. Returned models are fresh copies.
    """
    return {
        day: DayPlan.model_validate(workout) if workout else None
        for day, workout in WEEK_PLAN.items()
    }


def serialize_week_plan(plan: Dict[str, Optional[DayPlan]]) -> Dict[str, Optional[dict]]:
    """JSON-ready week plan; unset exercise fields are dropped, rest day stays null."""
    return {
        day: workout.model_dump(exclude_none=True) if workout else None
        for day, workout in plan.items()
    }


def get_day_plan(day: str, date: Optional[str] = None, tz_name: Optional[str] = None) -> DayWorkout:
    """
    Workout planned for `day`, stamped with `date` (today when omitted).

    Raises:
        PlanValidationError: `day` is not one of DAY_KEYS.
        RestDayError: `day` is the rest day.
    """
    if not is_day_key(day):
        raise PlanValidationError(f"unknown day '{day}', expected one of {', '.join(DAY_KEYS)}")

    workout = WEEK_PLAN[day]
    if workout is None:
        logger.debug(f"Plan lookup for {day}: rest day")
        raise RestDayError(day)

    resolved_date = date or today_iso(tz_name)
    logger.debug(f"Plan lookup for {day} on {resolved_date}: {workout['title']}")
    return DayWorkout.model_validate({**workout, "date": resolved_date})


def _pick_exercises(category: str, rng) -> List[Exercise]:
    pool = ALTERNATIVE_EXERCISES[category]
    shuffled = rng.sample(pool, len(pool))
    count = rng.randint(MIN_REGENERATED_EXERCISES, MAX_REGENERATED_EXERCISES)
    return [Exercise.model_validate(item) for item in shuffled[:count]]


def regenerate(date: Optional[str], rng: Optional[random.Random] = None) -> RegeneratedWorkout:
    """
    Build a different workout for `date` from one random exercise category.

    Results are intentionally random: two calls with the same date are
    unrelated and may repeat exercises or categories. Pass a seeded
    random.Random as `rng` for reproducible output.
    """
    if not date:
        raise PlanValidationError("date is required")
    if not isinstance(date, str):
        raise PlanValidationError("date must be a string")

    rng = rng or random
    category = rng.choice(CATEGORIES)
    exercises = _pick_exercises(category, rng)

    logger.info(f"Regenerated {category} workout for {date} with {len(exercises)} exercises")
    return RegeneratedWorkout(
        title=f"{category} day (regenerated)",
        exercises=exercises,
        completed=False,
        date=date,
    )
