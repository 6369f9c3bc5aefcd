import logging
import random
from typing import Optional

from fitstreak.utils.dates import days_ago_iso, utc_now_iso

logger = logging.getLogger(__name__)

"""
Stats Service
-------------
Mock engagement data for the dashboard: streak counter, "come back" nudges
and the completion acknowledgement. Nothing is recorded between requests.
"""

MAX_STREAK_DAYS = 15
LAST_WORKOUT_WINDOW_DAYS = 3

NUDGE_SHOW_PROBABILITY = 0.7

NUDGE_MESSAGES = [
    {
        "show": True,
        "message": "missed a few days? try a 10-min reset.",
        "cta": "do a tiny thing",
    },
    {
        "show": True,
        "message": "feeling unmotivated? start with just 5 minutes.",
        "cta": "do a tiny thing",
    },
    {
        "show": True,
        "message": "been a while? no judgment. let's ease back in.",
        "cta": "do a tiny thing",
    },
]


def get_streak(rng: Optional[random.Random] = None) -> dict:
    """Random streak of 1-15 days with a last workout in the past 3 days."""
    rng = rng or random
    return {
        "days": rng.randint(1, MAX_STREAK_DAYS),
        "lastWorkout": days_ago_iso(rng.random() * LAST_WORKOUT_WINDOW_DAYS),
    }


def get_nudge(rng: Optional[random.Random] = None) -> dict:
    rng = rng or random
    if rng.random() >= NUDGE_SHOW_PROBABILITY:
        return {"show": False}
    return dict(rng.choice(NUDGE_MESSAGES))


def record_completion(date: str, day_name: str, notes: Optional[str] = None) -> dict:
    """
    Acknowledge a finished workout. Completion is only logged,
    so `streak_updated` is always reported as True.
    """
    logger.info(f"Workout completed: date={date} day={day_name} notes={notes!r}")
    return {
        "message": "workout completed successfully",
        "completed_at": utc_now_iso(),
        "streak_updated": True,
    }
