import logging
import random
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status

from fitstreak.api.auth import require_token
from fitstreak.dependencies import get_rng
from fitstreak.schemas.tracking import (
    CompleteWorkoutRequest,
    CompleteWorkoutResponse,
    NudgeResponse,
    StreakResponse,
)
from fitstreak.services import stats_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Tracking"])

@router.post("/complete", response_model=CompleteWorkoutResponse)
def complete_workout(
    request: Optional[CompleteWorkoutRequest] = None,
    _token: str = Depends(require_token)
):
    if not request or not request.date or not request.day_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="date and day_name are required"
        )
    return stats_service.record_completion(request.date, request.day_name, request.notes)

@router.get("/streak", response_model=StreakResponse)
def get_streak(
    rng: random.Random = Depends(get_rng),
    _token: str = Depends(require_token)
):
    return stats_service.get_streak(rng)

@router.get("/nudge", response_model=NudgeResponse, response_model_exclude_none=True)
def get_nudge(
    rng: random.Random = Depends(get_rng),
    _token: str = Depends(require_token)
):
    """70% of the time returns one of the fixed "come back" messages."""
    return stats_service.get_nudge(rng)
