import logging
import random
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from fitstreak.api.auth import require_token
from fitstreak.dependencies import get_rng
from fitstreak.schemas.plan import RegenerateRequest, RegeneratedWorkout
from fitstreak.services import plan_service
from fitstreak.services.plan_service import PlanNotFoundError, PlanValidationError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Workout Plans"]
)

@router.get("/plan", response_model=None)
def get_plan(
    date: Optional[str] = Query(None, description="Date to stamp on a single-day workout"),
    day: Optional[str] = Query(None, description="mon, tue, wed, thu, fri, sat or sun"),
    _token: str = Depends(require_token)
):
    """
    Full week plan, or a single day's workout when `day` is a known day key.
    """
    if not plan_service.is_day_key(day):
        return plan_service.serialize_week_plan(plan_service.get_week_plan())

    try:
        workout = plan_service.get_day_plan(day, date)
    except PlanNotFoundError as nf:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(nf))
    return workout.model_dump(exclude_none=True)

@router.post("/regenerate", response_model=RegeneratedWorkout, response_model_exclude_none=True)
def regenerate_workout(
    request: Optional[RegenerateRequest] = None,
    rng: random.Random = Depends(get_rng),
    _token: str = Depends(require_token)
):
    """
    Swap the day's workout for a random alternative.
    """
    try:
        return plan_service.regenerate(request.date if request else None, rng=rng)
    except PlanValidationError as ve:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(ve))
    except Exception:
        logger.exception("Workout regeneration failed")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="something went wrong")
