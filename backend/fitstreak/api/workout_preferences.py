from typing import Optional
from fastapi import APIRouter, Depends

from fitstreak.api.auth import get_current_user
from fitstreak.crud import workout_preferences as crud_workout_preferences
from fitstreak.crud.workout_preferences import PreferencesStore
from fitstreak.dependencies import get_preferences_store
from fitstreak.schemas.user import UserContext
from fitstreak.schemas.workout_preferences import (
    WorkoutPreferencesBase,
    WorkoutPreferencesCreate,
    WorkoutPreferencesResponse,
    WorkoutPreferencesUpdate,
)

router = APIRouter(
    prefix="/api/preferences",
    tags=["workout-preferences"]
)

@router.get("", response_model=Optional[WorkoutPreferencesBase], response_model_exclude_none=True)
def get_my_workout_preferences(
    current_user: UserContext = Depends(get_current_user),
    store: PreferencesStore = Depends(get_preferences_store)
):
    # null until onboarding has been completed
    return crud_workout_preferences.get_by_user(store, current_user.email)

@router.post("", response_model=WorkoutPreferencesResponse, response_model_exclude_none=True)
def save_workout_preferences(
    preferences_in: WorkoutPreferencesCreate,
    current_user: UserContext = Depends(get_current_user),
    store: PreferencesStore = Depends(get_preferences_store)
):
    preferences = crud_workout_preferences.create(store, current_user.email, obj_in=preferences_in)
    return {"message": "preferences saved", "preferences": preferences}

@router.put("", response_model=WorkoutPreferencesResponse, response_model_exclude_none=True)
def update_workout_preferences(
    preferences_in: WorkoutPreferencesUpdate,
    current_user: UserContext = Depends(get_current_user),
    store: PreferencesStore = Depends(get_preferences_store)
):
    preferences = crud_workout_preferences.update(store, current_user.email, obj_in=preferences_in)
    return {"message": "preferences updated", "preferences": preferences}
