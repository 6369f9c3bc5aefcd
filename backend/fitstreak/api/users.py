from fastapi import APIRouter, Depends

from fitstreak.api.auth import get_current_user
from fitstreak.crud import workout_preferences as crud_workout_preferences
from fitstreak.crud.workout_preferences import PreferencesStore
from fitstreak.dependencies import get_preferences_store
from fitstreak.schemas.user import UserContext, UserResponse
from fitstreak.schemas.workout_preferences import DEFAULT_PREFERENCES

router = APIRouter(prefix="/api", tags=["users"])

# GET - Get current user
@router.get("/me", response_model=UserResponse, response_model_exclude_none=True)
def read_me(
    current_user: UserContext = Depends(get_current_user),
    store: PreferencesStore = Depends(get_preferences_store)
):
    preferences = crud_workout_preferences.get_by_user(store, current_user.email)
    return UserResponse(
        email=current_user.email,
        joined=current_user.joined,
        preferences=preferences or DEFAULT_PREFERENCES,
    )
