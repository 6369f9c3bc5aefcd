import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from fitstreak.schemas.workout_preferences import (
    WorkoutPreferencesBase,
    WorkoutPreferencesCreate,
    WorkoutPreferencesUpdate,
)

"""
Workout Preferences CRUD
------------------------
Preferences live in a store owned by the application instance and handed to
request handlers through a dependency. The in-memory store forgets
everything when the process restarts.
"""


class PreferencesStore(ABC):
    """Storage interface for onboarding preferences, keyed by user."""

    @abstractmethod
    def get(self, user_key: str) -> Optional[WorkoutPreferencesBase]:
        raise NotImplementedError

    @abstractmethod
    def put(self, user_key: str, preferences: WorkoutPreferencesBase) -> WorkoutPreferencesBase:
        raise NotImplementedError


class InMemoryPreferencesStore(PreferencesStore):
    def __init__(self):
        self._lock = threading.Lock()
        self._items: Dict[str, WorkoutPreferencesBase] = {}

    def get(self, user_key):
        with self._lock:
            item = self._items.get(user_key)
            return item.model_copy(deep=True) if item else None

    def put(self, user_key, preferences):
        with self._lock:
            self._items[user_key] = preferences.model_copy(deep=True)
            return preferences


def get_by_user(store: PreferencesStore, user_key: str):
    return store.get(user_key)

def create(store: PreferencesStore, user_key: str, obj_in: WorkoutPreferencesCreate):
    # Replaces whatever was stored before
    return store.put(user_key, WorkoutPreferencesBase(**obj_in.model_dump(exclude_unset=True)))

def update(store: PreferencesStore, user_key: str, obj_in: WorkoutPreferencesUpdate):
    current = store.get(user_key) or WorkoutPreferencesBase()
    update_data = obj_in.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(current, field, value)
    return store.put(user_key, current)
