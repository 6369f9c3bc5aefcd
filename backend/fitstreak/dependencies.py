import random
from fastapi import Request

from fitstreak.crud.workout_preferences import PreferencesStore


def get_rng(request: Request) -> random.Random:
    """Application-wide random source, seeded from RANDOM_SEED when set."""
    return request.app.state.rng


def get_preferences_store(request: Request) -> PreferencesStore:
    return request.app.state.preferences_store
