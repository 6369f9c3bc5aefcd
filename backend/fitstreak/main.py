import logging
import random
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fitstreak.config import ALLOWED_ORIGINS, LOG_LEVEL, RANDOM_SEED
from fitstreak.crud.workout_preferences import InMemoryPreferencesStore, PreferencesStore
from fitstreak.api import tracking, users, workout_plan, workout_preferences

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else first.get("msg", "invalid request")


def register_exception_handlers(app: FastAPI):
    # Every error body has the shape {"message": "..."}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"message": _validation_message(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"message": "something went wrong"})


def create_app(
    rng: Optional[random.Random] = None,
    preferences_store: Optional[PreferencesStore] = None,
) -> FastAPI:
    """
    Build the API. Tests pass a seeded `rng` and a fresh store;
    by default they come from RANDOM_SEED and a new in-memory store.
    """
    app = FastAPI(title="fitstreak")

    app.state.rng = rng or random.Random(RANDOM_SEED)
    app.state.preferences_store = preferences_store or InMemoryPreferencesStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(workout_plan.router)
    app.include_router(tracking.router)
    app.include_router(users.router)
    app.include_router(workout_preferences.router)

    # Root endpoint
    @app.get("/")
    def root():
        return {
            "message": "Welcome to fitstreak API",
            "docs": "/docs",
            "redoc": "/redoc"
        }

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "healthy", "message": "API is running"}

    return app


app = create_app()
