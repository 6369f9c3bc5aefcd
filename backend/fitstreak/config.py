import os
from dotenv import load_dotenv

load_dotenv(override=False)

# Bearer tokens are accepted as long as they start with this prefix
TOKEN_PREFIX = os.getenv("TOKEN_PREFIX", "mock-jwt-token")

# Timezone used to resolve "today" when a plan is requested without a date
PLAN_TIMEZONE = os.getenv("PLAN_TIMEZONE", "UTC")

# Optional seed for the application random source (regeneration, streak, nudge)
_seed = os.getenv("RANDOM_SEED")
RANDOM_SEED = int(_seed) if _seed not in (None, "") else None

ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
