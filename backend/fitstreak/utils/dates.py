import pytz
from datetime import datetime, timedelta
from typing import Optional

from fitstreak.config import PLAN_TIMEZONE


def resolve_timezone(tz_name: Optional[str] = None):
    """
    Returns the pytz timezone for `tz_name` (or the configured plan timezone).
    Falls back to UTC if the name is unknown.
    """
    try:
        return pytz.timezone(tz_name or PLAN_TIMEZONE)
    except pytz.UnknownTimeZoneError:
        return pytz.UTC


def today_iso(tz_name: Optional[str] = None) -> str:
    """Current calendar date as YYYY-MM-DD."""
    server_now = datetime.now(pytz.UTC)
    return server_now.astimezone(resolve_timezone(tz_name)).date().isoformat()


def days_ago_iso(days: float, tz_name: Optional[str] = None) -> str:
    moment = datetime.now(pytz.UTC) - timedelta(days=days)
    return moment.astimezone(resolve_timezone(tz_name)).date().isoformat()


def utc_now_iso() -> str:
    # Millisecond precision with a trailing Z, same shape browsers produce
    return datetime.now(pytz.UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
