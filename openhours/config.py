"""Runtime settings for openhours.

Values come from the environment (optionally via a local .env file).
"""

import logging
import os
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Zone used for "now" when a caller does not send a reference instant
OPENHOURS_TIMEZONE = os.getenv("OPENHOURS_TIMEZONE", "UTC")

DEBUG = os.getenv("DEBUG", "False").lower() == "true"

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))


def get_timezone(name: str = None) -> tzinfo:
    """Resolve a zone name, falling back to UTC for unknown names."""
    name = name or OPENHOURS_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {name!r}; using UTC")
        return ZoneInfo("UTC")


def now() -> datetime:
    return datetime.now(get_timezone())
