from __future__ import annotations

import logging

import pytz

from filestamp.app.config import DEFAULT_TIMEZONE
from filestamp.domain.timestamp import Timestamp

logger = logging.getLogger(__name__)

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S.%f %Z"


def _resolve_timezone(tz_name: str) -> pytz.BaseTzInfo:
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        logger.warning(f"Timezone inconnue '{tz_name}', affichage en UTC")
        return pytz.utc


def format_timestamp(timestamp: Timestamp, tz_name: str = DEFAULT_TIMEZONE) -> str:
    """Rendu lisible de l'instant dans la timezone d'affichage."""
    local_dt = timestamp.to_datetime().astimezone(_resolve_timezone(tz_name))
    return local_dt.strftime(DISPLAY_FORMAT)
