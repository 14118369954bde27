"""Client timezone dependency.

Entries are stored in UTC; every "which day is this" question is answered
in the timezone the client reports through ``X-Timezone``.
"""

from datetime import date, datetime
from typing import Annotated
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog
from fastapi import Depends, Header

from core.config import settings

logger = structlog.get_logger()


def resolve_timezone(name: str | None) -> ZoneInfo:
    """Return the IANA zone ``name``, or the configured default if unknown."""
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("unknown_client_timezone", timezone=name)
    return ZoneInfo(settings.default_timezone)


async def get_client_timezone(
    x_timezone: Annotated[str | None, Header()] = None,
) -> ZoneInfo:
    """Extract the client's timezone from the X-Timezone header."""
    return resolve_timezone(x_timezone)


ClientTimezone = Annotated[ZoneInfo, Depends(get_client_timezone)]


def client_today(tz: ZoneInfo) -> date:
    """Today's civil date on the client's wall clock."""
    return datetime.now(tz).date()
