from datetime import datetime
from zoneinfo import ZoneInfo

from ..config import settings


def local_now() -> datetime:
    """Current wall-clock time as a naive datetime.

    Uses the configured TIMEZONE when set, otherwise the host's local clock.
    """
    if settings.timezone:
        return datetime.now(ZoneInfo(settings.timezone)).replace(tzinfo=None)
    return datetime.now()
