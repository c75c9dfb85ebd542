from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from app.core.config import settings

DISPLAY_FORMAT = "%b %d, %Y %H:%M"


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_display(value: datetime) -> str:
    """Render a stored timestamp as ``MMM dd, yyyy HH:mm`` in the display zone."""
    if value.tzinfo is None:
        # Naive values come back from drivers that drop tzinfo; they are UTC.
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(ZoneInfo(settings.DISPLAY_TIMEZONE)).strftime(DISPLAY_FORMAT)
