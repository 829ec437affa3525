"""Timestamp codec for the ``Expires`` attribute.

Formats an instant as RFC 822 text (``Thu, 22 Mar 2012 14:53:18 GMT``) and
parses such text back. Calendar math and month/day names come from
``email.utils``, so output does not depend on the process locale.
"""

import logging
from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime

from crumb.errors import TimestampError

logger = logging.getLogger("crumb.timestamps")

EARLIEST = datetime(1900, 1, 1, tzinfo=UTC)

# Canonical expiry text. The weekday is fixed, not computed from the date.
EARLIEST_TEXT = "Sun, 01 Jan 1900 00:00:00 GMT"


def to_utc(dt: datetime) -> datetime:
    """Normalize *dt* to UTC. Naive datetimes are taken to be UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_timestamp(dt: datetime) -> str:
    """Return the RFC 822 text for *dt*, always in GMT, whole seconds."""
    dt = to_utc(dt).replace(microsecond=0)
    if dt == EARLIEST:
        return EARLIEST_TEXT
    return format_datetime(dt, usegmt=True)


def parse_timestamp(text: str) -> datetime:
    """Parse RFC 822 / RFC 1123 date text into a UTC datetime.

    Raises:
        TimestampError: If *text* is not a recognizable date.
    """
    try:
        dt = parsedate_to_datetime(text.strip())
    except (TypeError, ValueError, IndexError):
        logger.debug("Rejected cookie date %r", text)
        raise TimestampError(text) from None
    return to_utc(dt)
