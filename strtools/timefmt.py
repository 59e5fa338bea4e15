"""
Timepoint formatting in the local timezone.

A timepoint is either a datetime (aware ones are converted to local time,
naive ones are taken as local time already) or a POSIX timestamp in seconds.
The process timezone (TZ) is re-read on every call.

None of the functions here raise on a formatting failure: they return an
empty string instead, which callers must treat as "no timestamp".
"""

import logging
import time
from datetime import datetime, timezone
from typing import Tuple, Union

logger = logging.getLogger(__name__)

Timepoint = Union[datetime, int, float]

# Rendered text must fit in TIME_BUF_SIZE - 1 characters
TIME_BUF_SIZE = 128

DEFAULT_FORMAT = '%Y-%m-%dT%H:%M:%S%z'
ISO8601_FORMAT = DEFAULT_FORMAT
US_BASE_FORMAT = '%Y-%m-%dT%H:%M:%S'

_FORMAT_ERRORS = (ValueError, OverflowError, OSError, TypeError)


def _local_datetime(tp: Timepoint) -> datetime:
    if isinstance(tp, datetime):
        return tp.astimezone()
    if isinstance(tp, (int, float)) and not isinstance(tp, bool):
        return datetime.fromtimestamp(tp, timezone.utc).astimezone()
    raise TypeError(f"unsupported timepoint type {type(tp).__name__}")


def _format(tp: Timepoint, fmt: str) -> Tuple[datetime, str]:
    if hasattr(time, 'tzset'):
        time.tzset()
    dt = _local_datetime(tp)
    text = dt.strftime(fmt)
    if len(text) >= TIME_BUF_SIZE:
        raise ValueError(f"formatted time exceeds {TIME_BUF_SIZE - 1} characters")
    return dt, text


def to_string(tp: Timepoint, fmt: str) -> str:
    """Format `tp` with the strftime-style `fmt`, or return '' on error."""
    try:
        return _format(tp, fmt)[1]
    except _FORMAT_ERRORS as e:
        logger.debug(f"Failed to format timepoint {tp!r} with {fmt!r}: {e}")
        return ''


def to_string_iso8601(tp: Timepoint) -> str:
    """
    ISO 8601 extended format, e.g. ``2024-05-01T10:15:00+05:00``.

    strftime's ``%z`` has no colon (``+0500``), so one is inserted before
    the offset minutes.
    """
    result = to_string(tp, ISO8601_FORMAT)
    if result:
        result = f"{result[:-2]}:{result[-2:]}"
    return result


def to_string_us(tp: Timepoint) -> str:
    """Local time with microseconds, e.g. ``2024-05-01T10:15:00.000042``."""
    try:
        dt, text = _format(tp, US_BASE_FORMAT)
    except _FORMAT_ERRORS as e:
        logger.debug(f"Failed to format timepoint {tp!r} with microseconds: {e}")
        return ''
    return f"{text}.{dt.microsecond:06d}"


def now(fmt: str = DEFAULT_FORMAT) -> str:
    return to_string(datetime.now(timezone.utc), fmt)


def now_iso8601() -> str:
    return to_string_iso8601(datetime.now(timezone.utc))


def now_us() -> str:
    return to_string_us(datetime.now(timezone.utc))
