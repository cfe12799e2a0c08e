"""
Time helpers

Timestamps are stored as naive UTC datetimes. Components that depend on
"now" take a `Clock` so tests can move time explicitly.
"""
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now_naive() -> datetime:
    """
    Current UTC time without tzinfo, the storage format of every timestamp column
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)

