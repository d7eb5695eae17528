from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional


def local_now() -> datetime:
    """Description: Current timestamp as aware local time.
    Layer: L0
    Input: None
    Output: datetime (local tz)
    """
    return datetime.now().astimezone()


def as_local(dt: datetime) -> datetime:
    """Description: Normalize a timestamp to aware local time.
    Layer: L0
    Input: naive (interpreted as local) or aware datetime
    Output: aware datetime in the local timezone
    """
    return dt.astimezone()


def resolve_now(now: Optional[datetime]) -> datetime:
    return local_now() if now is None else as_local(now)


def local_date(dt: datetime) -> date:
    return as_local(dt).date()


def end_of_day(dt: datetime) -> datetime:
    """Description: Last representable instant of the local calendar day of `dt`.
    Layer: L0
    Input: datetime
    Output: aware datetime at 23:59:59.999999 local
    """
    local = as_local(dt)
    return datetime.combine(local.date(), time.max).astimezone()
