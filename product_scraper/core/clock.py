"""Formatted timestamps for records, file names and log lines"""

from datetime import datetime
from typing import Callable, Optional

FILE_DATE_FORMAT = "%Y-%m-%d"
LOG_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def now(fmt: str, moment: Optional[datetime] = None) -> str:
    """Format the current time (or the given moment)"""
    return (moment or datetime.now()).strftime(fmt)


def record_time(moment: Optional[datetime] = None) -> str:
    """12-hour clock with a lowercase meridiem, e.g. '08:44 pm'"""
    moment = moment or datetime.now()
    # %p is locale dependent
    meridiem = 'am' if moment.hour < 12 else 'pm'
    return f"{now('%I:%M', moment)} {meridiem}"


def clock(fmt: Optional[str] = None) -> Callable[[], str]:
    """
    Return a zero-argument callable producing the current time

    With no format, times look like record_time().
    """
    if fmt is None:
        return record_time
    return lambda: now(fmt)
