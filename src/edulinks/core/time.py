from __future__ import annotations

from datetime import date, datetime
from typing import Callable

Clock = Callable[[], date]


def today_local() -> date:
    """Return the current calendar date in the local timezone."""
    return datetime.now().astimezone().date()


def fixed_clock(value: date) -> Clock:
    return lambda: value
