"""
Daily seed: one stable integer per calendar day.
"""
from datetime import date


def today_seed(today: date | None = None) -> int:
    """year * 1000 + day of year. Day of year is at most 366, so years never collide."""
    if today is None:
        today = date.today()
    return today.year * 1000 + today.timetuple().tm_yday
