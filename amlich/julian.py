"""Conversions between civil dates and Julian Day Numbers."""

from __future__ import annotations

import math

from .types import SolarDate

__all__ = ["GREGORIAN_START_JD", "civil_to_julian_day", "julian_day_to_civil"]

# JDN of 1582-10-15, the first day of the Gregorian calendar.
GREGORIAN_START_JD = 2299161


def _is_gregorian(day: int, month: int, year: int) -> bool:
    return (year, month, day) >= (1582, 10, 15)


def civil_to_julian_day(day: int, month: int, year: int) -> int:
    """Return the Julian Day Number of a civil date.

    Dates on or after 1582-10-15 are read as Gregorian, earlier ones as
    Julian. The arguments are not validated, so out-of-range values such as
    ``day=32`` simply roll over into the following month.

    Parameters
    ----------
    day, month, year:
        Civil date components.

    Returns
    -------
    int
        Julian Day Number (the JD at noon of that date).
    """

    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3

    jd = day + (153 * m + 2) // 5 + 365 * y + y // 4
    if _is_gregorian(day, month, year):
        return jd - y // 100 + y // 400 - 32045
    return jd - 32083


def julian_day_to_civil(jdn: int) -> SolarDate:
    """Inverse of :func:`civil_to_julian_day` (Meeus, chapter 7)."""

    z = math.floor(jdn + 0.5)
    f = jdn + 0.5 - z
    if z < GREGORIAN_START_JD:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = math.floor(b - d - math.floor(30.6001 * e) + f)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return SolarDate(day=day, month=month, year=year)
