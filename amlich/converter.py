"""Solar <-> Vietnamese lunar date conversion.

Lunar months start on the local (UTC+7) day of a new moon. Month 11 is the
one containing the winter solstice; a lunar year spanning 13 new moons between
two consecutive month-11 starts receives a leap month, which is the first
month in which the sun does not enter a new 30° sector.
"""

from __future__ import annotations

import json
import logging
import math
from functools import lru_cache
from typing import Optional, Tuple

from .astro import (
    EPOCH_NEW_MOON_JD,
    SYNODIC_MONTH,
    VIETNAM_TIME_ZONE,
    new_moon_julian_day,
    sun_longitude_sector,
)
from .julian import civil_to_julian_day, julian_day_to_civil
from .types import INVALID_SOLAR_DATE, LunarDate, SolarDate

__all__ = [
    "lunar_month_11",
    "leap_month_offset",
    "leap_month",
    "lunar_month_length",
    "solar_to_lunar",
    "lunar_to_solar",
]

LOGGER = logging.getLogger(__name__)

_MAX_LEAP_SCAN = 14


def _lunation_index(jd: float) -> int:
    return math.floor((jd - EPOCH_NEW_MOON_JD) / SYNODIC_MONTH)


@lru_cache(maxsize=512)
def lunar_month_11(year: int) -> int:
    """JDN of the first day of lunar month 11 of Gregorian *year*."""

    off = civil_to_julian_day(31, 12, year) - 2415021
    k = math.floor(off / SYNODIC_MONTH)
    nm = new_moon_julian_day(k, VIETNAM_TIME_ZONE)
    # A new moon already past the winter solstice belongs to month 12.
    if sun_longitude_sector(nm, VIETNAM_TIME_ZONE) >= 9:
        nm = new_moon_julian_day(k - 1, VIETNAM_TIME_ZONE)
    return nm


@lru_cache(maxsize=512)
def leap_month_offset(a11: int) -> int:
    """Number of lunations between month 11 at *a11* and the following leap month.

    Only meaningful when the lunar year starting at *a11* has 13 months.
    """

    k = math.floor((a11 - EPOCH_NEW_MOON_JD) / SYNODIC_MONTH + 0.5)
    i = 1
    arc = sun_longitude_sector(new_moon_julian_day(k + i, VIETNAM_TIME_ZONE), VIETNAM_TIME_ZONE)
    while True:
        last = arc
        i += 1
        arc = sun_longitude_sector(
            new_moon_julian_day(k + i, VIETNAM_TIME_ZONE), VIETNAM_TIME_ZONE
        )
        if arc == last or i >= _MAX_LEAP_SCAN:
            break
    return i - 1


def _leap_month_number(leap_offset: int) -> int:
    # Offset 0 is month 11; the leap month repeats the number before it.
    return (leap_offset + 9) % 12 + 1


def _month_11_window(lunar_month: int, lunar_year: int) -> Tuple[int, int]:
    """Month-11 anchors bracketing *lunar_month* of *lunar_year*."""

    if lunar_month < 11:
        return lunar_month_11(lunar_year - 1), lunar_month_11(lunar_year)
    return lunar_month_11(lunar_year), lunar_month_11(lunar_year + 1)


def _window_leap_month(a11: int, b11: int) -> int:
    if b11 - a11 <= 365:
        return 0
    return _leap_month_number(leap_month_offset(a11))


def leap_month(lunar_year: int) -> int:
    """Return the leap month number of *lunar_year*, or 0 when there is none."""

    early = _window_leap_month(*_month_11_window(1, lunar_year))
    if 0 < early < 11:
        return early
    late = _window_leap_month(*_month_11_window(11, lunar_year))
    if late >= 11:
        return late
    return 0


def solar_to_lunar(day: int, month: int, year: int) -> LunarDate:
    """Convert a civil date to the Vietnamese lunar calendar.

    Parameters
    ----------
    day, month, year:
        Civil date; not validated.

    Returns
    -------
    LunarDate
        The lunar date, including the leap flag and the Julian Day Numbers of
        the day and of the start of its lunar month.
    """

    day_number = civil_to_julian_day(day, month, year)
    k = _lunation_index(day_number) + 1

    # The mean-lunation estimate can run ahead of the true new moon.
    month_start = new_moon_julian_day(k, VIETNAM_TIME_ZONE)
    while month_start > day_number:
        k -= 1
        month_start = new_moon_julian_day(k, VIETNAM_TIME_ZONE)

    a11 = lunar_month_11(year)
    b11 = a11
    if a11 >= month_start:
        lunar_year = year
        a11 = lunar_month_11(year - 1)
    else:
        lunar_year = year + 1
        b11 = lunar_month_11(year + 1)

    lunar_day = day_number - month_start + 1
    diff = (month_start - a11) // 29

    is_leap = False
    lunar_month = diff + 11
    if b11 - a11 > 365:
        leap_diff = leap_month_offset(a11)
        if diff >= leap_diff:
            lunar_month = diff + 10
            is_leap = diff == leap_diff

    if lunar_month > 12:
        lunar_month -= 12
    if lunar_month >= 11 and diff < 4:
        lunar_year -= 1

    return LunarDate(
        day=lunar_day,
        month=lunar_month,
        year=lunar_year,
        is_leap_month=is_leap,
        julian_day=day_number,
        month_start_julian_day=month_start,
    )


def _lunation_of_month(lunar_month: int, lunar_year: int, is_leap_month: bool) -> Optional[int]:
    """Lunation index k of the given month, or ``None`` when it does not exist."""

    a11, b11 = _month_11_window(lunar_month, lunar_year)
    k = math.floor(0.5 + (a11 - EPOCH_NEW_MOON_JD) / SYNODIC_MONTH)
    off = (lunar_month - 11) % 12

    if b11 - a11 > 365:
        leap_off = leap_month_offset(a11)
        if is_leap_month and lunar_month != _leap_month_number(leap_off):
            return None
        if is_leap_month or off >= leap_off:
            off += 1
    elif is_leap_month:
        return None
    return k + off


def lunar_to_solar(
    lunar_day: int,
    lunar_month: int,
    lunar_year: int,
    is_leap_month: bool = False,
) -> SolarDate:
    """Convert a lunar date back to the civil calendar.

    Returns :data:`~amlich.types.INVALID_SOLAR_DATE` when *is_leap_month* is
    set but *lunar_year* has no leap month numbered *lunar_month*.
    """

    k = _lunation_of_month(lunar_month, lunar_year, is_leap_month)
    if k is None:
        LOGGER.debug(
            json.dumps(
                {
                    "event": "invalid_leap_month",
                    "lunar_day": lunar_day,
                    "lunar_month": lunar_month,
                    "lunar_year": lunar_year,
                }
            )
        )
        return INVALID_SOLAR_DATE
    start = new_moon_julian_day(k, VIETNAM_TIME_ZONE)
    return julian_day_to_civil(start + lunar_day - 1)


def lunar_month_length(lunar_month: int, lunar_year: int, is_leap_month: bool = False) -> int:
    """Number of days (29 or 30) in a lunar month, 0 if the month does not exist."""

    k = _lunation_of_month(lunar_month, lunar_year, is_leap_month)
    if k is None:
        return 0
    return new_moon_julian_day(k + 1, VIETNAM_TIME_ZONE) - new_moon_julian_day(k, VIETNAM_TIME_ZONE)
