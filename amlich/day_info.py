"""Aggregated almanac view of a solar date."""

from __future__ import annotations

import calendar
from typing import List, Optional

from .astro import SOLAR_TERMS, VIETNAM_TIME_ZONE, solar_term_index
from .can_chi import day_stem_branch, month_stem_branch, year_stem_branch, zodiac_animal
from .converter import lunar_month_length, solar_to_lunar
from .holidays import holiday_for, observance_for
from .types import DayInfo, Holiday, LunarDate, SolarDate

__all__ = ["day_info", "month_day_infos"]


def _holiday(lunar: LunarDate) -> Optional[Holiday]:
    holiday = holiday_for(lunar.day, lunar.month)
    if holiday is None and lunar.month == 12 and not lunar.is_leap_month:
        # New Year's Eve is the last day of month 12, whatever its length.
        if lunar.day == lunar_month_length(12, lunar.year):
            return holiday_for(30, 12)
    return holiday


def day_info(day: int, month: int, year: int) -> DayInfo:
    """Compute the lunar date, Can-Chi names and holiday of a solar date.

    Parameters
    ----------
    day, month, year:
        Civil date. Callers are expected to pass a real calendar date.

    Returns
    -------
    DayInfo
        Fresh value object; nothing is cached between calls.
    """

    lunar = solar_to_lunar(day, month, year)
    jdn = lunar.julian_day
    return DayInfo(
        solar=SolarDate(day=day, month=month, year=year),
        lunar=lunar,
        year_stem_branch=year_stem_branch(lunar.year),
        month_stem_branch=month_stem_branch(lunar.month, lunar.year),
        day_stem_branch=day_stem_branch(jdn),
        zodiac_animal=zodiac_animal(lunar.year),
        solar_term=SOLAR_TERMS[solar_term_index(jdn + 1, VIETNAM_TIME_ZONE)],
        holiday=_holiday(lunar),
        observance=observance_for(lunar.day),
    )


def month_day_infos(month: int, year: int) -> List[DayInfo]:
    """:func:`day_info` for every day of a Gregorian month."""

    _, days_in_month = calendar.monthrange(year, month)
    return [day_info(day, month, year) for day in range(1, days_in_month + 1)]
