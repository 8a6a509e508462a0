"""Vietnamese lunar calendar computations (UTC+7)."""

from .astro import (
    SOLAR_TERMS,
    VIETNAM_TIME_ZONE,
    new_moon_julian_day,
    solar_term_index,
    sun_longitude_sector,
)
from .can_chi import (
    BRANCHES,
    STEMS,
    ZODIAC_ANIMALS,
    day_stem_branch,
    hour_stem_branch,
    month_stem_branch,
    year_stem_branch,
    zodiac_animal,
)
from .converter import leap_month, lunar_month_length, lunar_to_solar, solar_to_lunar
from .day_info import day_info, month_day_infos
from .holidays import HOLIDAYS, MONTHLY_OBSERVANCES, holiday_for, holidays_for_month, observance_for
from .hours import auspicious_hours_for, is_hour_auspicious, only_auspicious_hours_for
from .julian import civil_to_julian_day, julian_day_to_civil
from .types import (
    INVALID_SOLAR_DATE,
    AuspiciousHour,
    DayInfo,
    Holiday,
    LunarDate,
    Observance,
    SolarDate,
    StemBranch,
)

__all__ = [
    "AuspiciousHour",
    "BRANCHES",
    "DayInfo",
    "HOLIDAYS",
    "Holiday",
    "INVALID_SOLAR_DATE",
    "LunarDate",
    "MONTHLY_OBSERVANCES",
    "Observance",
    "SOLAR_TERMS",
    "STEMS",
    "SolarDate",
    "StemBranch",
    "VIETNAM_TIME_ZONE",
    "ZODIAC_ANIMALS",
    "auspicious_hours_for",
    "civil_to_julian_day",
    "day_info",
    "day_stem_branch",
    "holiday_for",
    "holidays_for_month",
    "hour_stem_branch",
    "is_hour_auspicious",
    "julian_day_to_civil",
    "leap_month",
    "lunar_month_length",
    "lunar_to_solar",
    "month_day_infos",
    "month_stem_branch",
    "new_moon_julian_day",
    "observance_for",
    "only_auspicious_hours_for",
    "solar_term_index",
    "solar_to_lunar",
    "sun_longitude_sector",
    "year_stem_branch",
    "zodiac_animal",
]
