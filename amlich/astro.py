"""Low-precision new moon and solar longitude series.

The series follow Jean Meeus, *Astronomical Algorithms* (1998), truncated the
way the traditional Vietnamese almanac computation does. They are only good
to a fraction of a day, which is all the calendar needs, but the coefficients
must not be altered: a different rounding of a new moon moves the first day
of a lunar month.
"""

from __future__ import annotations

import math
from typing import Tuple

__all__ = [
    "VIETNAM_TIME_ZONE",
    "SOLAR_TERMS",
    "new_moon",
    "new_moon_julian_day",
    "sun_longitude",
    "sun_longitude_sector",
    "solar_term_index",
]

VIETNAM_TIME_ZONE = 7  # UTC+7, the 105°E meridian.

# JD of the new moon with lunation index k=0 (1900-01-01 13:52 UT).
EPOCH_NEW_MOON_JD = 2415021.076998695
SYNODIC_MONTH = 29.530588853

_DR = math.pi / 180.0
_TWO_PI = 2.0 * math.pi

# Index 0 is the vernal equinox, each term spans 15° of solar longitude.
SOLAR_TERMS: Tuple[str, ...] = (
    "Xuân Phân",
    "Thanh Minh",
    "Cốc Vũ",
    "Lập Hạ",
    "Tiểu Mãn",
    "Mang Chủng",
    "Hạ Chí",
    "Tiểu Thử",
    "Đại Thử",
    "Lập Thu",
    "Xử Thử",
    "Bạch Lộ",
    "Thu Phân",
    "Hàn Lộ",
    "Sương Giáng",
    "Lập Đông",
    "Tiểu Tuyết",
    "Đại Tuyết",
    "Đông Chí",
    "Tiểu Hàn",
    "Đại Hàn",
    "Lập Xuân",
    "Vũ Thủy",
    "Kinh Trập",
)


def new_moon(k: int) -> float:
    """Return the Julian date (UT) of the *k*-th new moon after 1900-01-01.

    Parameters
    ----------
    k:
        Lunation index; negative values count backwards from the epoch.

    Returns
    -------
    float
        Fractional Julian date of the conjunction.
    """

    t = k / 1236.85  # Julian centuries since 1900-01-01.
    t2 = t * t
    t3 = t2 * t

    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * t2 - 0.000000155 * t3
    jd1 = jd1 + 0.00033 * math.sin((166.56 + 132.87 * t - 0.009173 * t2) * _DR)

    m = 359.2242 + 29.10535608 * k - 0.0000333 * t2 - 0.00000347 * t3  # sun's mean anomaly
    mpr = 306.0253 + 385.81691806 * k + 0.0107306 * t2 + 0.00001236 * t3  # moon's mean anomaly
    f = 21.2964 + 390.67050646 * k - 0.0016528 * t2 - 0.00000239 * t3  # argument of latitude

    c1 = (0.1734 - 0.000393 * t) * math.sin(m * _DR) + 0.0021 * math.sin(2 * _DR * m)
    c1 = c1 - 0.4068 * math.sin(mpr * _DR) + 0.0161 * math.sin(_DR * 2 * mpr)
    c1 = c1 - 0.0004 * math.sin(_DR * 3 * mpr)
    c1 = c1 + 0.0104 * math.sin(_DR * 2 * f) - 0.0051 * math.sin(_DR * (m + mpr))
    c1 = c1 - 0.0074 * math.sin(_DR * (m - mpr)) + 0.0004 * math.sin(_DR * (2 * f + m))
    c1 = c1 - 0.0004 * math.sin(_DR * (2 * f - m)) - 0.0006 * math.sin(_DR * (2 * f + mpr))
    c1 = c1 + 0.0010 * math.sin(_DR * (2 * f - mpr)) + 0.0005 * math.sin(_DR * (2 * mpr + m))

    if t < -11:
        deltat = 0.001 + 0.000839 * t + 0.0002261 * t2 - 0.00000845 * t3 - 0.000000081 * t * t3
    else:
        deltat = -0.000278 + 0.000265 * t + 0.000262 * t2
    return jd1 + c1 - deltat


def new_moon_julian_day(k: int, time_zone: float = VIETNAM_TIME_ZONE) -> int:
    """Julian Day Number of the local civil day containing the *k*-th new moon."""

    return math.floor(new_moon(k) + 0.5 + time_zone / 24.0)


def sun_longitude(jd: float) -> float:
    """Apparent solar longitude in radians, normalised to ``[0, 2π)``."""

    t = (jd - 2451545.0) / 36525.0  # Julian centuries since J2000.
    t2 = t * t
    m = 357.52910 + 35999.05030 * t - 0.0001559 * t2 - 0.00000048 * t * t2
    l0 = 280.46645 + 36000.76983 * t + 0.0003032 * t2
    dl = (1.914600 - 0.004817 * t - 0.000014 * t2) * math.sin(_DR * m)
    dl = dl + (0.019993 - 0.000101 * t) * math.sin(_DR * 2 * m) + 0.000290 * math.sin(_DR * 3 * m)

    longitude = (l0 + dl) * _DR
    return longitude - _TWO_PI * math.floor(longitude / _TWO_PI)


def _local_midnight(jdn: int, time_zone: float) -> float:
    return jdn - 0.5 - time_zone / 24.0


def sun_longitude_sector(jdn: int, time_zone: float = VIETNAM_TIME_ZONE) -> int:
    """30° sector (0..11) of the sun at local midnight starting day *jdn*.

    Sector 0 begins at the vernal equinox; the winter solstice opens sector 9.
    """

    return int(sun_longitude(_local_midnight(jdn, time_zone)) / math.pi * 6)


def solar_term_index(jdn: int, time_zone: float = VIETNAM_TIME_ZONE) -> int:
    """Index into :data:`SOLAR_TERMS` of the term in force at local midnight."""

    return int(sun_longitude(_local_midnight(jdn, time_zone)) / math.pi * 12)
