"""Auspicious hours (giờ hoàng đạo) of a day."""

from __future__ import annotations

from typing import Dict, Tuple

from .can_chi import BRANCHES, day_branch_index, hour_branch_index
from .types import AuspiciousHour

__all__ = [
    "GUARDIAN_STARS",
    "HOUR_WINDOWS",
    "auspicious_hours_for",
    "only_auspicious_hours_for",
    "is_hour_auspicious",
]

_EVEN_DAY_HOURS = (0, 1, 4, 5, 8, 9)  # Tý, Sửu, Thìn, Tỵ, Thân, Dậu
_ODD_DAY_HOURS = (2, 3, 6, 7, 10, 11)  # Dần, Mão, Ngọ, Mùi, Tuất, Hợi

# Day branch index -> auspicious hour branch indices, in star order.
AUSPICIOUS_BRANCHES_BY_DAY: Dict[int, Tuple[int, ...]] = {
    branch: _EVEN_DAY_HOURS if branch % 2 == 0 else _ODD_DAY_HOURS for branch in range(12)
}

# Lục Hoàng Đạo, handed out in the order the auspicious branches are listed.
GUARDIAN_STARS: Tuple[str, ...] = (
    "Thanh Long",
    "Minh Đường",
    "Kim Quỹ",
    "Thiên Đức",
    "Ngọc Đường",
    "Tư Mệnh",
)

HOUR_WINDOWS: Tuple[Tuple[str, str], ...] = tuple(
    (f"{(2 * i + 23) % 24:02d}:00", f"{(2 * i + 1) % 24:02d}:00") for i in range(12)
)


def auspicious_hours_for(jdn: int) -> Tuple[AuspiciousHour, ...]:
    """Return the twelve two-hour blocks of day *jdn*, starting with Tý (23:00).

    Parameters
    ----------
    jdn:
        Julian Day Number of the civil day.

    Returns
    -------
    tuple[AuspiciousHour, ...]
        Twelve entries, six of them auspicious and carrying a guardian star.
    """

    auspicious = AUSPICIOUS_BRANCHES_BY_DAY[day_branch_index(jdn)]
    hours = []
    for index, name in enumerate(BRANCHES):
        start, end = HOUR_WINDOWS[index]
        star = GUARDIAN_STARS[auspicious.index(index)] if index in auspicious else None
        hours.append(
            AuspiciousHour(
                branch=name,
                start_time=start,
                end_time=end,
                is_auspicious=star is not None,
                guardian_star=star,
            )
        )
    return tuple(hours)


def only_auspicious_hours_for(jdn: int) -> Tuple[AuspiciousHour, ...]:
    return tuple(hour for hour in auspicious_hours_for(jdn) if hour.is_auspicious)


def is_hour_auspicious(hour: int, jdn: int) -> bool:
    """Whether clock *hour* (0-23) of day *jdn* lies in an auspicious block."""

    return hour_branch_index(hour) in AUSPICIOUS_BRANCHES_BY_DAY[day_branch_index(jdn)]
