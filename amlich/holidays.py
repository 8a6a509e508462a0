"""Lunar-calendar holidays and monthly observances."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .types import Holiday, Observance

__all__ = [
    "HOLIDAYS",
    "MONTHLY_OBSERVANCES",
    "holiday_for",
    "holidays_for_month",
    "observance_for",
]

HOLIDAYS: Tuple[Holiday, ...] = (
    Holiday(
        name="Tết Nguyên Đán",
        latin_name="Tet Nguyen Dan",
        lunar_month=1,
        lunar_day=1,
        description="Vietnamese Lunar New Year - most important holiday",
        is_national=True,
    ),
    Holiday(
        name="Mùng 2 Tết",
        latin_name="Tet Day 2",
        lunar_month=1,
        lunar_day=2,
        description="Second day of Tet - visiting maternal family",
        is_national=True,
    ),
    Holiday(
        name="Mùng 3 Tết",
        latin_name="Tet Day 3",
        lunar_month=1,
        lunar_day=3,
        description="Third day of Tet - visiting teachers",
        is_national=True,
    ),
    Holiday(
        name="Tết Nguyên Tiêu",
        latin_name="Tet Nguyen Tieu",
        lunar_month=1,
        lunar_day=15,
        description="First full moon of the year - temple visits",
        is_national=False,
    ),
    Holiday(
        name="Tết Thanh Minh",
        latin_name="Tet Thanh Minh",
        lunar_month=3,
        lunar_day=3,
        description="Tomb Sweeping Day - visit ancestral graves",
        is_national=False,
    ),
    Holiday(
        name="Giỗ Tổ Hùng Vương",
        latin_name="Hung Kings Commemoration",
        lunar_month=3,
        lunar_day=10,
        description="Commemoration of legendary founders of Vietnam",
        is_national=True,
    ),
    Holiday(
        name="Tết Đoan Ngọ",
        latin_name="Tet Doan Ngo",
        lunar_month=5,
        lunar_day=5,
        description="Mid-year festival - killing insects ritual",
        is_national=False,
    ),
    Holiday(
        name="Lễ Vu Lan",
        latin_name="Vu Lan Festival",
        lunar_month=7,
        lunar_day=15,
        description="Ghost Festival - honoring ancestors and wandering spirits",
        is_national=False,
    ),
    Holiday(
        name="Tết Trung Thu",
        latin_name="Mid-Autumn Festival",
        lunar_month=8,
        lunar_day=15,
        description="Children's festival with mooncakes and lanterns",
        is_national=False,
    ),
    Holiday(
        name="Tết Trùng Cửu",
        latin_name="Double Ninth Festival",
        lunar_month=9,
        lunar_day=9,
        description="Day to climb heights and remember ancestors",
        is_national=False,
    ),
    Holiday(
        name="Tết Hạ Nguyên",
        latin_name="Tet Ha Nguyen",
        lunar_month=10,
        lunar_day=15,
        description="Third full moon ceremony",
        is_national=False,
    ),
    Holiday(
        name="Ông Công Ông Táo",
        latin_name="Kitchen Gods Day",
        lunar_month=12,
        lunar_day=23,
        description="Kitchen Gods return to heaven to report",
        is_national=False,
    ),
    # Also matched on day 29 when month 12 is short, see amlich.day_info.
    Holiday(
        name="Tất Niên",
        latin_name="New Year Eve",
        lunar_month=12,
        lunar_day=30,
        description="Last day of lunar year - family reunion dinner",
        is_national=False,
    ),
)

MONTHLY_OBSERVANCES: Tuple[Observance, ...] = (
    Observance(lunar_day=1, name="Mùng Một", description="First day of lunar month"),
    Observance(lunar_day=15, name="Rằm", description="Full moon day - temple visits"),
)

_HOLIDAY_INDEX: Dict[Tuple[int, int], Holiday] = {
    (holiday.lunar_day, holiday.lunar_month): holiday for holiday in HOLIDAYS
}
_OBSERVANCE_INDEX: Dict[int, Observance] = {obs.lunar_day: obs for obs in MONTHLY_OBSERVANCES}


def holiday_for(lunar_day: int, lunar_month: int) -> Optional[Holiday]:
    """Catalog entry falling on the given lunar day and month, if any."""

    return _HOLIDAY_INDEX.get((lunar_day, lunar_month))


def holidays_for_month(lunar_month: int) -> List[Holiday]:
    return [holiday for holiday in HOLIDAYS if holiday.lunar_month == lunar_month]


def observance_for(lunar_day: int) -> Optional[Observance]:
    return _OBSERVANCE_INDEX.get(lunar_day)
