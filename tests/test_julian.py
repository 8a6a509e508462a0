from __future__ import annotations

from datetime import date, timedelta

import erfa
import pytest

from amlich.julian import GREGORIAN_START_JD, civil_to_julian_day, julian_day_to_civil
from amlich.types import SolarDate


def _erfa_julian_day(day: int, month: int, year: int) -> int:
    djm0, djm = erfa.cal2jd(year, month, day)
    return int(djm0 + djm + 0.5)


def test_j2000_epoch():
    assert civil_to_julian_day(1, 1, 2000) == 2451545
    assert julian_day_to_civil(2451545) == SolarDate(1, 1, 2000)


@pytest.mark.parametrize(
    "day, month, year",
    [(1, 1, 1900), (29, 2, 1904), (12, 2, 2024), (31, 12, 2099), (15, 10, 1582), (1, 3, 1700)],
)
def test_matches_erfa_for_gregorian_dates(day: int, month: int, year: int) -> None:
    assert civil_to_julian_day(day, month, year) == _erfa_julian_day(day, month, year)


def test_inverse_matches_erfa():
    for jdn in range(2415021, 2488070, 997):
        iy, im, iday, _ = erfa.jd2cal(float(jdn), -0.5)
        assert julian_day_to_civil(jdn) == SolarDate(int(iday), int(im), int(iy))


def test_gregorian_cutover():
    assert civil_to_julian_day(4, 10, 1582) == GREGORIAN_START_JD - 1
    assert civil_to_julian_day(15, 10, 1582) == GREGORIAN_START_JD
    assert julian_day_to_civil(GREGORIAN_START_JD - 1) == SolarDate(4, 10, 1582)
    assert julian_day_to_civil(GREGORIAN_START_JD) == SolarDate(15, 10, 1582)


def test_julian_calendar_leap_century():
    # 1500 is a leap year in the Julian calendar.
    assert civil_to_julian_day(1, 3, 1500) - civil_to_julian_day(28, 2, 1500) == 2
    assert julian_day_to_civil(civil_to_julian_day(29, 2, 1500)) == SolarDate(29, 2, 1500)


def test_round_trip_1900_2100():
    current = date(1900, 1, 1)
    end = date(2100, 12, 31)
    expected_jdn = civil_to_julian_day(1, 1, 1900)
    while current <= end:
        jdn = civil_to_julian_day(current.day, current.month, current.year)
        assert jdn == expected_jdn
        assert julian_day_to_civil(jdn) == SolarDate(current.day, current.month, current.year)
        current += timedelta(days=1)
        expected_jdn += 1


def test_round_trip_early_years():
    for jdn in range(civil_to_julian_day(1, 1, 1), civil_to_julian_day(1, 1, 1600), 4099):
        civil = julian_day_to_civil(jdn)
        assert civil_to_julian_day(civil.day, civil.month, civil.year) == jdn


def test_out_of_range_day_rolls_over():
    assert civil_to_julian_day(32, 1, 2024) == civil_to_julian_day(1, 2, 2024)
