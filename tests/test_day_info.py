from __future__ import annotations

import pytest

from amlich import (
    civil_to_julian_day,
    day_info,
    julian_day_to_civil,
    lunar_month_length,
    lunar_to_solar,
    month_day_infos,
)
from amlich.types import SolarDate


def test_tet_2024():
    info = day_info(10, 2, 2024)
    assert info.solar == SolarDate(10, 2, 2024)
    assert (info.lunar.day, info.lunar.month, info.lunar.year) == (1, 1, 2024)
    assert info.year_stem_branch.name == "Giáp Thìn"
    assert info.month_stem_branch.branch == "Dần"
    assert info.day_stem_branch.name == "Giáp Thìn"
    assert info.zodiac_animal == "Rồng"
    assert info.holiday is not None and info.holiday.latin_name == "Tet Nguyen Dan"
    assert info.observance is not None and info.observance.name == "Mùng Một"
    assert info.solar_term == "Lập Xuân"


def test_ordinary_day_has_no_holiday():
    info = day_info(20, 2, 2024)
    assert info.lunar.day == 11
    assert info.holiday is None
    assert info.observance is None


def test_mid_autumn():
    info = day_info(17, 9, 2024)
    assert info.holiday is not None and info.holiday.name == "Tết Trung Thu"
    assert info.observance is not None and info.observance.name == "Rằm"


def test_day_before_tet_uses_previous_year_names():
    info = day_info(9, 2, 2024)
    assert (info.lunar.month, info.lunar.year) == (12, 2023)
    assert info.year_stem_branch.name == "Quý Mão"
    assert info.zodiac_animal == "Mèo"


def test_month_day_infos():
    infos = month_day_infos(2, 2024)
    assert len(infos) == 29
    assert [info.solar.day for info in infos] == list(range(1, 30))
    jdns = [info.lunar.julian_day for info in infos]
    assert jdns == list(range(jdns[0], jdns[0] + 29))
    assert len(month_day_infos(4, 2023)) == 30


def test_new_year_eve_on_short_month_12():
    short_years = 0
    for lunar_year in range(2000, 2040):
        tet = lunar_to_solar(1, 1, lunar_year + 1)
        eve = julian_day_to_civil(civil_to_julian_day(tet.day, tet.month, tet.year) - 1)
        info = day_info(eve.day, eve.month, eve.year)
        assert info.lunar.month == 12
        assert info.holiday is not None and info.holiday.latin_name == "New Year Eve"
        if info.lunar.day == 29:
            short_years += 1
    assert short_years > 0


def test_day_29_of_long_month_12_is_not_new_year_eve():
    for lunar_year in range(2000, 2040):
        if lunar_month_length(12, lunar_year) == 30:
            solar = lunar_to_solar(29, 12, lunar_year)
            assert day_info(solar.day, solar.month, solar.year).holiday is None
            break
    else:
        pytest.fail("no 30-day month 12 found")
