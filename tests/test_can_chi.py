from __future__ import annotations

import pytest

from amlich.can_chi import (
    BRANCHES,
    STEMS,
    ZODIAC_ANIMALS,
    day_stem_branch,
    hour_branch_index,
    hour_stem_branch,
    month_stem_branch,
    year_stem_branch,
    zodiac_animal,
)
from amlich.julian import civil_to_julian_day


@pytest.mark.parametrize(
    "lunar_year, name, animal",
    [(1984, "Giáp Tý", "Chuột"), (2023, "Quý Mão", "Mèo"), (2024, "Giáp Thìn", "Rồng"), (2025, "Ất Tỵ", "Rắn")],
)
def test_year_names(lunar_year: int, name: str, animal: str) -> None:
    assert year_stem_branch(lunar_year).name == name
    assert zodiac_animal(lunar_year) == animal


def test_year_cycle_index():
    assert year_stem_branch(1984).cycle_index == 0
    assert year_stem_branch(2024).cycle_index == 4


def test_month_branch_starts_at_dan():
    for month in range(1, 13):
        assert month_stem_branch(month, 2024).branch == BRANCHES[(month + 1) % 12]
    assert month_stem_branch(1, 2024).name == "Ất Dần"
    assert month_stem_branch(11, 2023).branch == "Tý"


def test_day_names():
    assert day_stem_branch(civil_to_julian_day(10, 2, 2024)).name == "Giáp Thìn"
    assert day_stem_branch(civil_to_julian_day(12, 2, 2024)).name == "Bính Ngọ"


@pytest.mark.parametrize(
    "hour, branch",
    [(23, 0), (0, 0), (1, 1), (2, 1), (11, 6), (12, 6), (21, 11), (22, 11)],
)
def test_hour_branch_blocks(hour: int, branch: int) -> None:
    assert hour_branch_index(hour) == branch


def test_hour_stem_follows_day_stem():
    jdn = civil_to_julian_day(12, 2, 2024)  # Bính day
    assert hour_stem_branch(0, jdn).name == "Mậu Tý"
    assert hour_stem_branch(12, jdn).name == "Giáp Ngọ"


def test_cycle_index_bounds():
    for value in range(-200, 5000, 7):
        for result in (
            year_stem_branch(value),
            month_stem_branch(value % 12 + 1, value),
            day_stem_branch(value),
            hour_stem_branch(value % 24, value),
        ):
            assert 0 <= result.cycle_index <= 59
            assert result.stem == STEMS[result.stem_index]
            assert result.branch == BRANCHES[result.branch_index]


def test_vocabularies():
    assert len(STEMS) == 10
    assert len(BRANCHES) == 12
    assert len(ZODIAC_ANIMALS) == 12
