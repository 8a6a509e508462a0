from __future__ import annotations

from amlich.can_chi import BRANCHES
from amlich.hours import (
    GUARDIAN_STARS,
    auspicious_hours_for,
    is_hour_auspicious,
    only_auspicious_hours_for,
)
from amlich.julian import civil_to_julian_day


def _hour(value: str) -> int:
    return int(value.split(":")[0])


def test_twelve_blocks_six_auspicious():
    start = civil_to_julian_day(1, 1, 2024)
    for jdn in range(start, start + 24):
        hours = auspicious_hours_for(jdn)
        assert len(hours) == 12
        assert [hour.branch for hour in hours] == list(BRANCHES)
        assert sum(hour.is_auspicious for hour in hours) == 6
        assert len(only_auspicious_hours_for(jdn)) == 6


def test_blocks_cover_the_day_without_overlap():
    hours = auspicious_hours_for(civil_to_julian_day(12, 2, 2024))
    assert hours[0].start_time == "23:00"
    assert hours[0].end_time == "01:00"
    covered = set()
    for hour in hours:
        first = _hour(hour.start_time)
        assert _hour(hour.end_time) == (first + 2) % 24
        covered.update({first, (first + 1) % 24})
    assert covered == set(range(24))


def test_guardian_stars_follow_branch_order():
    # 2024-02-12 is a Ngọ day: even branch, auspicious from Tý.
    hours = only_auspicious_hours_for(civil_to_julian_day(12, 2, 2024))
    assert [hour.branch for hour in hours] == ["Tý", "Sửu", "Thìn", "Tỵ", "Thân", "Dậu"]
    assert [hour.guardian_star for hour in hours] == list(GUARDIAN_STARS)

    # 2024-02-13 is a Mùi day: odd branch, auspicious from Dần.
    hours = only_auspicious_hours_for(civil_to_julian_day(13, 2, 2024))
    assert [hour.branch for hour in hours] == ["Dần", "Mão", "Ngọ", "Mùi", "Tuất", "Hợi"]
    assert hours[0].guardian_star == "Thanh Long"


def test_inauspicious_blocks_have_no_star():
    for hour in auspicious_hours_for(civil_to_julian_day(12, 2, 2024)):
        assert (hour.guardian_star is not None) == hour.is_auspicious


def test_is_hour_auspicious_matches_blocks():
    jdn = civil_to_julian_day(12, 2, 2024)
    assert is_hour_auspicious(23, jdn)
    assert is_hour_auspicious(0, jdn)
    assert not is_hour_auspicious(3, jdn)
    blocks = auspicious_hours_for(jdn)
    for clock_hour in range(24):
        block = blocks[((clock_hour + 1) % 24) // 2]
        assert is_hour_auspicious(clock_hour, jdn) == block.is_auspicious
