"""Can-Chi (Heavenly Stem / Earthly Branch) names and zodiac animals."""

from __future__ import annotations

from typing import Tuple

from .types import StemBranch

__all__ = [
    "STEMS",
    "BRANCHES",
    "ZODIAC_ANIMALS",
    "year_stem_branch",
    "month_stem_branch",
    "day_stem_branch",
    "hour_stem_branch",
    "hour_branch_index",
    "day_branch_index",
    "zodiac_animal",
]

STEMS: Tuple[str, ...] = ("Giáp", "Ất", "Bính", "Đinh", "Mậu", "Kỷ", "Canh", "Tân", "Nhâm", "Quý")

BRANCHES: Tuple[str, ...] = (
    "Tý",
    "Sửu",
    "Dần",
    "Mão",
    "Thìn",
    "Tỵ",
    "Ngọ",
    "Mùi",
    "Thân",
    "Dậu",
    "Tuất",
    "Hợi",
)

# Same order as BRANCHES.
ZODIAC_ANIMALS: Tuple[str, ...] = (
    "Chuột",
    "Trâu",
    "Hổ",
    "Mèo",
    "Rồng",
    "Rắn",
    "Ngựa",
    "Dê",
    "Khỉ",
    "Gà",
    "Chó",
    "Lợn",
)


def _stem_branch(stem_index: int, branch_index: int) -> StemBranch:
    return StemBranch(
        stem=STEMS[stem_index],
        branch=BRANCHES[branch_index],
        stem_index=stem_index,
        branch_index=branch_index,
        cycle_index=(stem_index * 12 + branch_index) % 60,
    )


def _year_stem_index(lunar_year: int) -> int:
    return (lunar_year + 6) % 10


def _year_branch_index(lunar_year: int) -> int:
    return (lunar_year + 8) % 12


def year_stem_branch(lunar_year: int) -> StemBranch:
    return _stem_branch(_year_stem_index(lunar_year), _year_branch_index(lunar_year))


def month_stem_branch(lunar_month: int, lunar_year: int) -> StemBranch:
    """Can-Chi of a lunar month; month 1 always falls on the Dần branch."""

    stem = (_year_stem_index(lunar_year) * 2 + lunar_month) % 10
    return _stem_branch(stem, (lunar_month + 1) % 12)


def day_branch_index(jdn: int) -> int:
    return (jdn + 1) % 12


def day_stem_branch(jdn: int) -> StemBranch:
    return _stem_branch((jdn + 9) % 10, day_branch_index(jdn))


def hour_branch_index(hour: int) -> int:
    """Two-hour block of a clock hour; block 0 (Tý) opens at 23:00."""

    return ((hour + 1) % 24) // 2


def hour_stem_branch(hour: int, day_jdn: int) -> StemBranch:
    branch = hour_branch_index(hour)
    day_stem = (day_jdn + 9) % 10
    return _stem_branch((day_stem * 2 + branch) % 10, branch)


def zodiac_animal(lunar_year: int) -> str:
    return ZODIAC_ANIMALS[_year_branch_index(lunar_year)]
