"""Immutable value types produced by the lunar calendar computations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SolarDate:
    """Gregorian (or proleptic Julian before 1582-10-15) civil date."""

    day: int
    month: int
    year: int

    @property
    def is_valid(self) -> bool:
        """``False`` only for the :data:`INVALID_SOLAR_DATE` sentinel."""

        return self.day != 0

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


INVALID_SOLAR_DATE = SolarDate(0, 0, 0)


@dataclass(frozen=True)
class LunarDate:
    """A day of the Vietnamese lunar calendar.

    ``julian_day`` is the Julian Day Number of the day itself, and
    ``month_start_julian_day`` the one of lunar day 1 of the same month.
    """

    day: int
    month: int
    year: int
    is_leap_month: bool
    julian_day: int
    month_start_julian_day: int


@dataclass(frozen=True)
class StemBranch:
    """A position in the sexagesimal Can-Chi cycle."""

    stem: str
    branch: str
    stem_index: int
    branch_index: int
    cycle_index: int

    @property
    def name(self) -> str:
        return f"{self.stem} {self.branch}"


@dataclass(frozen=True)
class AuspiciousHour:
    branch: str
    start_time: str
    end_time: str
    is_auspicious: bool
    guardian_star: Optional[str] = None


@dataclass(frozen=True)
class Holiday:
    name: str
    latin_name: str
    lunar_month: int
    lunar_day: int
    description: str
    is_national: bool


@dataclass(frozen=True)
class Observance:
    """Generic observance recurring on the same day of every lunar month."""

    lunar_day: int
    name: str
    description: str


@dataclass(frozen=True)
class DayInfo:
    """Everything the almanac shows for one solar date."""

    solar: SolarDate
    lunar: LunarDate
    year_stem_branch: StemBranch
    month_stem_branch: StemBranch
    day_stem_branch: StemBranch
    zodiac_animal: str
    solar_term: str
    holiday: Optional[Holiday] = None
    observance: Optional[Observance] = None
