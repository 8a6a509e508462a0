"""Pydantic models for API requests and responses."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DateQueryParams(BaseModel):
    """Validated solar date query parameter."""

    model_config = ConfigDict(populate_by_name=True)

    date_solar: date = Field(..., alias="date", description="Solar calendar date (YYYY-MM-DD)")


class DayQueryParams(DateQueryParams):
    """Query parameters for the ``/day`` endpoint."""

    include_hours: bool = Field(False, description="Attach the twelve hour blocks of the day")


class HoursQueryParams(DateQueryParams):
    """Query parameters for the ``/hours`` endpoint."""

    only_auspicious: bool = Field(False, description="Return the six auspicious blocks only")


class MonthQueryParams(BaseModel):
    """Query parameters for the ``/month`` endpoint."""

    year: int = Field(..., ge=1, le=9999, description="Solar year")
    month: int = Field(..., ge=1, le=12, description="Solar month")


class LunarQueryParams(BaseModel):
    """Query parameters for the ``/lunar-to-solar`` endpoint."""

    day: int = Field(..., ge=1, le=30, description="Lunar day of month")
    month: int = Field(..., ge=1, le=12, description="Lunar month")
    year: int = Field(..., ge=2, le=9998, description="Lunar year")
    leap: bool = Field(False, description="Whether the month is the leap month")


class HolidayQueryParams(BaseModel):
    """Query parameters for the ``/holidays`` endpoint."""

    month: Optional[int] = Field(None, ge=1, le=12, description="Restrict to one lunar month")


class _FromCore(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class StemBranchModel(_FromCore):
    stem: str
    branch: str
    name: str = Field(..., description="Combined Can-Chi name, e.g. 'Giáp Thìn'")
    cycle_index: int = Field(..., ge=0, le=59)


class LunarDateModel(_FromCore):
    day: int
    month: int
    year: int
    is_leap_month: bool
    julian_day: int
    month_start_julian_day: int


class HolidayModel(_FromCore):
    name: str
    latin_name: str
    lunar_month: int
    lunar_day: int
    description: str
    is_national: bool


class ObservanceModel(_FromCore):
    lunar_day: int
    name: str
    description: str


class HourModel(_FromCore):
    branch: str
    start_time: str
    end_time: str
    is_auspicious: bool
    guardian_star: Optional[str] = None


class DayResponse(BaseModel):
    """Almanac entry for one solar date."""

    ok: bool = True
    date_solar: date = Field(..., description="Requested solar date")
    weekday: int = Field(..., ge=0, le=6, description="ISO weekday, 0 is Monday")
    lunar: LunarDateModel
    year_stem_branch: StemBranchModel
    month_stem_branch: StemBranchModel
    day_stem_branch: StemBranchModel
    zodiac_animal: str
    solar_term: str
    holiday: Optional[HolidayModel] = None
    observance: Optional[ObservanceModel] = None
    hours: Optional[List[HourModel]] = None


class MonthResponse(BaseModel):
    ok: bool = True
    year: int
    month: int
    days: List[DayResponse]


class SolarDateResponse(BaseModel):
    """Result of a lunar to solar conversion."""

    ok: bool = True
    date_solar: date
    lunar: LunarDateModel


class HoursResponse(BaseModel):
    ok: bool = True
    date_solar: date
    day_stem_branch: StemBranchModel
    hours: List[HourModel]


class HolidaysResponse(BaseModel):
    ok: bool = True
    holidays: List[HolidayModel]
    observances: List[ObservanceModel]


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    timezone_offset_hours: int


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
