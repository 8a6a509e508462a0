"""FastAPI application exposing the Vietnamese lunar calendar."""

from __future__ import annotations

import json
import logging
import os
import time
from datetime import date
from typing import List

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from amlich import (
    HOLIDAYS,
    MONTHLY_OBSERVANCES,
    VIETNAM_TIME_ZONE,
    DayInfo,
    auspicious_hours_for,
    civil_to_julian_day,
    day_info,
    day_stem_branch,
    holidays_for_month,
    lunar_month_length,
    lunar_to_solar,
    month_day_infos,
    only_auspicious_hours_for,
    solar_to_lunar,
)
from models import (
    DayQueryParams,
    DayResponse,
    ErrorResponse,
    HealthResponse,
    HolidayModel,
    HolidayQueryParams,
    HolidaysResponse,
    HourModel,
    HoursQueryParams,
    HoursResponse,
    LunarDateModel,
    LunarQueryParams,
    MonthQueryParams,
    MonthResponse,
    ObservanceModel,
    SolarDateResponse,
    StemBranchModel,
)

logging.basicConfig(
    level=os.environ.get("AMLICH_LOG_LEVEL", "INFO").upper(), format="%(message)s"
)
LOGGER = logging.getLogger("amlich-api")

APP_DESCRIPTION = "Vietnamese lunar calendar conversions, Can-Chi names and auspicious hours"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _cors_origins() -> List[str]:
    raw = os.environ.get("AMLICH_CORS_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(
    title="Amlich API",
    description=APP_DESCRIPTION,
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("error") or detail.get("message") or str(detail)
    elif isinstance(detail, list):
        message = ", ".join(str(item) for item in detail)
    else:
        message = str(detail)
    return _error_response(exc.status_code, f"http_{exc.status_code}", message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


def _log_request(event: str, started: float, **fields: object) -> None:
    duration_ms = (time.perf_counter() - started) * 1000.0
    LOGGER.info(json.dumps({"event": event, **fields, "duration_ms": round(duration_ms, 3)}))


def _hour_models(hours) -> List[HourModel]:
    return [HourModel.model_validate(hour) for hour in hours]


def _day_response(info: DayInfo, include_hours: bool = False) -> DayResponse:
    solar = date(info.solar.year, info.solar.month, info.solar.day)
    return DayResponse(
        date_solar=solar,
        weekday=solar.weekday(),
        lunar=LunarDateModel.model_validate(info.lunar),
        year_stem_branch=StemBranchModel.model_validate(info.year_stem_branch),
        month_stem_branch=StemBranchModel.model_validate(info.month_stem_branch),
        day_stem_branch=StemBranchModel.model_validate(info.day_stem_branch),
        zodiac_animal=info.zodiac_animal,
        solar_term=info.solar_term,
        holiday=HolidayModel.model_validate(info.holiday) if info.holiday else None,
        observance=ObservanceModel.model_validate(info.observance) if info.observance else None,
        hours=_hour_models(auspicious_hours_for(info.lunar.julian_day)) if include_hours else None,
    )


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, timezone_offset_hours=VIETNAM_TIME_ZONE)


@app.get("/day", response_model=DayResponse, responses=ERROR_RESPONSES)
def day_endpoint(params: DayQueryParams = Depends()) -> DayResponse:
    started = time.perf_counter()
    solar = params.date_solar
    response = _day_response(day_info(solar.day, solar.month, solar.year), params.include_hours)
    _log_request(
        "day",
        started,
        date=solar.isoformat(),
        lunar_day=response.lunar.day,
        lunar_month=response.lunar.month,
        lunar_year=response.lunar.year,
        leap=response.lunar.is_leap_month,
    )
    return response


@app.get("/month", response_model=MonthResponse, responses=ERROR_RESPONSES)
def month_endpoint(params: MonthQueryParams = Depends()) -> MonthResponse:
    started = time.perf_counter()
    days = [_day_response(info) for info in month_day_infos(params.month, params.year)]
    _log_request("month", started, year=params.year, month=params.month, days=len(days))
    return MonthResponse(year=params.year, month=params.month, days=days)


@app.get("/lunar-to-solar", response_model=SolarDateResponse, responses=ERROR_RESPONSES)
def lunar_to_solar_endpoint(params: LunarQueryParams = Depends()) -> SolarDateResponse:
    started = time.perf_counter()
    length = lunar_month_length(params.month, params.year, params.leap)
    if length == 0:
        raise HTTPException(
            status_code=404,
            detail=f"Lunar year {params.year} has no leap month {params.month}",
        )
    if params.day > length:
        raise HTTPException(
            status_code=404,
            detail=f"Lunar month {params.month}/{params.year} has only {length} days",
        )

    solar = lunar_to_solar(params.day, params.month, params.year, params.leap)
    lunar = solar_to_lunar(solar.day, solar.month, solar.year)
    try:
        date_solar = date(solar.year, solar.month, solar.day)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    _log_request(
        "lunar_to_solar",
        started,
        lunar_day=params.day,
        lunar_month=params.month,
        lunar_year=params.year,
        leap=params.leap,
        date=solar.isoformat(),
    )
    return SolarDateResponse(date_solar=date_solar, lunar=LunarDateModel.model_validate(lunar))


@app.get("/hours", response_model=HoursResponse, responses=ERROR_RESPONSES)
def hours_endpoint(params: HoursQueryParams = Depends()) -> HoursResponse:
    started = time.perf_counter()
    solar = params.date_solar
    jdn = civil_to_julian_day(solar.day, solar.month, solar.year)
    hours = only_auspicious_hours_for(jdn) if params.only_auspicious else auspicious_hours_for(jdn)
    _log_request(
        "hours", started, date=solar.isoformat(), only_auspicious=params.only_auspicious
    )
    return HoursResponse(
        date_solar=solar,
        day_stem_branch=StemBranchModel.model_validate(day_stem_branch(jdn)),
        hours=_hour_models(hours),
    )


@app.get("/holidays", response_model=HolidaysResponse, responses=ERROR_RESPONSES)
def holidays_endpoint(params: HolidayQueryParams = Depends()) -> HolidaysResponse:
    holidays = HOLIDAYS if params.month is None else holidays_for_month(params.month)
    return HolidaysResponse(
        holidays=[HolidayModel.model_validate(holiday) for holiday in holidays],
        observances=[ObservanceModel.model_validate(obs) for obs in MONTHLY_OBSERVANCES],
    )
