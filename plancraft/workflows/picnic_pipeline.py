"""Orchestrates the end-to-end flow for generating a picnic plan."""

from __future__ import annotations

import logging
import time
from datetime import date
from typing import Any, Callable, List, Mapping, Optional, Union

from plancraft import planners
from plancraft.core import open_meteo
from plancraft.core.weather import derive_weather_tips, generic_weather_tips
from plancraft.schemas import PicnicInput, PicnicPlan, WeatherForecast

_LOGGER = logging.getLogger(__name__)

ForecastFetcher = Callable[[float, float, Optional[date]], WeatherForecast]


def _log_stage(stage: str, duration: float) -> None:
    _LOGGER.info("%s stage completed in %.2fs", stage.capitalize(), duration)


def _log_stage_skipped(stage: str, reason: str) -> None:
    _LOGGER.info("%s stage skipped: %s", stage.capitalize(), reason)


def _weather_tips(picnic: PicnicInput, forecast: Optional[WeatherForecast]) -> List[str]:
    if forecast is None:
        return generic_weather_tips()
    return derive_weather_tips(forecast, picnic.date)


def generate_picnic_plan(
    picnic_input: Union[PicnicInput, Mapping[str, Any]],
    forecast: Optional[WeatherForecast] = None,
) -> PicnicPlan:
    """Assemble a complete :class:`PicnicPlan`.

    Weather tips come from ``forecast`` when one is supplied and fall back to
    the generic advice otherwise.
    """

    pipeline_start = time.perf_counter()
    picnic = planners.coerce_input(PicnicInput, picnic_input)
    _LOGGER.info("Starting picnic pipeline for location: %s", picnic.location)

    stage_start = time.perf_counter()
    packing_list = planners.build_packing_list(picnic)
    food_suggestions = planners.build_food_suggestions(picnic)
    activities = planners.build_activity_details(picnic)
    _log_stage("content", time.perf_counter() - stage_start)

    stage_start = time.perf_counter()
    schedule = planners.build_schedule(
        picnic.time, picnic.duration, picnic.food_style, picnic.activities
    )
    _log_stage("schedule", time.perf_counter() - stage_start)

    stage_start = time.perf_counter()
    weather_tips = _weather_tips(picnic, forecast)
    _log_stage("weather", time.perf_counter() - stage_start)

    stage_start = time.perf_counter()
    plan = PicnicPlan(
        id=planners.new_plan_id("picnic"),
        title=planners.compose_picnic_title(picnic.occasion),
        date=picnic.date,
        time=picnic.time,
        location=picnic.location,
        coordinates=picnic.coordinates,
        duration=picnic.duration,
        group_size=picnic.group_size,
        occasion=picnic.occasion,
        food_style=picnic.food_style,
        transportation=picnic.transportation,
        summary=planners.compose_picnic_summary(picnic),
        packing_list=packing_list,
        food_suggestions=food_suggestions,
        activities=activities,
        schedule=schedule,
        weather_tips=weather_tips,
        safety_tips=planners.build_safety_tips(picnic),
        backup_plans=planners.build_backup_plans(picnic),
        budget=planners.estimate_budget(picnic.group_size, picnic.budget, picnic.food_style),
        created_at=planners.utc_now(),
    )
    _log_stage("assemble", time.perf_counter() - stage_start)

    _LOGGER.info("Picnic pipeline completed in %.2fs", time.perf_counter() - pipeline_start)
    return plan


def plan_picnic(
    picnic_input: Union[PicnicInput, Mapping[str, Any]],
    *,
    fetch_forecast: Optional[ForecastFetcher] = None,
) -> PicnicPlan:
    """Fetch a forecast for the picnic spot, then generate the plan.

    A failing weather provider never blocks planning: the error is logged
    and the plan falls back to generic weather tips.
    """

    picnic = planners.coerce_input(PicnicInput, picnic_input)
    fetch = fetch_forecast or open_meteo.fetch_forecast

    forecast: Optional[WeatherForecast] = None
    if picnic.coordinates is None:
        _log_stage_skipped("forecast", "No coordinates for the picnic location")
    else:
        stage_start = time.perf_counter()
        try:
            forecast = fetch(picnic.coordinates.lat, picnic.coordinates.lng, picnic.date)
        except open_meteo.WeatherServiceError as exc:
            _LOGGER.warning("Forecast unavailable, using generic weather tips: %s", exc)
        else:
            _log_stage("forecast", time.perf_counter() - stage_start)

    return generate_picnic_plan(picnic, forecast)


__all__ = ["generate_picnic_plan", "plan_picnic"]
