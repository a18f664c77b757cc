from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest

from plancraft import planners
from plancraft.core import open_meteo
from plancraft.core.weather import generic_weather_tips
from plancraft.planners import PlanInputError
from plancraft.schemas import CurrentConditions, DailyForecast, WeatherForecast
from plancraft.workflows import picnic_pipeline

PICNIC_DAY = date(2025, 6, 14)
FROZEN_NOW = datetime(2025, 6, 1, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(planners, "new_plan_id", lambda prefix: f"{prefix}_fixed")
    monkeypatch.setattr(planners, "utc_now", lambda: FROZEN_NOW)


def _answers(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "date": PICNIC_DAY.isoformat(),
        "time": "11:00",
        "location": "Central Park",
        "coordinates": {"lat": 40.7829, "lng": -73.9654},
        "groupSize": {"adults": 2, "kids": 0, "pets": 0},
        "occasion": "birthday",
        "foodStyle": "potluck",
        "dietary": ["Vegetarian"],
        "drinkPreferences": ["Lemonade"],
        "activities": ["Frisbee", "Music"],
        "transportation": "bike",
        "budget": "medium",
        "duration": 4,
        "specialRequests": ["Birthday cake"],
    }
    payload.update(overrides)
    return payload


def _forecast(start: date = PICNIC_DAY) -> WeatherForecast:
    return WeatherForecast(
        current=CurrentConditions(temperature=25, humidity=40, wind_speed=12, weather_code=0),
        daily=[
            DailyForecast(
                date=start + timedelta(days=offset),
                temperature_max=33,
                temperature_min=21,
                precipitation_probability=10,
                weather_code=0,
                wind_speed_max=8,
            )
            for offset in range(7)
        ],
    )


def test_assembles_full_plan(frozen_identity: None) -> None:
    plan = picnic_pipeline.generate_picnic_plan(_answers(), _forecast())

    assert plan.id == "picnic_fixed"
    assert plan.title == "Birthday Picnic"
    assert plan.time == time(11, 0)
    assert plan.budget.estimated == "$68"
    assert [slot.activity for slot in plan.schedule] == [
        "Arrival & Setup",
        "Food Setup",
        "Main Meal",
        "Activities",
        "Cleanup & Wrap Up",
    ]
    assert plan.weather_tips[0].startswith("🌡️ Hot day expected")
    assert "☀️ Sunny day - perfect for outdoor games and activities" in plan.weather_tips
    assert plan.backup_plans[-1] == "Have a backup indoor venue reserved if possible"
    assert "backpack" in {item.id for item in plan.packing_list}
    assert [food.id for food in plan.food_suggestions][:3] == ["sandwiches", "veggie-wraps", "pasta-salad"]


def test_without_forecast_uses_generic_tips(frozen_identity: None) -> None:
    plan = picnic_pipeline.generate_picnic_plan(_answers())

    assert list(plan.weather_tips) == generic_weather_tips()


def test_forecast_for_other_dates_yields_placeholder_tip(frozen_identity: None) -> None:
    plan = picnic_pipeline.generate_picnic_plan(_answers(), _forecast(PICNIC_DAY + timedelta(days=10)))

    assert list(plan.weather_tips) == ["Check the weather forecast closer to your picnic date"]


def test_identical_input_yields_identical_collections(frozen_identity: None) -> None:
    first = picnic_pipeline.generate_picnic_plan(_answers(), _forecast())
    second = picnic_pipeline.generate_picnic_plan(_answers(), _forecast())

    assert first == second


def test_duplicate_tags_collapse_before_generation(frozen_identity: None) -> None:
    plan = picnic_pipeline.generate_picnic_plan(
        _answers(activities=["Frisbee", "frisbee ", "", "Kite"])
    )

    assert [slot.description for slot in plan.schedule if slot.activity == "Activities"] == [
        "Time for Frisbee and Kite"
    ]


@pytest.mark.parametrize(
    "override",
    [
        {"location": ""},
        {"duration": 13},
        {"duration": 0},
        {"groupSize": {"adults": 0}},
        {"groupSize": {"adults": 2, "kids": -1}},
        {"occasion": "wedding"},
    ],
)
def test_invalid_answers_are_rejected_before_generation(override: Dict[str, Any]) -> None:
    with pytest.raises(PlanInputError):
        picnic_pipeline.generate_picnic_plan(_answers(**override))


def test_plan_picnic_fetches_forecast_for_picnic_date(frozen_identity: None) -> None:
    calls: List[tuple] = []

    def fake_fetch(lat: float, lng: float, start: Optional[date]) -> WeatherForecast:
        calls.append((lat, lng, start))
        return _forecast()

    plan = picnic_pipeline.plan_picnic(_answers(), fetch_forecast=fake_fetch)

    assert calls == [(40.7829, -73.9654, PICNIC_DAY)]
    assert plan.weather_tips[0].startswith("🌡️ Hot day expected")


def test_plan_picnic_falls_back_when_weather_service_fails(
    frozen_identity: None, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    def failing_fetch(*args: Any, **kwargs: Any) -> WeatherForecast:
        raise open_meteo.WeatherServiceError("Weather API error: 503 Server Error")

    monkeypatch.setattr(open_meteo, "fetch_forecast", failing_fetch)

    plan = picnic_pipeline.plan_picnic(_answers())

    assert list(plan.weather_tips) == generic_weather_tips()
    assert "Forecast unavailable" in caplog.text


def test_plan_picnic_skips_fetch_without_coordinates(frozen_identity: None) -> None:
    answers = _answers()
    answers.pop("coordinates")

    plan = picnic_pipeline.plan_picnic(
        answers, fetch_forecast=lambda *args: pytest.fail("forecast should not be fetched")
    )

    assert plan.coordinates is None
    assert list(plan.weather_tips) == generic_weather_tips()


def test_plans_share_no_mutable_state(frozen_identity: None) -> None:
    first = picnic_pipeline.generate_picnic_plan(_answers())

    with pytest.raises(AttributeError):
        first.activities[0].equipment.append("Leaked")
    with pytest.raises(AttributeError):
        first.packing_list.clear()

    second = picnic_pipeline.generate_picnic_plan(_answers())

    assert second.activities[0].equipment == ("Frisbee",)
    assert first == second


def test_ids_are_unique_across_a_plan(frozen_identity: None) -> None:
    plan = picnic_pipeline.generate_picnic_plan(
        _answers(
            groupSize={"adults": 2, "kids": 2, "pets": 1},
            activities=["Frisbee", "Kite", "Music", "Ball games", "Card games", "Scavenger hunt"],
            transportation="walk",
        )
    )

    ids = [
        *(item.id for item in plan.packing_list),
        *(food.id for food in plan.food_suggestions),
        *(activity.id for activity in plan.activities),
    ]
    assert len(ids) == len(set(ids))
    assert "frisbee" in {item.id for item in plan.packing_list}
    assert "frisbee-game" in {activity.id for activity in plan.activities}
