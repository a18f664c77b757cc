from datetime import date, time

import pytest
from pydantic import ValidationError

from plancraft.schemas import (
    ActionStep,
    GoalInput,
    GroupSize,
    LocationData,
    PicnicInput,
    WeatherForecast,
)


def test_goal_input_accepts_camel_case_answers():
    goal = GoalInput.model_validate(
        {
            "goal": "  Learn Italian  ",
            "deadline": 6,
            "timeFrame": "weeks",
            "availableTime": 1.5,
            "timeUnit": "hours",
            "preferences": ["Audio learning", " audio learning", "", "Visual learning"],
        }
    )

    assert goal.goal == "Learn Italian"
    assert goal.time_frame == "weeks"
    assert goal.daily_minutes == 90
    assert goal.preferences == ["Audio learning", "Visual learning"]


def test_goal_input_defaults():
    goal = GoalInput(goal="Write daily", deadline=10, available_time=20)

    assert goal.time_frame == "weeks"
    assert goal.time_unit == "minutes"
    assert goal.budget == "medium"
    assert goal.style == "structured"
    assert goal.constraints == []


@pytest.mark.parametrize(
    "payload",
    [
        {"goal": "", "deadline": 1, "available_time": 10},
        {"goal": "Run", "deadline": -2, "available_time": 10},
        {"goal": "Run", "deadline": 2, "available_time": 0},
        {"goal": "Run", "deadline": 2, "available_time": 10, "intensity": "extreme"},
    ],
)
def test_goal_input_rejects_invalid_answers(payload):
    with pytest.raises(ValidationError):
        GoalInput.model_validate(payload)


def test_picnic_input_parses_strings_and_aliases():
    picnic = PicnicInput.model_validate(
        {
            "date": "2025-07-04",
            "time": "17:45",
            "location": "Grant Park",
            "groupSize": {"adults": 3, "kids": 2, "pets": 1},
            "style": "store-bought",
            "drink_preferences": "Lemonade",
        }
    )

    assert picnic.date == date(2025, 7, 4)
    assert picnic.time == time(17, 45)
    assert picnic.food_style == "store-bought"
    assert picnic.drinks == ["Lemonade"]
    assert picnic.group_size.headcount == 5
    assert picnic.duration == 3


def test_group_size_is_frozen():
    group = GroupSize(adults=2)

    with pytest.raises(ValidationError):
        group.adults = 4


def test_action_step_defaults_to_incomplete():
    action = ActionStep(id="a", title="t", description="d", duration="10m", priority="high")

    assert action.completed is False


def test_weather_forecast_requires_seven_days():
    with pytest.raises(ValidationError):
        WeatherForecast.model_validate(
            {
                "current": {"temperature": 20, "humidity": 50, "wind_speed": 3, "weather_code": 0},
                "daily": [],
            }
        )


def test_location_display_name_prefers_name():
    named = LocationData(lat=1, lng=2, address="1 Main St", name="Town Green")
    unnamed = LocationData(lat=1, lng=2, address="1 Main St")

    assert named.display_name == "Town Green"
    assert unnamed.display_name == "1 Main St"
    assert named.coordinates.lat == 1
