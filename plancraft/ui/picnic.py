"""UI helpers for the picnic planner tab."""

from __future__ import annotations

import logging
from datetime import date, time, timedelta
from typing import Any, Dict, List, Optional, Set

import streamlit as st

from plancraft.core import open_meteo
from plancraft.core.exporters import (
    picnic_plan_to_ics,
    picnic_plan_to_text,
    whatsapp_share_url,
)
from plancraft.core.formatting import format_long_date
from plancraft.core.locations import geocode_address, search_places
from plancraft.core.weather import describe_weather_code
from plancraft.planners import PlanInputError
from plancraft.schemas import LocationData, PicnicPlan, WeatherForecast
from plancraft.ui.store import recall_plan, remember_plan
from plancraft.workflows.picnic_pipeline import generate_picnic_plan

_PICNIC_PLAN_KEY = "picnic_plan"
_PICNIC_FORECAST_KEY = "picnic_forecast"
_PICNIC_PACKED_KEY = "picnic_packed_ids"
_PICNIC_ERROR_KEY = "picnic_error"
_PICNIC_WEATHER_NOTICE_KEY = "picnic_weather_notice"
PICNIC_LOCATION_KEY = "picnic_location"

_OCCASIONS = ["casual", "birthday", "romantic", "family", "celebration", "corporate"]
_FOOD_STYLES = ["bring-your-own", "potluck", "catered", "store-bought"]
_TRANSPORT = ["car", "bike", "walk", "public-transit"]
_DIETARY_OPTIONS = ["Vegetarian", "Vegan", "Gluten-free", "Dairy-free", "Nut-free", "Halal", "Kosher"]
_DRINK_OPTIONS = ["Water", "Lemonade", "Iced tea", "Soda", "Juice", "Coffee", "Wine", "Beer"]
_ACTIVITY_OPTIONS = [
    "Frisbee",
    "Card games",
    "Music",
    "Nature walk",
    "Ball games",
    "Reading",
    "Photography",
    "Kite flying",
    "Scavenger hunt",
    "Charades",
]
_PACKING_SECTIONS = (
    ("gear", "Gear"),
    ("food", "Food & tableware"),
    ("activities", "Activities"),
    ("safety", "Safety"),
    ("comfort", "Comfort"),
)

_LOGGER = logging.getLogger(__name__)


def ensure_picnic_state() -> None:
    """Initialise the session keys used by the picnic tab."""

    st.session_state.setdefault(_PICNIC_PLAN_KEY, None)
    st.session_state.setdefault(_PICNIC_FORECAST_KEY, None)
    st.session_state.setdefault(_PICNIC_PACKED_KEY, set())
    st.session_state.setdefault(_PICNIC_ERROR_KEY, None)
    st.session_state.setdefault(_PICNIC_WEATHER_NOTICE_KEY, None)
    st.session_state.setdefault(PICNIC_LOCATION_KEY, None)

    if st.session_state[_PICNIC_PLAN_KEY] is None:
        stored = recall_plan()
        if stored and stored.kind == "picnic":
            st.session_state[_PICNIC_PLAN_KEY] = stored.plan
            st.session_state[_PICNIC_PACKED_KEY] = set(stored.completed_ids)


def _format_weather_error(exc: Exception) -> str:
    base_message = "Weather forecast unavailable, so general weather tips are shown."
    details = str(exc).strip()
    if details:
        lowered = details.lower()
        if "400" in lowered or "out of allowed range" in lowered:
            return (
                f"{base_message} Forecasts only cover about the next two weeks; "
                "check back closer to the date."
            )
        if "timed out" in lowered or "timeout" in lowered:
            return f"{base_message} The weather service took too long to respond."
        if "429" in lowered or "too many requests" in lowered:
            return f"{base_message} The weather service rate limit was hit. Try again shortly."
        return f"{base_message} {details}"
    return base_message


def _format_picnic_error(exc: Exception) -> str:
    base_message = "Unable to plan the picnic."
    if isinstance(exc, PlanInputError):
        return f"{base_message} Check the questionnaire answers and try again."
    details = str(exc).strip()
    if details:
        return f"{base_message} {details}"
    return f"{base_message} Try again in a moment."


def _render_location_picker(container) -> Optional[LocationData]:
    with container:
        query = st.text_input("Where is the picnic?", placeholder="Search parks or type an address")
        options: List[LocationData] = search_places(query)
        labels = [f"{place.display_name} · {place.address}" for place in options]
        use_typed = bool(query) and st.checkbox("Use the typed address instead", key="picnic_use_typed")
        if use_typed:
            return geocode_address(query)
        choice = st.selectbox("Suggestions", range(len(options)), format_func=lambda index: labels[index])
        return options[choice] if options else None


def _render_form(container, location: Optional[LocationData]) -> Optional[Dict[str, Any]]:
    with container.form("picnic_form"):
        when_cols = st.columns(3)
        picnic_date = when_cols[0].date_input("Date", value=date.today() + timedelta(days=1))
        start_time = when_cols[1].time_input("Start time", value=time(12, 0))
        duration = when_cols[2].slider("Duration (hours)", min_value=1, max_value=12, value=3)

        group_cols = st.columns(3)
        adults = group_cols[0].number_input("Adults", min_value=1, value=2, step=1)
        kids = group_cols[1].number_input("Kids", min_value=0, value=0, step=1)
        pets = group_cols[2].number_input("Pets", min_value=0, value=0, step=1)

        style_cols = st.columns(4)
        occasion = style_cols[0].selectbox("Occasion", _OCCASIONS)
        food_style = style_cols[1].selectbox("Food", _FOOD_STYLES)
        transportation = style_cols[2].selectbox("Getting there", _TRANSPORT)
        budget = style_cols[3].selectbox("Budget", ["low", "medium", "high"], index=1)

        dietary = st.multiselect("Dietary needs", _DIETARY_OPTIONS)
        drinks = st.multiselect("Drinks", _DRINK_OPTIONS)
        activities = st.multiselect("Activities", _ACTIVITY_OPTIONS)
        extra_activity = st.text_input("Another activity", placeholder="Bocce")
        requests_text = st.text_area("Special requests", placeholder="One per line")
        submitted = st.form_submit_button("Plan my picnic", type="primary")

    if not submitted:
        return None

    if extra_activity.strip():
        activities = [*activities, extra_activity.strip()]
    answers: Dict[str, Any] = {
        "date": picnic_date,
        "time": start_time,
        "location": location.display_name if location else "",
        "group_size": {"adults": int(adults), "kids": int(kids), "pets": int(pets)},
        "occasion": occasion,
        "food_style": food_style,
        "dietary": dietary,
        "drinks": drinks,
        "activities": activities,
        "transportation": transportation,
        "budget": budget,
        "duration": duration,
        "special_requests": requests_text.splitlines(),
    }
    if location:
        answers["coordinates"] = {"lat": location.lat, "lng": location.lng}
    return answers


def _fetch_forecast(answers: Dict[str, Any]) -> Optional[WeatherForecast]:
    coordinates = answers.get("coordinates")
    if not coordinates:
        return None
    try:
        with st.spinner("Checking the forecast…"):
            return open_meteo.fetch_forecast(coordinates["lat"], coordinates["lng"], answers["date"])
    except open_meteo.WeatherServiceError as exc:
        notice = _format_weather_error(exc)
        _LOGGER.warning("Forecast lookup failed: %s", exc)
        st.session_state[_PICNIC_WEATHER_NOTICE_KEY] = notice
        return None


def _handle_submit(answers: Dict[str, Any], location: Optional[LocationData]) -> None:
    if not answers.get("location"):
        st.warning("Pick a location first.")
        return

    st.session_state[_PICNIC_WEATHER_NOTICE_KEY] = None
    forecast = _fetch_forecast(answers)

    try:
        plan = generate_picnic_plan(answers, forecast)
    except Exception as exc:  # noqa: BLE001 - surfaced to the user
        friendly_message = _format_picnic_error(exc)
        _LOGGER.exception("Picnic pipeline failed")
        st.session_state[_PICNIC_ERROR_KEY] = friendly_message
        st.error(friendly_message)
        return

    st.session_state[_PICNIC_ERROR_KEY] = None
    st.session_state[_PICNIC_PLAN_KEY] = plan
    st.session_state[_PICNIC_FORECAST_KEY] = forecast
    st.session_state[_PICNIC_PACKED_KEY] = set()
    st.session_state[PICNIC_LOCATION_KEY] = location
    remember_plan(plan)


def _toggle_packed(plan: PicnicPlan, item_id: str) -> None:
    packed: Set[str] = st.session_state[_PICNIC_PACKED_KEY]
    if item_id in packed:
        packed.discard(item_id)
    else:
        packed.add(item_id)
    remember_plan(plan, packed)


def _render_weather(plan: PicnicPlan) -> None:
    forecast: Optional[WeatherForecast] = st.session_state.get(_PICNIC_FORECAST_KEY)
    notice = st.session_state.get(_PICNIC_WEATHER_NOTICE_KEY)
    if notice:
        st.info(notice)
    if forecast:
        day = forecast.day(plan.date)
        if day:
            description, icon = describe_weather_code(day.weather_code)
            metric_cols = st.columns(4)
            metric_cols[0].metric("Conditions", f"{icon} {description}")
            metric_cols[1].metric("High / Low", f"{day.temperature_max:g}° / {day.temperature_min:g}°")
            metric_cols[2].metric("Rain chance", f"{day.precipitation_probability:g}%")
            metric_cols[3].metric("Wind", f"{day.wind_speed_max:g} km/h")
    st.markdown("\n".join(f"- {tip}" for tip in plan.weather_tips))


def _render_packing(plan: PicnicPlan) -> None:
    packed: Set[str] = st.session_state[_PICNIC_PACKED_KEY]
    st.progress(
        len(packed) / len(plan.packing_list) if plan.packing_list else 0.0,
        text=f"{len(packed)} of {len(plan.packing_list)} packed",
    )
    for category, heading in _PACKING_SECTIONS:
        items = [item for item in plan.packing_list if item.category == category]
        if not items:
            continue
        st.markdown(f"**{heading}**")
        for item in items:
            label = item.name
            if item.quantity:
                label += f" ({item.quantity})"
            if item.essential:
                label += " ★"
            st.checkbox(
                label,
                value=item.id in packed,
                key=f"picnic_item_{item.id}",
                help=item.notes,
                on_change=_toggle_packed,
                args=(plan, item.id),
            )


def _render_plan(plan: PicnicPlan) -> None:
    st.markdown(f"### {plan.title}")
    st.caption(f"{format_long_date(plan.date)} · {plan.location} · {plan.duration} hours")
    st.write(plan.summary)

    sections = st.tabs(["Packing", "Food", "Activities", "Schedule", "Weather", "Safety & backup", "Budget"])
    with sections[0]:
        _render_packing(plan)
    with sections[1]:
        for food in plan.food_suggestions:
            st.markdown(f"**{food.name}** · {food.category} · {food.servings} · {food.prep_time} ({food.difficulty})")
            if food.recipe:
                st.caption(food.recipe)
            if food.tips:
                st.caption(f"Tip: {food.tips}")
    with sections[2]:
        for activity in plan.activities:
            st.markdown(f"**{activity.name}** · {activity.duration} · {activity.participants}")
            st.caption(f"{activity.description} Equipment: {', '.join(activity.equipment)}")
    with sections[3]:
        for slot in plan.schedule:
            st.markdown(f"**{slot.time_slot}** · {slot.activity}")
            st.caption(slot.description)
    with sections[4]:
        _render_weather(plan)
    with sections[5]:
        st.markdown("#### Safety tips")
        st.markdown("\n".join(f"- {tip}" for tip in plan.safety_tips))
        st.markdown("#### Backup plans")
        st.markdown("\n".join(f"- {backup}" for backup in plan.backup_plans))
    with sections[6]:
        st.metric("Estimated total", plan.budget.estimated)
        st.markdown("\n".join(f"- {line.category}: {line.amount}" for line in plan.budget.breakdown))

    action_cols = st.columns(3)
    action_cols[0].download_button(
        "Download plan",
        data=picnic_plan_to_text(plan),
        file_name=f"picnic-{plan.date.isoformat()}.txt",
        mime="text/plain",
        key="picnic_download_text",
        use_container_width=True,
    )
    action_cols[1].download_button(
        "Add to calendar",
        data=picnic_plan_to_ics(plan),
        file_name=f"picnic-{plan.date.isoformat()}.ics",
        mime="text/calendar",
        key="picnic_download_ics",
        use_container_width=True,
    )
    action_cols[2].link_button("Share on WhatsApp", whatsapp_share_url(plan), use_container_width=True)


def render_picnic_tab(container) -> None:
    """Render the picnic questionnaire and the generated plan."""

    ensure_picnic_state()

    with container:
        st.subheader("Picnic Planner")
        location = _render_location_picker(st.container())
        answers = _render_form(st.container(), location)
        if answers is not None:
            _handle_submit(answers, location)

        error_message = st.session_state.get(_PICNIC_ERROR_KEY)
        if error_message:
            st.error(error_message)

        plan: Optional[PicnicPlan] = st.session_state.get(_PICNIC_PLAN_KEY)
        if not plan:
            st.info("Tell us about your picnic to get a full plan.")
            return
        _render_plan(plan)


__all__ = ["PICNIC_LOCATION_KEY", "ensure_picnic_state", "render_picnic_tab"]
