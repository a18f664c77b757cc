"""Data schemas for the Plancraft application."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Iterable, List, Literal, Optional, Tuple

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    PositiveInt,
    field_validator,
)


BudgetTier = Literal["low", "medium", "high"]
TimeFrame = Literal["days", "weeks", "months"]
TimeUnit = Literal["minutes", "hours"]
PlanStyle = Literal["structured", "flexible", "intensive"]
Priority = Literal["high", "medium", "low"]
Occasion = Literal["casual", "birthday", "romantic", "family", "celebration", "corporate"]
FoodStyle = Literal["bring-your-own", "potluck", "catered", "store-bought"]
Transportation = Literal["car", "bike", "walk", "public-transit"]
PackingCategory = Literal["food", "gear", "activities", "safety", "comfort"]
FoodCategory = Literal["main", "side", "snack", "dessert", "drink"]
ActivityCategory = Literal["active", "games", "relaxation", "creative", "exploration"]
Difficulty = Literal["easy", "medium", "hard"]
AgeGroup = Literal["all", "kids", "adults"]


def _dedupe_tags(values: object) -> object:
    """Strip, drop blanks and de-duplicate while keeping the first spelling."""

    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    if not isinstance(values, Iterable):
        return values

    seen: set[str] = set()
    cleaned: List[str] = []
    for value in values:
        text = str(value).strip()
        if not text:
            continue
        key = text.lower()
        if key in seen:
            continue
        seen.add(key)
        cleaned.append(text)
    return cleaned


def _require_text(value: object) -> object:
    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
    return value


# ---------------------------------------------------------------------------
# Goal pipeline
# ---------------------------------------------------------------------------


class GoalInput(BaseModel):
    """Questionnaire answers for a personal goal."""

    goal: str
    deadline: PositiveInt
    time_frame: TimeFrame = Field(
        default="weeks",
        validation_alias=AliasChoices("time_frame", "timeFrame"),
    )
    available_time: float = Field(
        gt=0,
        validation_alias=AliasChoices("available_time", "availableTime"),
    )
    time_unit: TimeUnit = Field(
        default="minutes",
        validation_alias=AliasChoices("time_unit", "timeUnit"),
    )
    preferences: List[str] = Field(default_factory=list)
    constraints: List[str] = Field(default_factory=list)
    budget: BudgetTier = "medium"
    intensity: BudgetTier = "medium"
    style: PlanStyle = "structured"

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("goal", mode="before")
    @classmethod
    def _check_goal(cls, value: object) -> object:
        return _require_text(value)

    @field_validator("preferences", "constraints", mode="before")
    @classmethod
    def _clean_tags(cls, value: object) -> object:
        return _dedupe_tags(value)

    @property
    def daily_minutes(self) -> float:
        """Daily available time expressed in minutes."""

        if self.time_unit == "hours":
            return self.available_time * 60
        return self.available_time


class ActionStep(BaseModel):
    """A single to-do item inside a phase."""

    id: str
    title: str
    description: str
    duration: str
    completed: bool = False
    priority: Priority

    model_config = ConfigDict(frozen=True)


class Phase(BaseModel):
    """A contiguous, date-bounded segment of a goal plan."""

    id: str
    title: str
    description: str
    start_date: date
    end_date: date
    actions: Tuple[ActionStep, ...] = ()
    milestone: str
    resources: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


class GoalPlan(BaseModel):
    """Complete plan generated for a goal."""

    id: str
    title: str
    goal: str
    domain: str
    total_duration: str
    total_days: PositiveInt
    summary: str
    phases: Tuple[Phase, ...] = ()
    resources: Tuple[str, ...] = ()
    checkpoints: Tuple[str, ...] = ()
    tips: Tuple[str, ...] = ()
    created_at: datetime

    model_config = ConfigDict(frozen=True)

    def all_actions(self) -> Iterable[ActionStep]:
        for phase in self.phases:
            yield from phase.actions

    def completed_ids(self) -> set[str]:
        return {action.id for action in self.all_actions() if action.completed}

    def with_completed(self, completed_ids: Iterable[str]) -> "GoalPlan":
        """Return a new plan whose action completion mirrors ``completed_ids``.

        Completion is tracked outside the plan as a set of action ids. This
        merges that overlay into a fresh record and leaves ``self`` untouched.
        Ids that do not belong to the plan are ignored.
        """

        done = set(completed_ids)
        phases = tuple(
            phase.model_copy(
                update={
                    "actions": tuple(
                        action.model_copy(update={"completed": action.id in done})
                        for action in phase.actions
                    )
                }
            )
            for phase in self.phases
        )
        return self.model_copy(update={"phases": phases})


# ---------------------------------------------------------------------------
# Picnic pipeline
# ---------------------------------------------------------------------------


class Coordinates(BaseModel):
    """Latitude/longitude pair supplied by the location provider."""

    lat: float
    lng: float

    model_config = ConfigDict(frozen=True)


class GroupSize(BaseModel):
    """Who is coming along."""

    adults: PositiveInt = 1
    kids: NonNegativeInt = 0
    pets: NonNegativeInt = 0

    model_config = ConfigDict(frozen=True)

    @property
    def headcount(self) -> int:
        """People eating and drinking; pets are not counted."""

        return self.adults + self.kids


class PicnicInput(BaseModel):
    """Questionnaire answers for a picnic."""

    date: date
    time: time
    location: str
    coordinates: Optional[Coordinates] = None
    group_size: GroupSize = Field(
        default_factory=GroupSize,
        validation_alias=AliasChoices("group_size", "groupSize"),
    )
    occasion: Occasion = "casual"
    food_style: FoodStyle = Field(
        default="bring-your-own",
        validation_alias=AliasChoices("food_style", "foodStyle", "style"),
    )
    dietary: List[str] = Field(default_factory=list)
    drinks: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("drinks", "drink_preferences", "drinkPreferences"),
    )
    activities: List[str] = Field(default_factory=list)
    transportation: Transportation = "car"
    budget: BudgetTier = "medium"
    duration: int = Field(default=3, ge=1, le=12)
    special_requests: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("special_requests", "specialRequests"),
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("location", mode="before")
    @classmethod
    def _check_location(cls, value: object) -> object:
        return _require_text(value)

    @field_validator("dietary", "drinks", "activities", "special_requests", mode="before")
    @classmethod
    def _clean_tags(cls, value: object) -> object:
        """Tag lists behave as ordered sets."""

        return _dedupe_tags(value)


class PackingItem(BaseModel):
    id: str
    name: str
    category: PackingCategory
    essential: bool
    quantity: Optional[str] = None
    notes: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class FoodSuggestion(BaseModel):
    id: str
    name: str
    category: FoodCategory
    servings: str
    prep_time: str
    difficulty: Difficulty
    recipe: Optional[str] = None
    tips: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ActivityDetail(BaseModel):
    id: str
    name: str
    category: ActivityCategory
    duration: str
    participants: str
    equipment: Tuple[str, ...] = ()
    age_group: AgeGroup = "all"
    description: str

    model_config = ConfigDict(frozen=True)


class ScheduleSlot(BaseModel):
    time_slot: str
    activity: str
    description: str

    model_config = ConfigDict(frozen=True)


class BudgetLine(BaseModel):
    category: str
    amount: str

    model_config = ConfigDict(frozen=True)


class BudgetEstimate(BaseModel):
    estimated: str
    breakdown: Tuple[BudgetLine, ...] = ()

    model_config = ConfigDict(frozen=True)


class PicnicPlan(BaseModel):
    """Complete plan generated for a picnic."""

    id: str
    title: str
    date: date
    time: time
    location: str
    coordinates: Optional[Coordinates] = None
    duration: int
    group_size: GroupSize
    occasion: Occasion
    food_style: FoodStyle
    transportation: Transportation
    summary: str
    packing_list: Tuple[PackingItem, ...] = ()
    food_suggestions: Tuple[FoodSuggestion, ...] = ()
    activities: Tuple[ActivityDetail, ...] = ()
    schedule: Tuple[ScheduleSlot, ...] = ()
    weather_tips: Tuple[str, ...] = ()
    safety_tips: Tuple[str, ...] = ()
    backup_plans: Tuple[str, ...] = ()
    budget: BudgetEstimate
    created_at: datetime

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Weather & location
# ---------------------------------------------------------------------------


class CurrentConditions(BaseModel):
    temperature: float
    humidity: float = Field(ge=0, le=100)
    wind_speed: float
    weather_code: int
    is_day: bool = True


class DailyForecast(BaseModel):
    date: date
    temperature_max: float
    temperature_min: float
    precipitation_probability: float = Field(default=0, ge=0, le=100)
    weather_code: int
    wind_speed_max: float


class WeatherForecast(BaseModel):
    """Current snapshot plus a seven-day outlook."""

    current: CurrentConditions
    daily: List[DailyForecast] = Field(min_length=7, max_length=7)

    def day(self, target: date) -> Optional[DailyForecast]:
        for entry in self.daily:
            if entry.date == target:
                return entry
        return None


class LocationData(BaseModel):
    """A resolved location from the location provider."""

    lat: float
    lng: float
    address: str
    name: Optional[str] = None
    place_id: Optional[str] = None

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(lat=self.lat, lng=self.lng)

    @property
    def display_name(self) -> str:
        return self.name or self.address


__all__ = [
    "ActionStep",
    "ActivityDetail",
    "BudgetEstimate",
    "BudgetLine",
    "BudgetTier",
    "Coordinates",
    "CurrentConditions",
    "DailyForecast",
    "FoodStyle",
    "FoodSuggestion",
    "GoalInput",
    "GoalPlan",
    "GroupSize",
    "LocationData",
    "Occasion",
    "PackingItem",
    "Phase",
    "PicnicInput",
    "PicnicPlan",
    "ScheduleSlot",
    "WeatherForecast",
]
