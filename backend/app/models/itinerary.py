"""Itinerary models - the trip plan shared by the API, the UI and exports.

Wire names follow the client contract (``totalCost``, ``createdAt``, ``from``);
Python attributes are snake_case and either form is accepted on input.
Models are frozen: every change produces a new value.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from backend.app.models.common import ActivityType, TransportMode


class Activity(BaseModel):
    """Single visitable place or event."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    place: str
    type: ActivityType
    description: str
    cost: float = Field(..., ge=0)
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Transport(BaseModel):
    """Transport leg between two places (descriptive, never addressed)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str = Field(..., alias="from")
    to: str
    mode: TransportMode


class Hotel(BaseModel):
    """Hotel suggestion for one night."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    name: str
    price: float = Field(..., ge=0)
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class DayPlan(BaseModel):
    """One day's activities (in visit order), transport legs and hotel."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    day: int = Field(..., gt=0)
    activities: list[Activity] = Field(default_factory=list)
    transport: list[Transport] = Field(default_factory=list)
    hotel: Hotel | None = None


class Summary(BaseModel):
    """Generation-time cost totals."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_cost: float = Field(..., ge=0, alias="totalCost")


def _check_unique_days(days: list[DayPlan]) -> None:
    seen: set[int] = set()
    for day_plan in days:
        if day_plan.day in seen:
            raise ValueError(f"duplicate day number {day_plan.day}")
        seen.add(day_plan.day)


class GeneratedPlan(BaseModel):
    """Raw generator output before request metadata and identifiers are stamped."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    city: str | None = None
    itinerary: list[DayPlan]
    summary: Summary
    surprise: Activity | None = None  # Bonus candidate, only used when requested

    @model_validator(mode="after")
    def _unique_day_numbers(self) -> "GeneratedPlan":
        _check_unique_days(self.itinerary)
        return self


class Itinerary(BaseModel):
    """Complete multi-day trip plan for one generation request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str | None = None
    city: str = Field(..., min_length=1)
    country: str | None = None
    budget: float = Field(..., gt=0)
    days: int = Field(..., gt=0)
    preferences: str | None = None
    itinerary: list[DayPlan]
    summary: Summary
    created_at: datetime = Field(..., alias="createdAt")

    @model_validator(mode="after")
    def _unique_day_numbers(self) -> "Itinerary":
        # Day numbers are the lookup key for relocation
        _check_unique_days(self.itinerary)
        return self

    def day_plan(self, day: int) -> DayPlan | None:
        """Return the DayPlan labelled ``day``, if any."""
        for day_plan in self.itinerary:
            if day_plan.day == day:
                return day_plan
        return None

    def to_wire(self) -> dict:
        """Serialize with client field names (camelCase aliases)."""
        return self.model_dump(mode="json", by_alias=True)
