"""Unit tests for itinerary models and icon mapping."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from backend.app.models.common import (
    DEFAULT_ACTIVITY_ICON,
    DEFAULT_TRANSPORT_ICON,
    ActivityType,
    TransportMode,
    activity_icon,
    transport_icon,
)
from backend.app.models.itinerary import Activity, DayPlan, Itinerary, Summary, Transport
from tests.factories import make_activity


def test_wire_names_round_trip(sample_itinerary: Itinerary) -> None:
    """Wire JSON uses camelCase and is accepted back."""
    wire = sample_itinerary.to_wire()

    assert wire["summary"] == {"totalCost": 842.0}
    assert "createdAt" in wire
    assert wire["itinerary"][0]["transport"][0] == {"from": "Hotel Lutetia", "to": "Centre", "mode": "walk"}
    assert Itinerary.model_validate(wire) == sample_itinerary


def test_snake_case_names_accepted() -> None:
    """Python attribute names are accepted too."""
    leg = Transport(from_="A", to="B", mode="bus")
    summary = Summary(total_cost=10)

    assert leg.from_ == "A"
    assert leg.mode is TransportMode.bus
    assert summary.total_cost == 10


@pytest.mark.parametrize(
    "overrides",
    [
        {"cost": -1},
        {"lat": 91},
        {"lng": -181},
        {"type": "casino"},
    ],
)
def test_activity_validation(overrides: dict) -> None:
    """Costs are non-negative, coordinates bounded, categories closed."""
    data = {"place": "X", "type": "park", "description": "", "cost": 0, "lat": 0, "lng": 0, **overrides}

    with pytest.raises(ValidationError):
        Activity.model_validate(data)


def test_models_are_frozen() -> None:
    """Values cannot be changed in place."""
    activity = make_activity("A")

    with pytest.raises(ValidationError):
        activity.cost = 5  # type: ignore[misc]


def test_duplicate_day_numbers_rejected() -> None:
    """Day numbers must be unique within an itinerary."""
    with pytest.raises(ValidationError, match="duplicate day number 1"):
        Itinerary(
            city="Paris",
            budget=100,
            days=2,
            itinerary=[DayPlan(day=1), DayPlan(day=1)],
            summary=Summary(total_cost=0),
            created_at=datetime.now(timezone.utc),
        )


def test_budget_and_days_must_be_positive() -> None:
    """Budget and requested day count are positive."""
    base = {
        "city": "Paris",
        "itinerary": [],
        "summary": {"totalCost": 0},
        "createdAt": "2025-06-10T00:00:00Z",
    }
    with pytest.raises(ValidationError):
        Itinerary.model_validate({**base, "budget": 0, "days": 1})
    with pytest.raises(ValidationError):
        Itinerary.model_validate({**base, "budget": 10, "days": 0})


def test_day_plan_lookup(sample_itinerary: Itinerary) -> None:
    """DayPlans are looked up by day number."""
    assert sample_itinerary.day_plan(2) is sample_itinerary.itinerary[1]
    assert sample_itinerary.day_plan(7) is None


def test_activity_icons_cover_every_category() -> None:
    """Every category maps to a distinct icon; unknown values use the default."""
    icons = {activity_icon(kind) for kind in ActivityType}

    assert len(icons) == len(ActivityType)
    assert DEFAULT_ACTIVITY_ICON not in icons
    assert activity_icon("museum") == activity_icon(ActivityType.museum)
    assert activity_icon("casino") == DEFAULT_ACTIVITY_ICON


def test_transport_icons_cover_every_mode() -> None:
    """Every mode maps to a distinct icon; unknown values use the default."""
    icons = {transport_icon(mode) for mode in TransportMode}

    assert len(icons) == len(TransportMode)
    assert DEFAULT_TRANSPORT_ICON not in icons
    assert transport_icon("ferry") == DEFAULT_TRANSPORT_ICON
