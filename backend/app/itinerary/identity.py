"""Identity assignment - stamps fresh identifiers on a generated itinerary."""

import uuid
from collections.abc import Callable

from backend.app.models.itinerary import Activity, DayPlan, Itinerary


def new_id() -> str:
    """Mint a globally unique identifier."""
    return uuid.uuid4().hex


def assign_identifiers(itinerary: Itinerary, id_factory: Callable[[], str] = new_id) -> Itinerary:
    """Return an equivalent itinerary where every addressable node has a new id.

    This is a pure function: the input is never mutated and day/activity order
    is preserved exactly. Any identifiers already present are replaced.

    Args:
        itinerary: Freshly generated itinerary
        id_factory: Identifier source (uuid4 hex by default)

    Returns:
        New Itinerary with ids on the itinerary, each DayPlan, each Activity
        and each present Hotel. Transport legs get none; a missing hotel stays
        missing.
    """
    days = [_stamp_day(day_plan, id_factory) for day_plan in itinerary.itinerary]
    return itinerary.model_copy(update={"id": id_factory(), "itinerary": days})


def _stamp_day(day_plan: DayPlan, id_factory: Callable[[], str]) -> DayPlan:
    activities = [_stamp_activity(activity, id_factory) for activity in day_plan.activities]
    hotel = day_plan.hotel.model_copy(update={"id": id_factory()}) if day_plan.hotel else None
    return day_plan.model_copy(
        update={
            "id": id_factory(),
            "activities": activities,
            "transport": list(day_plan.transport),
            "hotel": hotel,
        }
    )


def _stamp_activity(activity: Activity, id_factory: Callable[[], str]) -> Activity:
    return activity.model_copy(update={"id": id_factory()})


def collect_identifiers(itinerary: Itinerary) -> list[str | None]:
    """List every identifier in the tree (itinerary, days, activities, hotels)."""
    ids: list[str | None] = [itinerary.id]
    for day_plan in itinerary.itinerary:
        ids.append(day_plan.id)
        ids.extend(activity.id for activity in day_plan.activities)
        if day_plan.hotel is not None:
            ids.append(day_plan.hotel.id)
    return ids
