"""Itinerary reorder engine - relocates one activity per drag-and-drop gesture."""

import logging

from backend.app.errors import RelocationError
from backend.app.models.itinerary import Activity, DayPlan, Itinerary

logger = logging.getLogger(__name__)


def relocate_activity(
    itinerary: Itinerary,
    source_day: int,
    source_index: int,
    dest_day: int | None,
    dest_index: int | None,
) -> Itinerary:
    """Move one activity to a position in the same or another day.

    The caller's itinerary is never mutated. The itinerary, the affected
    DayPlan(s) and their activity lists are rebuilt; every other DayPlan and
    every Activity value is shared with the input.

    Args:
        itinerary: Current itinerary
        source_day: Day number the activity is dragged from
        source_index: Position of the activity in the source day
        dest_day: Day number it is dropped on (None when the drop was cancelled)
        dest_index: Position in the destination day (None when cancelled)

    Returns:
        New Itinerary with the activity relocated, or the input itself when the
        destination is absent.

    Raises:
        RelocationError: If a day number matches no DayPlan or source_index is
            out of range.

    Notes:
        Same-day moves remove first and insert into the shortened list, so
        moving an item forward lands at dest_index of the final list.
        dest_index is clamped to [0, len]. Costs, hotels, transport, ids and
        day numbers are untouched and summary.totalCost is not recomputed.
    """
    if dest_day is None or dest_index is None:
        return itinerary

    source = _require_day(itinerary, source_day)
    destination = _require_day(itinerary, dest_day)

    if not 0 <= source_index < len(source.activities):
        raise RelocationError(
            f"activity index {source_index} out of range for day {source_day} "
            f"({len(source.activities)} activities)"
        )

    source_activities = list(source.activities)
    moved = source_activities.pop(source_index)

    if dest_day == source_day:
        _insert_clamped(source_activities, dest_index, moved)
        replacements = {source_day: source.model_copy(update={"activities": source_activities})}
    else:
        dest_activities = list(destination.activities)
        _insert_clamped(dest_activities, dest_index, moved)
        replacements = {
            source_day: source.model_copy(update={"activities": source_activities}),
            dest_day: destination.model_copy(update={"activities": dest_activities}),
        }

    days = [replacements.get(day_plan.day, day_plan) for day_plan in itinerary.itinerary]

    logger.debug(
        f"Relocated activity {moved.id or moved.place!r} "
        f"from day {source_day}[{source_index}] to day {dest_day}[{dest_index}]"
    )
    return itinerary.model_copy(update={"itinerary": days})


def relocate_activity_by_id(
    itinerary: Itinerary,
    activity_id: str,
    dest_day: int | None,
    dest_index: int | None,
) -> Itinerary:
    """Relocate an activity addressed by its identifier instead of its position."""
    source_day, source_index = find_activity(itinerary, activity_id)
    return relocate_activity(itinerary, source_day, source_index, dest_day, dest_index)


def find_activity(itinerary: Itinerary, activity_id: str) -> tuple[int, int]:
    """Locate an activity by id.

    Returns:
        (day number, index within that day)

    Raises:
        RelocationError: If no activity carries ``activity_id``
    """
    for day_plan in itinerary.itinerary:
        for index, activity in enumerate(day_plan.activities):
            if activity.id == activity_id:
                return day_plan.day, index
    raise RelocationError(f"no activity with id {activity_id!r}")


def count_activities(itinerary: Itinerary) -> int:
    """Total number of activities across all days."""
    return sum(len(day_plan.activities) for day_plan in itinerary.itinerary)


def _require_day(itinerary: Itinerary, day: int) -> DayPlan:
    day_plan = itinerary.day_plan(day)
    if day_plan is None:
        raise RelocationError(f"no day {day} in itinerary")
    return day_plan


def _insert_clamped(activities: list[Activity], index: int, activity: Activity) -> None:
    activities.insert(max(0, min(index, len(activities))), activity)
