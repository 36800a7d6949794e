"""Helper functions for UI - backend client and view builders."""

from typing import Any

import httpx

from backend.app.models.common import activity_icon, format_money, transport_icon
from backend.app.models.itinerary import Activity, Itinerary, Transport

# One marker and route colour per day, cycled (RGB for pydeck)
DAY_COLORS = [
    [31, 119, 180],
    [255, 127, 14],
    [44, 160, 44],
    [214, 39, 40],
    [148, 103, 189],
    [140, 86, 75],
    [227, 119, 194],
]
HOTEL_COLOR = [68, 68, 68]


def call_generate(
    backend_url: str,
    city: str,
    budget: float,
    days: int,
    preferences: str,
) -> Itinerary:
    """Call /api/generate with the trip form values.

    Args:
        backend_url: Backend base URL (e.g. http://localhost:3001)
        city: Destination city
        budget: Budget in USD
        days: Number of days
        preferences: Free-text preferences

    Returns:
        Generated Itinerary

    Raises:
        httpx.HTTPStatusError: If request fails
    """
    response = httpx.post(
        f"{backend_url}/api/generate",
        json={"city": city, "budget": budget, "days": days, "preferences": preferences},
        timeout=120.0,  # LLM generation can be slow
    )
    response.raise_for_status()
    return Itinerary.model_validate(response.json())


def call_export_pdf(backend_url: str, itinerary: Itinerary) -> str:
    """Call /api/export/pdf and return the document URL.

    Raises:
        httpx.HTTPStatusError: If request fails
    """
    response = httpx.post(
        f"{backend_url}/api/export/pdf",
        json=itinerary.to_wire(),
        timeout=60.0,
    )
    response.raise_for_status()
    url: str = response.json()["url"]
    return url


def error_message(exc: Exception) -> str:
    """User-facing message for a failed backend call."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            body = exc.response.json()
        except ValueError:
            body = {}
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return f"Request failed with status {exc.response.status_code}. Please try again."
    if isinstance(exc, httpx.HTTPError):
        return "Could not reach the planner backend. Please try again."
    return str(exc)


def format_activity_line(activity: Activity) -> str:
    """Markdown line for one activity."""
    return (
        f"{activity_icon(activity.type)} **{activity.place}** ({activity.type.value}) "
        f"- {format_money(activity.cost)}  \n{activity.description}"
    )


def format_transport_line(leg: Transport) -> str:
    """Plain line for one transport leg."""
    return f"{transport_icon(leg.mode)} {leg.from_} → {leg.to} ({leg.mode.value})"


def build_map_points(itinerary: Itinerary | None) -> list[dict[str, Any]]:
    """Map markers for every activity and hotel, in visit order.

    Returns:
        List of dicts with lat, lon, label, tooltip, day, kind and color
    """
    if itinerary is None:
        return []

    points: list[dict[str, Any]] = []
    for position, day_plan in enumerate(itinerary.itinerary):
        color = DAY_COLORS[position % len(DAY_COLORS)]
        for order, activity in enumerate(day_plan.activities, start=1):
            points.append(
                {
                    "lat": activity.lat,
                    "lon": activity.lng,
                    "label": f"Day {day_plan.day} #{order}: {activity.place}",
                    "tooltip": (
                        f"{activity.place} ({activity.type.value})\n"
                        f"{activity.description}\nCost: {format_money(activity.cost)}"
                    ),
                    "day": day_plan.day,
                    "kind": activity.type.value,
                    "color": color,
                }
            )
        if day_plan.hotel is not None:
            points.append(
                {
                    "lat": day_plan.hotel.lat,
                    "lon": day_plan.hotel.lng,
                    "label": f"Day {day_plan.day} hotel: {day_plan.hotel.name}",
                    "tooltip": f"Hotel: {day_plan.hotel.name}\nPrice: {format_money(day_plan.hotel.price)}",
                    "day": day_plan.day,
                    "kind": "hotel",
                    "color": HOTEL_COLOR,
                }
            )
    return points


def build_route_paths(itinerary: Itinerary | None) -> list[dict[str, Any]]:
    """One route per day through its activities in visit order, ending at the hotel.

    Days with fewer than two stops have no route.

    Returns:
        List of dicts with day, path ([lon, lat] pairs) and color
    """
    if itinerary is None:
        return []

    routes: list[dict[str, Any]] = []
    for position, day_plan in enumerate(itinerary.itinerary):
        path = [[activity.lng, activity.lat] for activity in day_plan.activities]
        if day_plan.hotel is not None:
            path.append([day_plan.hotel.lng, day_plan.hotel.lat])
        if len(path) < 2:
            continue
        routes.append({"day": day_plan.day, "path": path, "color": DAY_COLORS[position % len(DAY_COLORS)]})
    return routes


def map_center(points: list[dict[str, Any]]) -> tuple[float, float]:
    """Mean (lat, lon) of the markers."""
    lat = sum(p["lat"] for p in points) / len(points)
    lon = sum(p["lon"] for p in points) / len(points)
    return lat, lon


def build_move_options(itinerary: Itinerary) -> dict[str, str]:
    """Activity id -> label for the move control."""
    options: dict[str, str] = {}
    for day_plan in itinerary.itinerary:
        for order, activity in enumerate(day_plan.activities, start=1):
            if activity.id:
                options[activity.id] = f"Day {day_plan.day} #{order}: {activity.place}"
    return options
