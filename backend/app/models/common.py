"""Common types and enums shared across all models."""

from enum import Enum


class ActivityType(str, Enum):
    """Category of a visitable place."""

    museum = "museum"
    restaurant = "restaurant"
    park = "park"
    attraction = "attraction"


class TransportMode(str, Enum):
    """Transport mode between two places."""

    walk = "walk"
    bus = "bus"
    train = "train"
    taxi = "taxi"


DEFAULT_ACTIVITY_ICON = "📍"
DEFAULT_TRANSPORT_ICON = "➡️"


def activity_icon(kind: ActivityType | str) -> str:
    """Map an activity category to its display icon."""
    if kind == ActivityType.museum:
        return "🏛️"
    if kind == ActivityType.restaurant:
        return "🍽️"
    if kind == ActivityType.park:
        return "🌳"
    if kind == ActivityType.attraction:
        return "🎡"
    return DEFAULT_ACTIVITY_ICON


def transport_icon(mode: TransportMode | str) -> str:
    """Map a transport mode to its display icon."""
    if mode == TransportMode.walk:
        return "🚶"
    if mode == TransportMode.bus:
        return "🚌"
    if mode == TransportMode.train:
        return "🚆"
    if mode == TransportMode.taxi:
        return "🚕"
    return DEFAULT_TRANSPORT_ICON


def format_money(amount: float) -> str:
    """Display a currency-agnostic amount: whole numbers without decimals."""
    if float(amount).is_integer():
        return f"${int(amount)}"
    return f"${amount:.2f}"
