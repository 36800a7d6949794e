"""Models package - re-exports for convenience."""

from backend.app.models.api import ErrorResponse, ExportRequest, ExportResponse, GenerateRequest
from backend.app.models.common import (
    ActivityType,
    TransportMode,
    activity_icon,
    transport_icon,
)
from backend.app.models.itinerary import (
    Activity,
    DayPlan,
    GeneratedPlan,
    Hotel,
    Itinerary,
    Summary,
    Transport,
)

__all__ = [
    # Common
    "ActivityType",
    "TransportMode",
    "activity_icon",
    "transport_icon",
    # Itinerary
    "Itinerary",
    "DayPlan",
    "Activity",
    "Transport",
    "Hotel",
    "Summary",
    "GeneratedPlan",
    # API
    "GenerateRequest",
    "ExportRequest",
    "ExportResponse",
    "ErrorResponse",
]
