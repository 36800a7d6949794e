"""Error taxonomy shared by the API boundary, services and UI."""


class PlannerError(Exception):
    """Base class for all travel planner errors.

    Each subclass carries the HTTP status the API boundary maps it to and a
    user-facing message.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PlannerError):
    """Required request fields missing or malformed. Caller must fix input."""

    status_code = 400


class GenerationError(PlannerError):
    """Upstream itinerary generation failed."""

    status_code = 500


class ExportError(PlannerError):
    """Document could not be produced or written."""

    status_code = 500


class DecodeError(PlannerError):
    """Share token is not a valid encoded itinerary."""

    status_code = 400


class RelocationError(PlannerError):
    """Relocation request does not address existing days/activities."""

    status_code = 400
