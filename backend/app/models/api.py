"""Request and response bodies for the HTTP boundary."""

from pydantic import BaseModel, ConfigDict, Field

from backend.app.models.itinerary import DayPlan, Summary


class GenerateRequest(BaseModel):
    """Request body for POST /api/generate.

    Fields are optional here so that missing values reach the route and are
    reported as a 400 with an ``error`` field instead of a schema error. Budget and days must be positive when given.
    """

    city: str | None = None
    budget: float | None = Field(None, gt=0)
    days: int | None = Field(None, gt=0)
    preferences: str = ""


class ExportRequest(BaseModel):
    """Request body for POST /api/export/pdf."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    itinerary: list[DayPlan] | None = None
    city: str = "trip"
    summary: Summary = Field(default_factory=lambda: Summary(total_cost=0))


class ExportResponse(BaseModel):
    """Response for POST /api/export/pdf."""

    url: str


class ErrorResponse(BaseModel):
    """Error body returned for every handled failure."""

    error: str
