"""Itinerary generation endpoint - POST /api/generate."""

import logging
import random
import time
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status

from backend.app.config import Settings, get_settings
from backend.app.errors import GenerationError, ValidationError
from backend.app.itinerary.generation import generate_itinerary
from backend.app.llm.client import ItineraryGenerator, get_generator
from backend.app.models.api import ErrorResponse, GenerateRequest
from backend.app.utils.logging import StructuredOperationLogger
from backend.app.utils.metrics import PrometheusOperationMetrics

router = APIRouter(prefix="/api", tags=["itinerary"])
logger = logging.getLogger(__name__)

op_logger = StructuredOperationLogger()
metrics = PrometheusOperationMetrics()


def get_itinerary_generator(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ItineraryGenerator:
    """Dependency: configured itinerary generator."""
    return get_generator(settings)


def get_rng() -> random.Random:
    """Dependency: random source for the surprise day."""
    return random.Random()


@router.post(
    "/generate",
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    request: GenerateRequest,
    generator: Annotated[ItineraryGenerator, Depends(get_itinerary_generator)],
    rng: Annotated[random.Random, Depends(get_rng)],
) -> dict[str, Any]:
    """Generate a travel itinerary.

    Args:
        request: City, budget, day count and free-text preferences
        generator: Mock or LLM generator
        rng: Random source for the surprise day

    Returns:
        Itinerary JSON with client field names and fresh identifiers

    Raises:
        ValidationError: 400 if city, budget or days is missing (generation not attempted)
        GenerationError: 500 if generation fails
    """
    if not request.city or not request.budget or not request.days:
        raise ValidationError("City, budget, and days are required.")

    logger.info(f"[POST /api/generate] city={request.city}, days={request.days}")
    start = time.monotonic()

    try:
        itinerary = await generate_itinerary(request, generator, rng=rng)
    except Exception as e:
        latency_ms = (time.monotonic() - start) * 1000
        reason = type(e).__name__
        logger.error(f"[POST /api/generate] city={request.city} failed: {e}", exc_info=True)
        metrics.inc_error("generate", reason)
        metrics.record_latency("generate", "error", latency_ms)
        op_logger.log_operation("generate", "error", latency_ms, city=request.city, error_reason=reason)
        raise GenerationError("Failed to generate itinerary.") from e

    latency_ms = (time.monotonic() - start) * 1000
    metrics.record_latency("generate", "success", latency_ms)
    op_logger.log_operation(
        "generate",
        "success",
        latency_ms,
        city=request.city,
        days=len(itinerary.itinerary),
    )
    return itinerary.to_wire()
