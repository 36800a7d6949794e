"""Itinerary generation service - generator call, surprise bonus, identity stamping."""

import logging
import random
from datetime import datetime, timezone

from backend.app.errors import GenerationError
from backend.app.itinerary.identity import assign_identifiers
from backend.app.llm.client import ItineraryGenerator
from backend.app.llm.prompt import wants_surprise
from backend.app.models.api import GenerateRequest
from backend.app.models.itinerary import Activity, GeneratedPlan, Itinerary

logger = logging.getLogger(__name__)


def apply_surprise(plan: GeneratedPlan, bonus: Activity, rng: random.Random) -> GeneratedPlan:
    """Append ``bonus`` (at cost 0) to one day chosen uniformly at random.

    summary.totalCost is left as generated.
    """
    if not plan.itinerary:
        return plan

    index = rng.randrange(len(plan.itinerary))
    target = plan.itinerary[index]
    free_bonus = bonus.model_copy(update={"cost": 0.0})
    days = list(plan.itinerary)
    days[index] = target.model_copy(update={"activities": [*target.activities, free_bonus]})

    logger.info(f"Surprise activity {bonus.place!r} added to day {target.day}")
    return plan.model_copy(update={"itinerary": days})


async def generate_itinerary(
    request: GenerateRequest,
    generator: ItineraryGenerator,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> Itinerary:
    """Generate a complete, identified itinerary for a request.

    Args:
        request: Trip parameters (city, budget, days, preferences)
        generator: Generator implementation (mock or LLM)
        rng: Random source for the surprise day (module RNG when omitted)
        now: Creation timestamp (current UTC time when omitted)

    Returns:
        Itinerary with request metadata and fresh identifiers

    Raises:
        GenerationError: If inputs are missing, the generator fails, or its
            output cannot form a valid itinerary
    """
    if not request.city or not request.budget or not request.days:
        raise GenerationError("city, budget and days are required for generation")

    plan = await generator.generate(request)

    if wants_surprise(request.preferences):
        if plan.surprise is not None:
            plan = apply_surprise(plan, plan.surprise, rng or random.Random())
        else:
            logger.warning("Surprise requested but generator supplied no candidate")

    if len(plan.itinerary) != request.days:
        logger.warning(f"Generator returned {len(plan.itinerary)} day(s), requested {request.days}")

    try:
        itinerary = Itinerary(
            city=request.city,
            budget=request.budget,
            days=request.days,
            preferences=request.preferences or None,
            itinerary=plan.itinerary,
            summary=plan.summary,
            created_at=now or datetime.now(timezone.utc),
        )
    except ValueError as e:
        raise GenerationError("generated itinerary is not valid") from e

    return assign_identifiers(itinerary)
