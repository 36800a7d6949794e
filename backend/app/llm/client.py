"""Itinerary generators - deterministic mock and OpenAI-backed.

Security: Reads API key from settings (environment) only, never hardcoded.
The mock generator needs no key and is the default for development and tests.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol

from openai import AsyncOpenAI
from pydantic import ValidationError as PydanticValidationError

from backend.app.config import Settings, get_settings
from backend.app.errors import GenerationError
from backend.app.llm.prompt import SYSTEM_PROMPT, build_itinerary_prompt, wants_surprise
from backend.app.models.api import GenerateRequest
from backend.app.models.itinerary import Activity, DayPlan, GeneratedPlan, Summary

logger = logging.getLogger(__name__)

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


class ItineraryGenerator(Protocol):
    """Protocol for itinerary generator implementations."""

    async def generate(self, request: GenerateRequest) -> GeneratedPlan:
        """Produce a candidate itinerary for a generation request.

        Args:
            request: City, budget, day count and free-text preferences

        Returns:
            GeneratedPlan with day plans, summary and, when preferences ask for
            one, a surprise activity candidate

        Raises:
            GenerationError: If required inputs are missing or upstream fails
        """
        ...


def _require_inputs(request: GenerateRequest) -> None:
    if not request.city or not request.budget or not request.days:
        raise GenerationError("city, budget and days are required for generation")


@lru_cache(maxsize=1)
def load_mock_catalogue() -> dict[str, Any]:
    """Load the bundled mock day templates."""
    with open(FIXTURES_DIR / "mock_itinerary.json", encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)
    return data


class MockItineraryGenerator:
    """Deterministic generator for development and tests (no API key required)."""

    async def generate(self, request: GenerateRequest) -> GeneratedPlan:
        """Build a plan of exactly ``request.days`` days from the fixture templates."""
        _require_inputs(request)
        catalogue = load_mock_catalogue()
        templates = catalogue["days"]

        days: list[DayPlan] = []
        for i in range(request.days or 0):
            template = templates[i % len(templates)]
            days.append(DayPlan.model_validate({**template, "day": i + 1}))

        total_cost = sum(a.cost for d in days for a in d.activities) + sum(
            d.hotel.price for d in days if d.hotel is not None
        )

        surprise = None
        if wants_surprise(request.preferences):
            surprise = Activity.model_validate(catalogue["surprise"])

        logger.info(f"Mock generator built {len(days)} day(s) for {request.city}")
        return GeneratedPlan(
            city=request.city,
            itinerary=days,
            summary=Summary(total_cost=total_cost),
            surprise=surprise,
        )


class OpenAIItineraryGenerator:
    """OpenAI-backed generator."""

    def __init__(self, api_key: str, model: str = "gpt-3.5-turbo", temperature: float = 0.7):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key (read from environment)
            model: Chat model name
            temperature: Sampling temperature
        """
        self.client = AsyncOpenAI(api_key=api_key)
        self.model = model
        self.temperature = temperature

    async def generate(self, request: GenerateRequest) -> GeneratedPlan:
        """Generate a plan with the chat completions API."""
        _require_inputs(request)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": build_itinerary_prompt(request)},
                ],
                temperature=self.temperature,
            )
        except Exception as e:
            logger.error(f"OpenAI API call failed: {e}")
            raise GenerationError("itinerary generation failed upstream") from e

        content = response.choices[0].message.content or ""
        if not content.strip():
            logger.warning("OpenAI returned empty response")
            raise GenerationError("itinerary generation returned no content")

        return parse_generated_plan(content)


def strip_code_fences(content: str) -> str:
    """Remove a surrounding markdown code fence, if present."""
    content = content.strip()
    if content.startswith("```"):
        content = content.strip("`").strip()
        if content.lower().startswith("json"):
            content = content[4:]
    return content.strip()


def parse_generated_plan(content: str) -> GeneratedPlan:
    """Parse model output into a GeneratedPlan.

    Raises:
        GenerationError: If the content is not JSON or does not match the schema
    """
    try:
        data = json.loads(strip_code_fences(content))
    except json.JSONDecodeError as e:
        logger.warning(f"Generator output is not JSON ({len(content)} chars)")
        raise GenerationError("itinerary generation returned invalid JSON") from e

    try:
        return GeneratedPlan.model_validate(data)
    except PydanticValidationError as e:
        logger.warning(f"Generator output failed validation: {e.error_count()} error(s)")
        raise GenerationError("itinerary generation returned a malformed itinerary") from e


def get_generator(settings: Settings | None = None) -> ItineraryGenerator:
    """Factory function to get the configured generator.

    Returns:
        OpenAIItineraryGenerator if an API key is configured and the mock is
        disabled, MockItineraryGenerator otherwise
    """
    settings = settings or get_settings()
    api_key = settings.openai_api_key

    if not settings.use_mock_generator and api_key and api_key.get_secret_value():
        logger.info("Using OpenAI generator")
        return OpenAIItineraryGenerator(
            api_key=api_key.get_secret_value(),
            model=settings.openai_model,
            temperature=settings.openai_temperature,
        )

    if not settings.use_mock_generator:
        logger.warning("No OpenAI API key configured, using mock generator")
    return MockItineraryGenerator()
