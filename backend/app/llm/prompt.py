"""Prompt templates for LLM itinerary generation."""

from backend.app.models.api import GenerateRequest

SYSTEM_PROMPT = (
    "You are a travel itinerary planner. You answer with a single valid JSON object "
    "and never include text outside the JSON."
)

JSON_STRUCTURE = """{
  "itinerary": [
    {
      "day": number,
      "activities": [
        { "place": "string", "type": "museum"|"restaurant"|"park"|"attraction", "description": "string", "cost": number, "lat": number, "lng": number }
      ],
      "transport": [
        { "from": "string", "to": "string", "mode": "walk"|"bus"|"train"|"taxi" }
      ],
      "hotel": { "name": "string", "price": number, "lat": number, "lng": number }
    }
  ],
  "summary": { "totalCost": number }
}"""

SURPRISE_INSTRUCTION = """
Also add a top-level "surprise" key holding one extra free activity (cost 0) with the
same shape as an activity: a lesser-known local gem the traveller would not expect.
"""


def wants_surprise(preferences: str | None) -> bool:
    """True when the preferences ask for a surprise (case-insensitive)."""
    return "surprise" in (preferences or "").lower()


def build_itinerary_prompt(request: GenerateRequest) -> str:
    """Build the user prompt for a generation request."""
    prompt = f"""
Create a travel itinerary for the city: {request.city}, with a budget of {request.budget} USD, for {request.days} days, with preferences for: {request.preferences}.
For each day, provide:
- A list of places to visit (like museums, parks, restaurants) with a short description, estimated cost, and geographic coordinates (latitude and longitude).
- Transportation methods between locations.
- A hotel suggestion with its price and coordinates.

Number the days 1 to {request.days}.
Return the output in a valid JSON format. Do not include any text outside the JSON.
The JSON structure should be:
{JSON_STRUCTURE}
"""
    if wants_surprise(request.preferences):
        prompt += SURPRISE_INSTRUCTION
    return prompt
