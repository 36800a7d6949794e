"""Export JSON schemas for Itinerary and the API request bodies."""

import json
from pathlib import Path

from pydantic import BaseModel

from backend.app.models import ExportRequest, GenerateRequest, Itinerary

SCHEMAS: dict[str, type[BaseModel]] = {
    "Itinerary": Itinerary,
    "GenerateRequest": GenerateRequest,
    "ExportRequest": ExportRequest,
}


def main(schemas_dir: Path = Path("docs/schemas")) -> None:
    """Export schemas to docs/schemas/ (client field names)."""
    schemas_dir.mkdir(parents=True, exist_ok=True)

    for name, model in SCHEMAS.items():
        schema = model.model_json_schema(by_alias=True)
        path = schemas_dir / f"{name}.schema.json"
        with open(path, "w", encoding="utf-8") as f:
            json.dump(schema, f, indent=2)
        print(f"Exported {name} schema to {path}")


if __name__ == "__main__":
    main()
