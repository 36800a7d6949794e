"""Health check endpoints.

- /health: liveness, always ok while the process runs
- /healthz: component status (exports directory, generator mode)
"""

import json
import tempfile
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Response

from backend.app.config import Settings, get_settings

router = APIRouter()


def check_exports_dir(settings: Settings) -> tuple[bool, str]:
    """Check that the exports directory exists (or can be created) and is writable.

    Returns:
        (is_ok, status_message)
    """
    try:
        settings.exports_dir.mkdir(parents=True, exist_ok=True)
        with tempfile.TemporaryFile(dir=settings.exports_dir):
            pass
        return (True, "ok")
    except Exception as e:
        return (False, f"error: {type(e).__name__}")


def check_generator(settings: Settings) -> tuple[bool, str]:
    """Report which generator is configured.

    Returns:
        (is_ok, status_message)
    """
    if settings.use_mock_generator:
        return (True, "mock")
    if settings.openai_api_key and settings.openai_api_key.get_secret_value():
        return (True, "openai")
    return (True, "mock_fallback")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz(settings: Annotated[Settings, Depends(get_settings)]) -> dict[str, Any] | Response:
    """Health check endpoint.

    Returns:
        200 with component status if exports can be written
        503 otherwise
    """
    exports_ok, exports_status = check_exports_dir(settings)
    _, generator_status = check_generator(settings)

    response_body = {
        "status": "ok" if exports_ok else "degraded",
        "components": {
            "exports": exports_status,
            "generator": generator_status,
        },
    }

    if not exports_ok:
        return Response(
            content=json.dumps(response_body),
            status_code=503,
            media_type="application/json",
        )

    return response_body
