"""PDF export endpoints - POST /api/export/pdf, GET /exports/{file_name}."""

import logging
import time
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import FileResponse

from backend.app.config import Settings, get_settings
from backend.app.errors import ExportError, ValidationError
from backend.app.export.pdf import export_itinerary_pdf
from backend.app.models.api import ErrorResponse, ExportRequest, ExportResponse
from backend.app.utils.logging import StructuredOperationLogger
from backend.app.utils.metrics import PrometheusOperationMetrics

router = APIRouter(tags=["export"])
logger = logging.getLogger(__name__)

op_logger = StructuredOperationLogger()
metrics = PrometheusOperationMetrics()


@router.post(
    "/api/export/pdf",
    response_model=ExportResponse,
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def export_pdf(
    body: ExportRequest,
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ExportResponse:
    """Export an itinerary as a PDF travel guide.

    Accepts either ``{itinerary, city, summary}`` or a whole Itinerary object
    (its ``itinerary`` field is the day list).

    Returns:
        URL of the generated document

    Raises:
        ValidationError: 400 if the day list is absent
        ExportError: 500 if the document cannot be written
    """
    if body.itinerary is None:
        raise ValidationError("Itinerary data is required.")

    start = time.monotonic()
    try:
        result = export_itinerary_pdf(body.city, body.itinerary, body.summary, settings.exports_dir)
    except ExportError as e:
        latency_ms = (time.monotonic() - start) * 1000
        metrics.inc_error("export_pdf", type(e.__cause__ or e).__name__)
        metrics.record_latency("export_pdf", "error", latency_ms)
        op_logger.log_operation("export_pdf", "error", latency_ms, city=body.city, error_reason=e.message)
        raise

    latency_ms = (time.monotonic() - start) * 1000
    metrics.record_latency("export_pdf", "success", latency_ms)
    op_logger.log_operation("export_pdf", "success", latency_ms, city=body.city, file=result.file_name)

    url = str(request.url_for("get_export", file_name=result.file_name))
    return ExportResponse(url=url)


@router.get("/exports/{file_name}", name="get_export")
async def get_export(
    file_name: str,
    settings: Annotated[Settings, Depends(get_settings)],
) -> FileResponse:
    """Serve a previously generated document.

    Raises:
        HTTPException: 404 if the file does not exist or the name is not a plain PDF file name
    """
    if Path(file_name).name != file_name or not file_name.endswith(".pdf"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Export not found")

    path = settings.exports_dir / file_name
    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Export not found")

    return FileResponse(path, media_type="application/pdf", filename=file_name)
