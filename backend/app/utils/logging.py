"""Logging setup and structured operation logging."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class StructuredOperationLogger:
    """Structured logger for API operations (generate, export)."""

    def log_operation(
        self,
        operation: str,
        outcome: str,
        latency_ms: float,
        city: str | None = None,
        error_reason: str | None = None,
        **fields: Any,
    ) -> None:
        """Log one finished operation with structured data."""
        log_data: dict[str, Any] = {
            "operation": operation,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }

        if city:
            log_data["city"] = city
        if error_reason:
            log_data["error_reason"] = error_reason
        log_data.update(fields)

        log_msg = f"Operation: {operation} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
