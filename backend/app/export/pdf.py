"""PDF export - renders an itinerary into a downloadable travel guide."""

import logging
import re
import time
import uuid
from dataclasses import dataclass
from pathlib import Path

from fpdf import FPDF, XPos, YPos

from backend.app.errors import ExportError
from backend.app.models.common import format_money
from backend.app.models.itinerary import DayPlan, Summary

logger = logging.getLogger(__name__)

FONT = "Helvetica"
GRAY = (128, 128, 128)
BLACK = (0, 0, 0)


@dataclass(frozen=True)
class ExportResult:
    """Location of a written export."""

    file_name: str
    path: Path


def _latin1(text: str) -> str:
    # Core PDF fonts only cover Latin-1
    return text.replace("→", "->").encode("latin-1", errors="replace").decode("latin-1")


def export_file_name(city: str, now_ms: int | None = None) -> str:
    """Build a distinct file name: travel-guide-<city-slug>-<epoch ms>-<random>.pdf."""
    slug = re.sub(r"\s+", "-", city.strip().lower()) or "trip"
    slug = re.sub(r"[^\w\-]", "", slug) or "trip"
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"travel-guide-{slug}-{stamp}-{uuid.uuid4().hex[:8]}.pdf"


class TravelGuidePDF:
    """Lays out the travel guide on an FPDF document."""

    def __init__(self) -> None:
        self.pdf = FPDF(format="A4")
        self.pdf.set_margins(18, 18, 18)
        self.pdf.set_auto_page_break(auto=True, margin=18)
        self.pdf.add_page()

    def line(self, text: str, size: int = 12, style: str = "", align: str = "L") -> None:
        self.pdf.set_font(FONT, style=style, size=size)
        self.pdf.multi_cell(0, size * 0.6, _latin1(text), align=align, new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def gap(self, lines: float = 1.0) -> None:
        self.pdf.ln(6 * lines)

    def render(self, city: str, days: list[DayPlan], summary: Summary) -> FPDF:
        self.line(f"Your Travel Guide to {city}", size=24, style="B", align="C")
        self.gap()
        self.line(f"Total Estimated Cost: {format_money(summary.total_cost)}", size=16, style="B")
        self.gap(2)

        for day_plan in days:
            self.render_day(day_plan)
            self.pdf.add_page()

        return self.pdf

    def render_day(self, day_plan: DayPlan) -> None:
        self.line(f"Day {day_plan.day}", size=18, style="B")
        self.gap()

        if day_plan.hotel is not None:
            self.line("Hotel:", size=14, style="B")
            self.line(f"{day_plan.hotel.name} - {format_money(day_plan.hotel.price)}", size=14)
            self.gap()

        self.line("Activities:", size=14, style="B")
        for activity in day_plan.activities:
            self.line(f"{activity.place} ({activity.type.value}) - {format_money(activity.cost)}", size=14, style="B")
            self.pdf.set_text_color(*GRAY)
            self.line(activity.description, size=10)
            self.pdf.set_text_color(*BLACK)
            self.gap(0.5)
        self.gap()

        self.line("Transport:", size=14, style="B")
        for leg in day_plan.transport:
            self.line(f"{leg.from_} → {leg.to} ({leg.mode.value})", size=14)


def build_travel_guide(city: str, days: list[DayPlan], summary: Summary) -> FPDF:
    """Render the guide in memory: title, total, then one block per day with a page break after each."""
    return TravelGuidePDF().render(city, days, summary)


def export_itinerary_pdf(
    city: str,
    days: list[DayPlan] | None,
    summary: Summary,
    exports_dir: Path,
) -> ExportResult:
    """Write the travel guide PDF into ``exports_dir``.

    Args:
        city: Destination shown in the title and file name
        days: Day plans to render
        summary: Cost summary
        exports_dir: Directory the file is written to (created if missing)

    Returns:
        ExportResult with the generated file name and path

    Raises:
        ExportError: If ``days`` is absent or the document cannot be written
    """
    if days is None:
        raise ExportError("Itinerary data is required.")

    file_name = export_file_name(city)
    path = exports_dir / file_name

    try:
        exports_dir.mkdir(parents=True, exist_ok=True)
        build_travel_guide(city, days, summary).output(str(path))
    except Exception as e:
        logger.error(f"Error writing PDF {path}: {e}", exc_info=True)
        raise ExportError("Failed to generate PDF.") from e

    logger.info(f"Exported {len(days)} day(s) for {city} to {path}")
    return ExportResult(file_name=file_name, path=path)
