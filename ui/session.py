"""Client session state - the one owner of the itinerary on the UI side.

Generate and relocate are the only operations that replace the itinerary;
export and share read a snapshot of it.
"""

import logging
from dataclasses import dataclass
from typing import Any

from backend.app.errors import DecodeError, RelocationError
from backend.app.itinerary.reorder import relocate_activity, relocate_activity_by_id
from backend.app.itinerary.sharing import build_share_url, decode
from backend.app.models.itinerary import Itinerary

logger = logging.getLogger(__name__)


@dataclass
class PlannerSession:
    """Mutable holder for one browser session's planner state."""

    itinerary: Itinerary | None = None
    loading: bool = False
    error: str | None = None
    pdf_url: str | None = None
    pending: dict[str, Any] | None = None

    def apply_generated(self, itinerary: Itinerary) -> None:
        """Replace the itinerary with a freshly generated one."""
        self.itinerary = itinerary
        self.pdf_url = None
        self.error = None

    def fail(self, message: str) -> None:
        """Record a failed request; the current itinerary is kept."""
        self.error = message

    def begin_request(self, action: str, **payload: Any) -> bool:
        """Queue a backend request and mark the session busy.

        The request runs on the next script run, after the triggering
        controls have rendered disabled.

        Returns:
            False if another request is already in flight
        """
        if self.loading:
            return False
        self.loading = True
        self.pending = {"action": action, **payload}
        return True

    def finish_request(self) -> None:
        """Clear the in-flight request, whatever its outcome."""
        self.loading = False
        self.pending = None

    def relocate(
        self,
        source_day: int,
        source_index: int,
        dest_day: int | None,
        dest_index: int | None,
    ) -> bool:
        """Apply one drag-and-drop move.

        Returns:
            True if the itinerary value changed
        """
        if self.itinerary is None:
            return False
        try:
            updated = relocate_activity(self.itinerary, source_day, source_index, dest_day, dest_index)
        except RelocationError as e:
            logger.warning(f"Relocation rejected: {e.message}")
            self.error = e.message
            return False
        return self._replace(updated)

    def relocate_by_id(self, activity_id: str, dest_day: int | None, dest_index: int | None) -> bool:
        """Apply one move addressed by activity id.

        Returns:
            True if the itinerary value changed
        """
        if self.itinerary is None:
            return False
        try:
            updated = relocate_activity_by_id(self.itinerary, activity_id, dest_day, dest_index)
        except RelocationError as e:
            logger.warning(f"Relocation rejected: {e.message}")
            self.error = e.message
            return False
        return self._replace(updated)

    def load_shared(self, token: str) -> bool:
        """Reconstruct the itinerary from a share token.

        A malformed token is logged and leaves the itinerary empty.

        Returns:
            True if the token decoded
        """
        try:
            itinerary = decode(token)
        except DecodeError as e:
            logger.warning(f"Ignoring share token: {e.message}")
            self.itinerary = None
            return False
        self.apply_generated(itinerary)
        return True

    def share_url(self, base_url: str, param: str) -> str | None:
        """Share link for the current itinerary, if any."""
        if self.itinerary is None:
            return None
        return build_share_url(base_url, self.itinerary, param=param)

    def _replace(self, updated: Itinerary) -> bool:
        changed = updated is not self.itinerary
        self.itinerary = updated
        if changed:
            self.pdf_url = None
            self.error = None
        return changed
