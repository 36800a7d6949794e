"""Unit tests for the UI planner session."""

from backend.app.itinerary.sharing import encode
from backend.app.models.itinerary import Itinerary
from tests.factories import places
from ui.session import PlannerSession


def test_apply_generated_resets_transient_state(sample_itinerary: Itinerary) -> None:
    """A new itinerary clears the previous PDF link and error."""
    session = PlannerSession(pdf_url="http://x/old.pdf", error="old")

    session.apply_generated(sample_itinerary)

    assert session.itinerary is sample_itinerary
    assert session.pdf_url is None
    assert session.error is None


def test_relocate_replaces_itinerary(sample_itinerary: Itinerary) -> None:
    """A move swaps in a new itinerary value."""
    session = PlannerSession()
    session.apply_generated(sample_itinerary)

    changed = session.relocate(1, 0, 2, 1)

    assert changed is True
    assert session.itinerary is not sample_itinerary
    assert places(session.itinerary.itinerary[1]) == ["Cathédrale Notre-Dame de Paris", "Eiffel Tower"]
    assert places(sample_itinerary.itinerary[0]) == ["Eiffel Tower", "Louvre Museum"]


def test_cancelled_drag_keeps_itinerary(sample_itinerary: Itinerary) -> None:
    """A drop outside any list changes nothing."""
    session = PlannerSession()
    session.apply_generated(sample_itinerary)

    assert session.relocate(1, 0, None, None) is False
    assert session.itinerary is sample_itinerary


def test_invalid_relocation_keeps_state(sample_itinerary: Itinerary) -> None:
    """A rejected move records an error and leaves the itinerary as it was."""
    session = PlannerSession()
    session.apply_generated(sample_itinerary)

    assert session.relocate(9, 0, 1, 0) is False
    assert session.itinerary is sample_itinerary
    assert session.error


def test_relocate_by_id(sample_itinerary: Itinerary) -> None:
    """Moves can address activities by id."""
    session = PlannerSession()
    session.apply_generated(sample_itinerary)
    louvre_id = sample_itinerary.itinerary[0].activities[1].id

    assert session.relocate_by_id(louvre_id, 1, 0) is True
    assert places(session.itinerary.itinerary[0]) == ["Louvre Museum", "Eiffel Tower"]


def test_relocate_without_itinerary_is_noop() -> None:
    """Nothing to move before generation."""
    session = PlannerSession()

    assert session.relocate(1, 0, 1, 1) is False
    assert session.relocate_by_id("x", 1, 0) is False


def test_load_shared_valid_token(sample_itinerary: Itinerary) -> None:
    """A share token reconstructs the itinerary verbatim."""
    session = PlannerSession()

    assert session.load_shared(encode(sample_itinerary)) is True
    assert session.itinerary == sample_itinerary


def test_load_shared_invalid_token_leaves_state_empty() -> None:
    """A malformed token is ignored without raising."""
    session = PlannerSession()

    assert session.load_shared("definitely-not-a-trip") is False
    assert session.itinerary is None


def test_share_url(sample_itinerary: Itinerary) -> None:
    """Share URLs embed the encoded itinerary."""
    session = PlannerSession()
    assert session.share_url("http://localhost:8501/", "trip") is None

    session.apply_generated(sample_itinerary)
    url = session.share_url("http://localhost:8501/", "trip")

    assert url == f"http://localhost:8501/?trip={encode(sample_itinerary)}"


def test_begin_request_marks_session_busy() -> None:
    """A queued request keeps the session loading until it finishes."""
    session = PlannerSession()

    assert session.begin_request("generate", city="Paris", budget=1500.0, days=2, preferences="") is True

    assert session.loading is True
    assert session.pending == {"action": "generate", "city": "Paris", "budget": 1500.0, "days": 2, "preferences": ""}


def test_begin_request_rejected_while_in_flight() -> None:
    """A second request is not queued while one is in flight."""
    session = PlannerSession()
    session.begin_request("generate", city="Paris")

    assert session.begin_request("export") is False
    assert session.pending["action"] == "generate"


def test_finish_request_clears_pending(sample_itinerary: Itinerary) -> None:
    """Finishing a request frees the controls and keeps the itinerary."""
    session = PlannerSession()
    session.apply_generated(sample_itinerary)
    session.begin_request("export")

    session.finish_request()

    assert session.loading is False
    assert session.pending is None
    assert session.itinerary is sample_itinerary
