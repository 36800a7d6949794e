"""Shared pytest fixtures for all test suites."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from backend.app.config import Settings, get_settings
from backend.app.main import app
from backend.app.models.common import ActivityType
from backend.app.models.itinerary import Activity, Itinerary
from tests.factories import make_activity, make_itinerary


@pytest.fixture
def sample_itinerary() -> Itinerary:
    """Two-day Paris itinerary with non-ASCII text."""
    return make_itinerary(
        [
            make_activity("Eiffel Tower", 25),
            make_activity("Louvre Museum", 17, ActivityType.museum),
        ],
        [
            Activity(
                place="Cathédrale Notre-Dame de Paris",
                type=ActivityType.attraction,
                description="Cathédrale gothique, 大聖堂, très célèbre ✨",
                cost=0,
                lat=48.853,
                lng=2.3499,
            ),
        ],
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings with exports written to a temporary directory."""
    return Settings(exports_dir=tmp_path / "exports", use_mock_generator=True, openai_api_key=None)


@pytest.fixture
def client(test_settings: Settings) -> Iterator[TestClient]:
    """Create test client with settings overridden."""
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()
