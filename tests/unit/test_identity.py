"""Unit tests for identity assignment."""

from datetime import datetime, timezone

from backend.app.itinerary.identity import assign_identifiers, collect_identifiers
from backend.app.models.itinerary import DayPlan, Hotel, Itinerary, Summary
from tests.factories import make_activity


def unidentified_itinerary() -> Itinerary:
    return Itinerary(
        city="Paris",
        budget=1000,
        days=2,
        itinerary=[
            DayPlan(
                day=1,
                activities=[make_activity("A"), make_activity("B")],
                hotel=Hotel(name="Hotel Lutetia", price=400, lat=48.85, lng=2.33),
            ),
            DayPlan(day=2, activities=[make_activity("C")]),
        ],
        summary=Summary(total_cost=430),
        created_at=datetime(2025, 6, 10, tzinfo=timezone.utc),
    )


def test_every_node_gets_unique_identifier() -> None:
    """Itinerary, days, activities and present hotels all carry distinct ids."""
    result = assign_identifiers(unidentified_itinerary())

    ids = collect_identifiers(result)

    # 1 itinerary + 2 days + 3 activities + 1 hotel
    assert len(ids) == 7
    assert all(isinstance(i, str) and i for i in ids)
    assert len(set(ids)) == len(ids)


def test_order_and_content_preserved() -> None:
    """Assignment only adds ids; everything else is unchanged."""
    original = unidentified_itinerary()

    result = assign_identifiers(original)

    assert [d.day for d in result.itinerary] == [1, 2]
    assert [a.place for a in result.itinerary[0].activities] == ["A", "B"]
    assert result.itinerary[0].transport == original.itinerary[0].transport
    assert result.summary == original.summary
    assert result.itinerary[0].hotel.name == "Hotel Lutetia"


def test_input_not_mutated() -> None:
    """The input itinerary keeps its missing ids."""
    original = unidentified_itinerary()

    assign_identifiers(original)

    assert collect_identifiers(original) == [None] * 7


def test_missing_hotel_not_synthesized() -> None:
    """A day without a hotel stays without one."""
    result = assign_identifiers(unidentified_itinerary())

    assert result.itinerary[1].hotel is None


def test_existing_identifiers_are_replaced() -> None:
    """Identifiers from the input are not trusted."""
    once = assign_identifiers(unidentified_itinerary())

    twice = assign_identifiers(once)

    assert set(collect_identifiers(once)).isdisjoint(collect_identifiers(twice))


def test_custom_id_factory() -> None:
    """The identifier source is injectable."""
    counter = iter(range(100))

    result = assign_identifiers(unidentified_itinerary(), id_factory=lambda: f"id-{next(counter)}")

    assert sorted(collect_identifiers(result)) == sorted(f"id-{n}" for n in range(7))
