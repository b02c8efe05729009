"""Tests for the itinerary store."""
import pytest

from mytravel.models.itinerary import Itinerary, ItineraryCategory, ItineraryItemInput
from mytravel.services.catalog import DestinationCatalog


def make_input(title="Museum", duration="1h", travel_time="15m", location="Paris, France", cost=0, **kwargs):
    return ItineraryItemInput(
        title=title,
        duration=duration,
        travel_time=travel_time,
        location=location,
        cost=cost,
        **kwargs
    )


@pytest.fixture
def paris_day():
    itinerary = Itinerary()
    itinerary.add(make_input("Breakfast", "1h", "15m", cost=110, category=ItineraryCategory.FOOD))
    itinerary.add(make_input("Museum", "3h", "20m", cost=200))
    itinerary.add(make_input("Lunch", "1.5h", "10m", cost=260, category=ItineraryCategory.FOOD))
    return itinerary


class TestAdd:
    """Test adding entries."""

    def test_add_appends_with_unique_id(self):
        itinerary = Itinerary()
        first = itinerary.add(make_input("First"))
        second = itinerary.add(make_input("Second"))

        assert [i.title for i in itinerary] == ["First", "Second"]
        assert first.id != second.id

    def test_missing_travel_time_defaults(self):
        itinerary = Itinerary()
        item = itinerary.add(make_input(travel_time=""))
        assert item.travel_time == "0m"

    @pytest.mark.parametrize("overrides", [
        {"title": ""},
        {"title": "   "},
        {"duration": ""},
        {"location": ""},
        {"title": "x" * 51},
        {"cost": -5},
        {"cost": float("nan")},
        {"cost": float("inf")},
    ])
    def test_invalid_input_is_noop(self, overrides):
        """Invalid input is ignored without raising."""
        itinerary = Itinerary()
        itinerary.add(make_input("Keep"))

        result = itinerary.add(make_input(**overrides))

        assert result is None
        assert [i.title for i in itinerary] == ["Keep"]

    def test_location_id_resolves_through_catalog(self):
        itinerary = Itinerary()
        item = itinerary.add(
            make_input(location="", location_id="asi-1"),
            resolver=DestinationCatalog()
        )
        assert item.location == "Tokyo, Japan"

    def test_resolved_name_wins_over_free_text(self):
        itinerary = Itinerary()
        item = itinerary.add(
            make_input(location="somewhere", location_id="eur-1"),
            resolver=DestinationCatalog()
        )
        assert item.location == "Paris, France"

    def test_unknown_location_id_falls_back_to_text(self):
        itinerary = Itinerary()
        item = itinerary.add(
            make_input(location="Ipoh", location_id="nope"),
            resolver=DestinationCatalog()
        )
        assert item.location == "Ipoh"


class TestRemove:
    """Test removing entries."""

    def test_remove_existing(self, paris_day):
        museum = paris_day.items[1]
        assert paris_day.remove(museum.id)
        assert [i.title for i in paris_day] == ["Breakfast", "Lunch"]

    def test_remove_missing_id_leaves_list_unchanged(self, paris_day):
        before = [i.id for i in paris_day]
        assert not paris_day.remove("does-not-exist")
        assert [i.id for i in paris_day] == before

    def test_remove_all_gives_zero_cost(self, paris_day):
        for item in list(paris_day):
            paris_day.remove(item.id)
        summary = paris_day.aggregate()
        assert summary.total_cost == 0
        assert summary.item_count == 0


class TestReorder:
    """Test moving entries."""

    def test_move_forward_shifts_others(self, paris_day):
        paris_day.reorder(0, 2)
        assert [i.title for i in paris_day] == ["Museum", "Lunch", "Breakfast"]

    def test_move_backward_shifts_others(self, paris_day):
        paris_day.reorder(2, 0)
        assert [i.title for i in paris_day] == ["Lunch", "Breakfast", "Museum"]

    def test_adjacent_swap_is_reversible(self, paris_day):
        before = [i.id for i in paris_day]
        paris_day.reorder(0, 1)
        paris_day.reorder(1, 0)
        assert [i.id for i in paris_day] == before

    @pytest.mark.parametrize("source,target", [(-1, 0), (0, 3), (5, 1), (1, -2)])
    def test_out_of_range_is_noop(self, paris_day, source, target):
        before = [i.id for i in paris_day]
        assert not paris_day.reorder(source, target)
        assert [i.id for i in paris_day] == before

    def test_same_position_reports_no_change(self, paris_day):
        assert not paris_day.reorder(1, 1)
        assert paris_day.reorder(1, 2)

    def test_reorder_keeps_same_ids(self, paris_day):
        before = sorted(i.id for i in paris_day)
        for source, target in [(0, 2), (1, 0), (2, 1), (0, 0)]:
            paris_day.reorder(source, target)
        assert sorted(i.id for i in paris_day) == before


class TestAggregate:
    """Test summary statistics."""

    def test_paris_day_totals(self, paris_day):
        summary = paris_day.aggregate()

        assert summary.total_cost == 570
        assert summary.total_activity_minutes == 330
        assert summary.total_travel_minutes == 45
        assert summary.total_minutes == 375
        assert summary.activity_time == "5h 30m"
        assert summary.location_count == 1
        assert summary.item_count == 3

    def test_location_count_is_distinct_exact_match(self):
        itinerary = Itinerary()
        for location in ["Paris", "Paris", "Tokyo", "paris"]:
            itinerary.add(make_input(location=location))
        assert itinerary.aggregate().location_count == 3

    def test_empty_itinerary(self):
        summary = Itinerary().aggregate()
        assert summary.total_cost == 0
        assert summary.total_time == "0m"

    def test_cost_tracks_adds_and_removes(self):
        itinerary = Itinerary()
        a = itinerary.add(make_input(cost=10.5))
        itinerary.add(make_input(cost=20))
        itinerary.add(make_input(cost=30))
        itinerary.remove(a.id)
        assert itinerary.aggregate().total_cost == 50
