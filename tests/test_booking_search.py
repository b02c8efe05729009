"""Tests for booking search and the selection flow."""
import pytest

from mytravel.models.cart import CartItemType
from mytravel.models.search import SearchState, SearchTab
from mytravel.models.session import Session
from mytravel.services.booking_search import BookingSearch
from mytravel.services.catalog import DestinationCatalog


@pytest.fixture
def search():
    return BookingSearch(DestinationCatalog())


@pytest.fixture
def session():
    return Session()


class TestSearch:
    """Test offer filtering."""

    def test_empty_query_returns_everything(self, search, session):
        results = search.search(session, SearchTab.HOTELS, "")
        assert len(results) == 4
        assert session.search.state == SearchState.RESULTS_SHOWN

    def test_substring_is_case_insensitive(self, search, session):
        results = search.search(session, SearchTab.FLIGHTS, "kyoto")
        assert [f.id for f in results] == ["f4"]

    def test_destination_id_is_resolved_to_city(self, search, session):
        results = search.search(session, SearchTab.TOURS, "eur-5")
        assert [t.title for t in results] == ["Volcano & Hot Springs"]

    def test_stored_destination_used_without_query(self, search, session):
        search.set_destination(session, SearchTab.HOTELS, "asi-2")
        results = search.search(session, SearchTab.HOTELS)
        assert [h.name for h in results] == ["Kyoto Ryokan"]

    def test_no_match(self, search, session):
        assert search.search(session, SearchTab.HOTELS, "Atlantis") == []


class TestSelect:
    """Test selection and tab advancement."""

    def test_flight_selection_fills_cart_and_moves_to_hotels(self, search, session):
        item = search.select(session, SearchTab.FLIGHTS, "f1")

        assert item.type == CartItemType.FLIGHT
        assert item.title == "Aegean Airlines to Santorini, Greece"
        assert item.details == "New York - Santorini, Greece | 10:00 AM"
        assert session.cart.total == 850
        assert session.search.active_tab == SearchTab.HOTELS
        assert session.search.destination_for(SearchTab.HOTELS).value == "eur-5"
        assert session.search.destination_for(SearchTab.TOURS).value == "eur-5"

    def test_hotel_selection_moves_to_tours(self, search, session):
        item = search.select(session, SearchTab.HOTELS, "h4")

        assert item.details == "Kyoto, Japan | 4.9 Stars"
        assert item.price == 300
        assert session.search.active_tab == SearchTab.TOURS
        assert session.search.destination_for(SearchTab.TOURS).value == "asi-2"

    def test_tour_selection_returns_to_idle(self, search, session):
        search.set_tab(session, SearchTab.TOURS)
        item = search.select(session, SearchTab.TOURS, "t4")

        assert item.details == "2 hours | cultural"
        assert session.search.active_tab == SearchTab.TOURS
        assert session.search.state == SearchState.IDLE

    def test_unknown_offer(self, search, session):
        assert search.select(session, SearchTab.FLIGHTS, "f99") is None
        assert session.cart.is_empty()

    def test_unmatched_place_is_carried_as_text(self, search, session):
        search.select(session, SearchTab.FLIGHTS, "f2")
        assert session.search.destination_for(SearchTab.HOTELS).value == "Maldives, Asia"
        results = search.search(session, SearchTab.HOTELS)
        assert [h.id for h in results] == ["h2"]

    def test_manual_destination_is_not_overwritten(self, search, session):
        search.set_destination(session, SearchTab.HOTELS, "asi-2")
        search.select(session, SearchTab.FLIGHTS, "f1")

        assert session.search.destination_for(SearchTab.HOTELS).value == "asi-2"
        assert session.search.destination_for(SearchTab.TOURS).value == "eur-5"

    def test_tabs_can_be_changed_freely(self, search, session):
        search.set_tab(session, SearchTab.TOURS)
        assert session.search.active_tab == SearchTab.TOURS
        search.set_tab(session, SearchTab.FLIGHTS)
        assert session.search.active_tab == SearchTab.FLIGHTS


class TestPrefill:
    """Test destination hints from the browse pages."""

    def test_prefill_sets_all_tabs_and_opens_hotels(self, search, session):
        assert search.prefill(session, "Kyoto Cultural Tour")
        for tab in SearchTab:
            assert session.search.destination_for(tab).value == "asi-2"
        assert session.search.active_tab == SearchTab.HOTELS

    def test_prefill_without_match(self, search, session):
        assert not search.prefill(session, "Atlantis")
        assert session.search.active_tab == SearchTab.FLIGHTS


class TestTabOrder:
    """Test the order the form advances through tabs."""

    def test_next_tab(self):
        assert SearchTab.FLIGHTS.next() == SearchTab.HOTELS
        assert SearchTab.HOTELS.next() == SearchTab.TOURS

    def test_tours_is_last(self):
        assert SearchTab.TOURS.next() == SearchTab.TOURS
