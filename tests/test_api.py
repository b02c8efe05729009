"""Tests for the HTTP API."""
import pytest
from fastapi.testclient import TestClient

from mytravel.main import app
from mytravel.models.session import MemorySessionBackend, SessionStore, get_session_store
from mytravel.services.booking_client import BookingClient
from mytravel.services.checkout import CheckoutService, get_checkout_service
from mytravel.services.session_lock import acquire_session_lock, release_session_lock


class CountingBackend(MemorySessionBackend):
    """Memory backend that counts writes."""

    def __init__(self):
        super().__init__()
        self.saves = 0

    def save(self, session):
        self.saves += 1
        super().save(session)


@pytest.fixture
def store():
    return SessionStore(CountingBackend())


@pytest.fixture
def client(store):
    service = CheckoutService(BookingClient(provider="mock"))
    app.dependency_overrides[get_session_store] = lambda: store
    app.dependency_overrides[get_checkout_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def session_id(client):
    return client.post("/api/session").json()["session_id"]


def add_item(client, session_id, **fields):
    body = {"title": "Museum", "duration": "1h", "travel_time": "15m", "location": "Paris, France", "cost": 0}
    body.update(fields)
    return client.post(f"/api/itinerary/{session_id}/items", json=body)


class TestDestinations:
    """Test catalog endpoints."""

    def test_search(self, client):
        response = client.get("/api/destinations", params={"q": "japan"})
        names = [d["name"] for d in response.json()["destinations"]]
        assert names == ["Tokyo, Japan", "Kyoto, Japan"]

    def test_filter_by_continent_and_type(self, client):
        response = client.get("/api/destinations", params={"continent": "Oceania", "type": "island"})
        ids = {d["id"] for d in response.json()["destinations"]}
        assert ids == {"oce-6", "oce-7"}

    def test_get_by_id(self, client):
        assert client.get("/api/destinations/eur-1").json()["city"] == "Paris"
        assert client.get("/api/destinations/nope").status_code == 404

    def test_travel_destination_details(self, client):
        data = client.get("/api/travel-destinations/4").json()
        assert data["title"] == "Kyoto Cultural Tour"
        assert data["details"]["language"] == "Japanese"


class TestItineraryApi:
    """Test itinerary endpoints."""

    def test_unknown_session(self, client):
        assert client.get("/api/itinerary/missing").status_code == 404

    def test_add_reorder_and_summary(self, client, session_id):
        add_item(client, session_id, title="Breakfast", duration="1h", travel_time="15m", cost=110)
        add_item(client, session_id, title="Museum", duration="3h", travel_time="20m", cost=200)
        add_item(client, session_id, title="Lunch", duration="1.5h", travel_time="10m", cost=260)

        response = client.post(
            f"/api/itinerary/{session_id}/reorder",
            json={"source_index": 2, "target_index": 0}
        )
        titles = [i["title"] for i in response.json()["items"]]
        assert titles == ["Lunch", "Breakfast", "Museum"]

        summary = client.get(f"/api/itinerary/{session_id}/summary").json()
        assert summary["total_cost"] == 570
        assert summary["total_activity_minutes"] == 330
        assert summary["total_travel_minutes"] == 45
        assert summary["activity_time"] == "5h 30m"

    def test_incomplete_item_is_ignored(self, client, session_id):
        response = add_item(client, session_id, title="")
        assert response.status_code == 200
        assert response.json()["item"] is None
        assert response.json()["itinerary"]["items"] == []

    def test_location_id(self, client, session_id):
        response = add_item(client, session_id, location="", location_id="asi-10")
        assert response.json()["item"]["location"] == "Kuala Lumpur, Malaysia"

    def test_remove(self, client, session_id):
        item = add_item(client, session_id).json()["item"]
        response = client.delete(f"/api/itinerary/{session_id}/items/{item['id']}")
        assert response.json()["items"] == []

    def test_export(self, client, session_id):
        add_item(client, session_id, title="Louvre Museum Tour", duration="3h", cost=200)
        response = client.get(f"/api/itinerary/{session_id}/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/markdown")
        assert "attachment" in response.headers["content-disposition"]
        assert "Louvre Museum Tour" in response.text
        assert "MYR 200.00" in response.text

    def test_oversized_duration_does_not_break_session(self, client, session_id):
        response = add_item(client, session_id, duration="1" * 400 + "h", travel_time="1" * 5000 + "m")
        assert response.status_code == 200
        assert response.json()["itinerary"]["items"][0]["duration_minutes"] == 0

        itinerary = client.get(f"/api/itinerary/{session_id}")
        assert itinerary.status_code == 200
        assert itinerary.json()["summary"]["total_minutes"] == 0

    def test_no_op_changes_are_not_persisted(self, client, session_id, store):
        add_item(client, session_id)
        saves = store.backend.saves

        client.delete(f"/api/itinerary/{session_id}/items/missing")
        client.post(f"/api/itinerary/{session_id}/reorder", json={"source_index": 0, "target_index": 5})
        client.delete(f"/api/cart/{session_id}/items/missing")

        assert store.backend.saves == saves


class TestBookingFlowApi:
    """Test search, cart and checkout endpoints end to end."""

    def test_search_select_checkout(self, client, session_id):
        results = client.get(
            f"/api/booking/{session_id}/search",
            params={"tab": "flights", "q": "Santorini"}
        ).json()["results"]
        assert [r["id"] for r in results] == ["f1"]
        assert results[0]["from"] == "New York"

        selected = client.post(
            f"/api/booking/{session_id}/select",
            json={"tab": "flights", "offer_id": "f1"}
        ).json()
        assert selected["search"]["active_tab"] == "hotels"

        hotels = client.get(f"/api/booking/{session_id}/search", params={"tab": "hotels"}).json()
        assert [h["id"] for h in hotels["results"]] == ["h1"]

        client.post(f"/api/booking/{session_id}/select", json={"tab": "hotels", "offer_id": "h1"})
        assert client.get(f"/api/cart/{session_id}").json()["total"] == 1100

        result = client.post(f"/api/checkout/{session_id}", json={
            "cardholder_name": "Aina Rahman",
            "card_number": "4242 4242 4242 4242",
            "expiry": "12/29",
            "cvc": "123",
            "customer_email": "aina@example.com",
        }).json()

        assert result["success"]
        assert result["booking"]["total_amount"] == 1100
        assert result["checkout"]["state"] == "confirmed"
        assert result["cart"]["count"] == 0

    def test_declined_checkout_preserves_cart(self, client, session_id):
        client.post(f"/api/cart/{session_id}/items", json={"type": "tour", "title": "Matterhorn Hike", "price": 50})

        result = client.post(f"/api/checkout/{session_id}", json={
            "cardholder_name": "Aina Rahman",
            "card_number": "4000 0000 0000 0000",
            "expiry": "12/29",
            "cvc": "123",
            "customer_email": "aina@example.com",
        }).json()

        assert not result["success"]
        assert result["payment"] == "declined"
        assert result["cart"]["count"] == 1

    def test_overlapping_checkout_is_rejected(self, client, session_id):
        client.post(f"/api/cart/{session_id}/items", json={"type": "tour", "title": "Matterhorn Hike", "price": 50})

        assert acquire_session_lock(session_id)
        try:
            response = client.post(f"/api/checkout/{session_id}", json={
                "cardholder_name": "Aina Rahman",
                "card_number": "4242 4242 4242 4242",
                "expiry": "12/29",
                "cvc": "123",
                "customer_email": "aina@example.com",
            })
        finally:
            release_session_lock(session_id)

        assert response.status_code == 409
        cart = client.get(f"/api/cart/{session_id}").json()
        assert cart["count"] == 1
        assert cart["total"] == 50

    def test_unknown_offer(self, client, session_id):
        response = client.post(f"/api/booking/{session_id}/select", json={"tab": "tours", "offer_id": "t99"})
        assert response.status_code == 404

    def test_cart_add_remove_clear(self, client, session_id):
        body = {"type": "tour", "title": "Matterhorn Hike", "price": 50}
        first = client.post(f"/api/cart/{session_id}/items", json=body).json()["item"]
        client.post(f"/api/cart/{session_id}/items", json=body)
        assert client.get(f"/api/cart/{session_id}").json()["total"] == 100

        assert client.delete(f"/api/cart/{session_id}/items/{first['id']}").json()["count"] == 1
        assert client.delete(f"/api/cart/{session_id}").json()["count"] == 0

    def test_prefill_and_tab(self, client, session_id):
        data = client.post(f"/api/booking/{session_id}/prefill", json={"destination": "Tokyo"}).json()
        assert data["matched"]
        assert data["search"]["active_tab"] == "hotels"

        state = client.put(f"/api/booking/{session_id}/tab", json={"tab": "tours"}).json()
        assert state["active_tab"] == "tours"


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
