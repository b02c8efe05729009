import requests
import json

BASE_URL = "http://localhost:8000/api"

def run_test():
    resp = requests.post(f"{BASE_URL}/session", json={})
    session_id = resp.json()["session_id"]

    for item in [
        {"title": "Breakfast at Cafe de Paris", "category": "Food", "duration": "1h",
         "travel_time": "15m", "location_id": "eur-1", "cost": 110},
        {"title": "Louvre Museum Tour", "category": "Activity", "duration": "3h",
         "travel_time": "20m", "location_id": "eur-1", "cost": 200},
        {"title": "Lunch at River Seine", "category": "Food", "duration": "1.5h",
         "travel_time": "10m", "location_id": "eur-1", "cost": 260},
    ]:
        requests.post(f"{BASE_URL}/itinerary/{session_id}/items", json=item)

    requests.post(f"{BASE_URL}/itinerary/{session_id}/reorder", json={"source_index": 2, "target_index": 1})
    summary = requests.get(f"{BASE_URL}/itinerary/{session_id}/summary").json()
    print(json.dumps(summary, indent=2))

    requests.post(f"{BASE_URL}/booking/{session_id}/select", json={"tab": "flights", "offer_id": "f4"})
    requests.post(f"{BASE_URL}/booking/{session_id}/select", json={"tab": "hotels", "offer_id": "h4"})
    checkout_payload = {
        "cardholder_name": "Aina Rahman", "card_number": "4242 4242 4242 4242",
        "expiry": "12/29", "cvc": "123", "customer_email": "aina@example.com"
    }
    resp = requests.post(f"{BASE_URL}/checkout/{session_id}", json=checkout_payload)

    if resp.status_code == 200:
        result = resp.json()
        print(f"\n{result['message']}")
        if result.get("booking"):
            print(f"Booking #{result['booking']['id']}: {result['booking']['total_amount']}")
    else:
        print("Error:", resp.text)

if __name__ == "__main__":
    run_test()
