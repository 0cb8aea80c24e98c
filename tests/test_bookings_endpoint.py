from eventhub.errors import StorageError


def test_create_booking(client, seed_event):
    r = client.post("/api/bookings", json={"event_id": seed_event["id"], "email": " User@Example.COM "})
    assert r.status_code == 201, r.text
    b = r.json()["booking"]
    assert b["email"] == "user@example.com"
    assert b["event_id"] == seed_event["id"]

def test_booking_unknown_event(client):
    r = client.post("/api/bookings", json={"event_id": "f" * 32, "email": "a@example.com"})
    assert r.status_code == 400
    assert r.json()["detail"]["reason"] == "referenced event does not exist"

def test_booking_bad_email(client, seed_event):
    r = client.post("/api/bookings", json={"event_id": seed_event["id"], "email": "not-an-email"})
    assert r.status_code == 400
    assert r.json()["detail"]["field"] == "email"

def test_booking_storage_down(client, monkeypatch):
    def _down(db, event_id):
        raise StorageError("event lookup")
    monkeypatch.setattr("eventhub.repositories.event_exists", _down)
    r = client.post("/api/bookings", json={"event_id": "abc", "email": "a@example.com"})
    assert r.status_code == 503
    assert r.json()["detail"]["code"] == "STORAGE_UNAVAILABLE"
