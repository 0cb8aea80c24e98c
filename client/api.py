import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Content-Type":"application/json"})

def healthz():          r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()
def create_event(b):    r=S.post(f"{API}/api/events",json=b,timeout=30); r.raise_for_status(); return r.json()
def create_booking(b):  r=S.post(f"{API}/api/bookings",json=b,timeout=30); r.raise_for_status(); return r.json()

def update_event(event_id: str, b: dict):
    r = S.put(f"{API}/api/events/{event_id}", json=b, timeout=30)
    r.raise_for_status()
    return r.json()

def event_by_slug(slug: str):
    """Return the event dict, or None when the API answers 404."""
    r = S.get(f"{API}/api/events/{slug}", timeout=20)
    if r.status_code == 404:
        return None
    r.raise_for_status()
    return r.json()["event"]
