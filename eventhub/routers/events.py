import re
from typing import Any, Dict
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from eventhub.db import get_db
from eventhub.commit import commit_event
from eventhub.errors import ConflictError, StorageError, ValidationError
from eventhub.repositories import find_event_by_slug

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/api/events", tags=["events"])

SLUG_PATTERN = re.compile(r"[a-z0-9-]+")


# Request schema: raw values only, the commit gate does the checking
class EventIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Any = None
    description: Any = None
    overview: Any = None
    image: Any = None
    venue: Any = None
    location: Any = None
    date: Any = None
    time: Any = None
    mode: Any = None
    audience: Any = None
    agenda: Any = None
    organizer: Any = None
    tags: Any = None


def _commit(db: Session, candidate: Dict[str, Any]) -> Dict[str, Any]:
    """Run the commit gate and map domain errors to HTTP responses."""
    try:
        return commit_event(db, candidate)
    except ValidationError as e:
        raise HTTPException(400, e.to_dict())
    except ConflictError as e:
        raise HTTPException(409, e.to_dict())
    except StorageError as e:
        raise HTTPException(503, e.to_dict())


@router.post("", status_code=201)
def create_event(payload: EventIn, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Create an event; the slug is derived from the title."""
    event = _commit(db, payload.model_dump())
    return {"success": True, "event": event}


@router.put("/{event_id}")
def update_event(event_id: str, payload: EventIn, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Re-save an event through the full pipeline.
    Unknown ids are created, mirroring a document-store save.
    """
    event = _commit(db, {**payload.model_dump(), "id": event_id})
    return {"success": True, "event": event}


@router.get("/{slug}")
def get_event_by_slug(slug: str, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Fetch a single event by slug.

    Response JSON:
      {"success": True, "event": {...}, "message": "Event fetched successfully"}
    """
    normalized = (slug or "").strip()
    if not normalized:
        raise HTTPException(400, "Slug is required.")
    if not SLUG_PATTERN.fullmatch(normalized):
        raise HTTPException(400, "Invalid slug format.")

    try:
        event = find_event_by_slug(db, normalized)
    except StorageError as e:
        raise HTTPException(503, e.to_dict())

    if event is None:
        raise HTTPException(404, "Event not found.")
    return {"success": True, "event": event, "message": "Event fetched successfully"}
