import logging
from typing import Any, Dict, Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from eventhub.errors import ConflictError, StorageError
from eventhub.models import Booking, Event, new_id
from eventhub.normalizers.rules import EVENT_ARRAY_FIELDS, EVENT_STRING_FIELDS
from eventhub.normalizers.types import Record

log = logging.getLogger(__name__)

# Columns written from a normalized event record
EVENT_COLUMNS = EVENT_STRING_FIELDS + EVENT_ARRAY_FIELDS + ("slug",)

# -------------------------------------------------------------------
# Row -> dict serializers
# -------------------------------------------------------------------
def event_to_dict(e: Event) -> Dict[str, Any]:
    out: Dict[str, Any] = {"id": e.id}
    for col in EVENT_COLUMNS:
        out[col] = getattr(e, col)
    out["agenda"] = list(e.agenda)
    out["tags"] = list(e.tags)
    out["created_at"] = e.created_at
    out["updated_at"] = e.updated_at
    return out

def booking_to_dict(b: Booking) -> Dict[str, Any]:
    return {
        "id": b.id,
        "event_id": b.event_id,
        "email": b.email,
        "created_at": b.created_at,
        "updated_at": b.updated_at,
    }

# -------------------------------------------------------------------
# Reads
# -------------------------------------------------------------------
def event_exists(db: Session, event_id: str) -> bool:
    try:
        return db.execute(select(Event.id).where(Event.id == event_id)).first() is not None
    except SQLAlchemyError as e:
        log.exception("event lookup failed: event_id=%s", event_id)
        raise StorageError("event lookup") from e

def get_event(db: Session, event_id: str) -> Optional[Dict[str, Any]]:
    try:
        row = db.get(Event, event_id)
    except SQLAlchemyError as e:
        log.exception("event load failed: event_id=%s", event_id)
        raise StorageError("event load") from e
    return event_to_dict(row) if row is not None else None

def find_event_by_slug(db: Session, slug: str) -> Optional[Dict[str, Any]]:
    try:
        row = db.execute(select(Event).where(Event.slug == slug)).scalar_one_or_none()
    except SQLAlchemyError as e:
        log.exception("event lookup by slug failed: slug=%s", slug)
        raise StorageError("event lookup") from e
    return event_to_dict(row) if row is not None else None

# -------------------------------------------------------------------
# Writes
# -------------------------------------------------------------------
def save_event(db: Session, record: Record) -> Dict[str, Any]:
    """
    Insert or update one normalized event and commit.
    Slug uniqueness is left to the unique index so two racing writers
    cannot both succeed; the loser gets ConflictError.
    """
    eid = record.get("id")
    try:
        row = db.get(Event, eid) if eid else None
        if row is None:
            row = Event(id=eid or new_id())
            db.add(row)
        for col in EVENT_COLUMNS:
            setattr(row, col, record[col])
        db.commit()
        db.refresh(row)
    except IntegrityError as e:
        db.rollback()
        log.warning("event write rejected by unique index: slug=%s", record.get("slug"))
        raise ConflictError("slug", record.get("slug")) from e
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("event write failed: id=%s slug=%s", eid, record.get("slug"))
        raise StorageError("event write") from e
    return event_to_dict(row)

def save_booking(db: Session, record: Record) -> Dict[str, Any]:
    bid = record.get("id")
    try:
        row = db.get(Booking, bid) if bid else None
        if row is None:
            row = Booking(id=bid or new_id())
            db.add(row)
        row.event_id = record["event_id"]
        row.email    = record["email"]
        db.commit()
        db.refresh(row)
    except IntegrityError as e:
        db.rollback()
        log.warning("booking write rejected: id=%s", bid)
        raise ConflictError("id", bid) from e
    except SQLAlchemyError as e:
        db.rollback()
        log.exception("booking write failed: id=%s event_id=%s", bid, record.get("event_id"))
        raise StorageError("booking write") from e
    return booking_to_dict(row)
