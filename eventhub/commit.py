"""
Commit gate for events and bookings.

A candidate (plain dict of raw field values) goes through its normalizer
chain and, only if every step passes, is written by the repository layer:

    RECEIVED -> NORMALIZING -> REJECTED
                            -> FAILED       (storage error during a lookup)
                            -> PERSISTING -> COMMITTED
                                          -> FAILED

The first failing step raises and nothing is written. Re-saving a stored
record runs the full chain again; the chain is idempotent so an already
normalized record comes back unchanged.
"""
import logging
from enum import Enum
from typing import Any, Dict
from sqlalchemy.orm import Session

from eventhub import repositories
from eventhub.errors import DomainError, ValidationError
from eventhub.normalizers import get_booking_normalizer, get_event_normalizer
from eventhub.normalizers.rules import trim_or_empty
from eventhub.normalizers.types import Record, RecordKind

log = logging.getLogger(__name__)


class CommitState(Enum):
    RECEIVED = "received"
    NORMALIZING = "normalizing"
    REJECTED = "rejected"
    PERSISTING = "persisting"
    COMMITTED = "committed"
    FAILED = "failed"


def _enter(kind: RecordKind, state: CommitState, ref: Any = None) -> None:
    log.debug("%s commit -> %s (%s)", kind, state.value, ref)


def commit_event(db: Session, candidate: Record) -> Dict[str, Any]:
    """
    Validate, normalize and persist an event.

    Raises:
        ValidationError: a field is missing, blank or malformed.
        ConflictError: another event already holds the derived slug.
        StorageError: the database failed.
    """
    eid = candidate.get("id") or None
    _enter("event", CommitState.RECEIVED, eid)

    # Stored version decides whether the slug follows a title change;
    # it is loaded by the slug stage, after the field checks have passed
    def load_previous():
        return repositories.get_event(db, eid)

    _enter("event", CommitState.NORMALIZING, eid)
    try:
        record = get_event_normalizer(
            load_previous=load_previous if eid else None,
        ).normalize_record(candidate)
    except ValidationError as e:
        _enter("event", CommitState.REJECTED, eid)
        log.warning("event rejected: field=%s reason=%s", e.field, e.reason)
        raise
    except DomainError:
        _enter("event", CommitState.FAILED, eid)
        raise
    _enter("event", CommitState.PERSISTING, record["slug"])
    try:
        saved = repositories.save_event(db, record)
    except DomainError:
        _enter("event", CommitState.FAILED, record["slug"])
        raise
    _enter("event", CommitState.COMMITTED, saved["id"])
    log.info("event committed: id=%s slug=%s", saved["id"], saved["slug"])
    return saved


def commit_booking(db: Session, candidate: Record) -> Dict[str, Any]:
    """
    Validate, normalize and persist a booking.

    The referenced event is checked once, right before the write. An event
    deleted between that check and the insert leaves a dangling booking;
    nothing spans both tables transactionally.

    Raises:
        ValidationError: bad email, or the event does not exist.
        StorageError: the database failed, including during the event lookup.
    """
    bid = candidate.get("id") or None
    _enter("booking", CommitState.RECEIVED, bid)

    _enter("booking", CommitState.NORMALIZING, bid)
    try:
        record = get_booking_normalizer().normalize_record(candidate)
        record["event_id"] = _check_event_reference(db, record.get("event_id"))
    except ValidationError as e:
        _enter("booking", CommitState.REJECTED, bid)
        log.warning("booking rejected: field=%s reason=%s", e.field, e.reason)
        raise
    except DomainError:
        # event lookup hit a storage failure
        _enter("booking", CommitState.FAILED, bid)
        raise
    _enter("booking", CommitState.PERSISTING, record["event_id"])
    try:
        saved = repositories.save_booking(db, record)
    except DomainError:
        _enter("booking", CommitState.FAILED, record["event_id"])
        raise
    _enter("booking", CommitState.COMMITTED, saved["id"])
    log.info("booking committed: id=%s event_id=%s", saved["id"], saved["event_id"])
    return saved


def _check_event_reference(db: Session, raw: Any) -> str:
    event_id = trim_or_empty(raw)
    if not event_id:
        raise ValidationError("event_id", "required and empty")
    # StorageError from the lookup propagates untouched
    if not repositories.event_exists(db, event_id):
        raise ValidationError("event_id", "referenced event does not exist")
    return event_id
