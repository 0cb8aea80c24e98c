import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, JSON
from .db import Base


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# -----------------------------
# ORM models (tables) for events and bookings
# -----------------------------
class Event(Base):
    __tablename__ = "events"
    id          = Column(String(32), primary_key=True, default=new_id)
    title       = Column(String, nullable=False)
    slug        = Column(String, unique=True, index=True, nullable=False)  # lookup key for the read path
    description = Column(Text, nullable=False)
    overview    = Column(Text, nullable=False)
    image       = Column(String, nullable=False)
    venue       = Column(String, nullable=False)
    location    = Column(String, nullable=False)
    date        = Column(String(10), nullable=False)                      # YYYY-MM-DD
    time        = Column(String(5), nullable=False)                       # HH:MM, 24h
    mode        = Column(String, nullable=False)
    audience    = Column(String, nullable=False)
    agenda      = Column(JSON, nullable=False)                            # list[str]
    organizer   = Column(String, nullable=False)
    tags        = Column(JSON, nullable=False)                            # list[str]
    created_at  = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at  = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Event(id={self.id}, slug={self.slug}, date={self.date} {self.time})>"


class Booking(Base):
    __tablename__ = "bookings"
    # event_id is checked by the commit gate, not by a foreign key
    id         = Column(String(32), primary_key=True, default=new_id)
    event_id   = Column(String(32), index=True, nullable=False)
    email      = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Booking(id={self.id}, event_id={self.event_id}, email={self.email})>"
