from typing import Any, Dict
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session

from eventhub.db import get_db
from eventhub.commit import commit_booking
from eventhub.errors import ConflictError, StorageError, ValidationError

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


class BookingIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    event_id: Any = None
    email: Any = None


@router.post("", status_code=201)
def create_booking(payload: BookingIn, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Book a seat for an existing event.

    400 if the email is malformed or the event does not exist,
    503 if the database could not be reached.
    """
    try:
        booking = commit_booking(db, payload.model_dump())
    except ValidationError as e:
        raise HTTPException(400, e.to_dict())
    except ConflictError as e:
        raise HTTPException(409, e.to_dict())
    except StorageError as e:
        raise HTTPException(503, e.to_dict())
    return {"success": True, "booking": booking}
